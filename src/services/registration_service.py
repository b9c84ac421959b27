"""Registration service for submitting the Sports & Family Day form."""
import logging
from typing import Optional, Tuple

from src.models.registration import Registration
from src.services.api_client import RegistrationApiClient
from src.utils.error_messages import get_error_message
from src.utils.exceptions import ApiClientError, ApiError, ApiServerError, ApiTimeoutError
from src.utils.validation import validate_registration

logger = logging.getLogger(__name__)

REGISTRATIONS_PATH = "/api/registrations"

SUCCESS_MESSAGE = (
    "Thank you for registering for Company Sports Day. "
    "You'll receive a confirmation email shortly with event details."
)
INVALID_MESSAGE = "Please check your registration details."
SERVER_ERROR_MESSAGE = "We're experiencing technical difficulties. Please try again later."


def submit_registration(
    registration: Registration,
    client: Optional[RegistrationApiClient] = None,
) -> Tuple[bool, str]:
    """
    Validate and submit a registration.

    Args:
        registration: Completed registration
        client: API client (defaults to one built from settings)

    Returns:
        Tuple of (success: bool, message: str)
        - (True, SUCCESS_MESSAGE) on success
        - (False, INVALID_MESSAGE) if the registration fails local validation
        - (False, server message) if the endpoint rejects it
        - (False, error_message) on network or server failure

    Behavior:
        - Never sends an invalid registration
        - Logs failures; nothing is raised to the UI
    """
    errors = validate_registration(registration)
    if errors:
        logger.info("Registration blocked by validation: %s", ", ".join(errors))
        return False, INVALID_MESSAGE

    if client is None:
        client = RegistrationApiClient()

    try:
        client.post_json(REGISTRATIONS_PATH, registration.to_payload())
    except ApiClientError as e:
        logger.warning("Registration rejected (%s): %s", e.status, e.message)
        return False, get_error_message(e)
    except ApiServerError as e:
        logger.error("Registration endpoint error (%s): %s", e.status, e.message)
        return False, SERVER_ERROR_MESSAGE
    except ApiTimeoutError as e:
        logger.error("Registration endpoint unreachable: %s", e.context)
        return False, get_error_message(e)
    except ApiError as e:
        logger.error("Registration failed: %s", e)
        return False, get_error_message(e)

    kid_count = len(registration.kids) if registration.bringing_kids else 0
    logger.info("Registration submitted with %d kid record(s)", kid_count)
    return True, SUCCESS_MESSAGE
