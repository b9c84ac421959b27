"""Registration form lifecycle and its Streamlit session-state binding."""
import logging
from typing import Optional, Tuple

import streamlit as st

from src.models.form_state import WIDGET_KEY_PREFIX, RegistrationFormState
from src.models.registration import Registration
from src.services.api_client import RegistrationApiClient
from src.services.registration_service import submit_registration
from src.utils.error_messages import get_error_title
from src.utils.validation import validate_registration

logger = logging.getLogger(__name__)

FORM_STATE_KEY = "registration_form_state"


def get_form_state() -> RegistrationFormState:
    """
    Return the form state for the current browser session, creating it on first use.

    Behavior:
        - Stored in st.session_state[FORM_STATE_KEY]
        - Survives Streamlit reruns until clear_form_state() is called
    """
    if FORM_STATE_KEY not in st.session_state:
        st.session_state[FORM_STATE_KEY] = RegistrationFormState()
    return st.session_state[FORM_STATE_KEY]


def clear_form_state() -> None:
    """
    Forget the current form state and every value its widgets hold.

    The next state starts one version later so no widget key is reused.
    """
    previous = st.session_state.get(FORM_STATE_KEY)
    for key in [k for k in st.session_state.keys() if str(k).startswith(WIDGET_KEY_PREFIX)]:
        del st.session_state[key]
    if previous is not None:
        st.session_state[FORM_STATE_KEY] = RegistrationFormState(form_version=previous.form_version + 1)


def reset_form(state: RegistrationFormState) -> None:
    """Discard the registration and give every widget a fresh key."""
    state.registration = Registration()
    state.errors = {}
    state.last_error = None
    state.form_version += 1


def dismiss_success(state: RegistrationFormState) -> None:
    """Leave the thank-you panel so another person can register."""
    state.show_success = False


def submit_form(
    state: RegistrationFormState,
    client: Optional[RegistrationApiClient] = None,
) -> Tuple[bool, str]:
    """
    Validate and submit the form held in ``state``.

    Returns:
        Tuple of (success: bool, message: str)

    Behavior:
        - Ignored while a previous submission is still pending
        - Invalid: stores field errors and keeps the registration for correction
        - Success: resets the registration and shows the thank-you panel
        - Failure: keeps the registration and records (title, message) in last_error
    """
    if state.is_pending:
        return False, "Registration is already being processed."

    state.last_error = None
    state.errors = validate_registration(state.registration)
    if state.errors:
        return False, "Please fix the highlighted fields."

    state.is_pending = True
    try:
        success, message = submit_registration(state.registration, client=client)
    finally:
        state.is_pending = False

    if success:
        reset_form(state)
        state.show_success = True
    else:
        state.last_error = (get_error_title(message), message)
        logger.info("Registration kept for correction: %s", message)

    return success, message
