"""Unit tests for registration_service."""
from unittest.mock import MagicMock

import pytest
import requests

from src.models.registration import Registration
from src.services.api_client import HttpConfig, RegistrationApiClient
from src.services.registration_service import (
    INVALID_MESSAGE,
    REGISTRATIONS_PATH,
    SERVER_ERROR_MESSAGE,
    SUCCESS_MESSAGE,
    submit_registration,
)
from src.utils.error_messages import get_error_title
from src.utils.exceptions import ApiClientError, ApiError, ApiServerError, ApiTimeoutError


@pytest.fixture
def valid_registration():
    """Create a registration that passes validation."""
    return Registration(
        full_name="Aisha Rahman",
        email="aisha.rahman@company.ae",
        phone="+971501234567",
        department="Finance",
        gender="female",
        tshirt_size="L",
        entertainment_sports=["volleyball", "padel"],
        last_exercise="last-month",
        medical_conditions=["none"],
        guardian_signature="Aisha Rahman",
    )


@pytest.fixture
def client():
    return MagicMock()


class TestSubmitRegistration:
    """Test submit_registration function."""

    def test_successful_submission(self, valid_registration, client):
        client.post_json.return_value = {"id": 1}

        success, message = submit_registration(valid_registration, client=client)

        assert success is True
        assert message == SUCCESS_MESSAGE
        client.post_json.assert_called_once_with(REGISTRATIONS_PATH, valid_registration.to_payload())

    def test_invalid_registration_is_not_sent(self, client):
        success, message = submit_registration(Registration(), client=client)

        assert success is False
        assert message == INVALID_MESSAGE
        client.post_json.assert_not_called()

    def test_rejection_returns_server_message(self, valid_registration, client):
        client.post_json.side_effect = ApiClientError("This email is already registered", status=409)

        success, message = submit_registration(valid_registration, client=client)

        assert success is False
        assert message == "This email is already registered"

    def test_server_error_returns_generic_message(self, valid_registration, client):
        client.post_json.side_effect = ApiServerError("Traceback ...", status=500)

        success, message = submit_registration(valid_registration, client=client)

        assert success is False
        assert message == SERVER_ERROR_MESSAGE

    def test_timeout_returns_connection_message(self, valid_registration, client):
        client.post_json.side_effect = ApiTimeoutError("Network error: unable to reach the registration server.")

        success, message = submit_registration(valid_registration, client=client)

        assert success is False
        assert "Network error" in message

    def test_default_client_is_built(self, valid_registration, monkeypatch):
        built = MagicMock()
        monkeypatch.setattr("src.services.registration_service.RegistrationApiClient", lambda: built)

        success, _ = submit_registration(valid_registration)

        assert success is True
        built.post_json.assert_called_once()

    def test_failure_is_logged(self, valid_registration, client, caplog):
        client.post_json.side_effect = ApiServerError("boom", status=503)

        with caplog.at_level("ERROR", logger="src.services.registration_service"):
            submit_registration(valid_registration, client=client)

        assert "503" in caplog.text

    def test_unexpected_transport_error_returns_message(self, valid_registration, client):
        client.post_json.side_effect = ApiError(
            "Network error: the registration request could not be completed. Please try again later."
        )

        success, message = submit_registration(valid_registration, client=client)

        assert success is False
        assert message.startswith("Network error")

    def test_broken_connection_through_real_client(self, valid_registration):
        session = MagicMock()
        session.post.side_effect = requests.exceptions.ChunkedEncodingError("broken")
        real_client = RegistrationApiClient(HttpConfig(base_url="http://sportsday.test"), session=session)

        success, message = submit_registration(valid_registration, client=real_client)

        assert success is False
        assert get_error_title(message) == "Connection Error"
