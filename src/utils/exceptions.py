"""Custom exception classes."""
from typing import Any, Dict, Optional


class ValidationError(Exception):
    """Raised when data fails validation."""
    pass


class RegistrationValidationError(ValidationError):
    """Raised when a registration has one or more invalid fields."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        fields = ", ".join(self.errors)
        super().__init__(f"Registration validation failed: {fields}")


class ApiError(RuntimeError):
    """Base class for registration endpoint failures."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.payload = payload
        self.context = context


class ApiClientError(ApiError):
    """HTTP 4xx from the registration endpoint."""
    pass


class ApiServerError(ApiError):
    """HTTP 5xx from the registration endpoint."""
    pass


class ApiTimeoutError(ApiError):
    """Transport level timeout or connectivity failure."""
    pass
