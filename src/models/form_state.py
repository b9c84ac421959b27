"""UI state wrapped around the registration record."""
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from src.models.registration import Registration

WIDGET_KEY_PREFIX = "registration_v"


@dataclass
class RegistrationFormState:
    """Everything the registration page needs to remember between reruns."""

    registration: Registration = field(default_factory=Registration)
    errors: Dict[str, str] = field(default_factory=dict)
    is_pending: bool = False
    show_success: bool = False
    last_error: Optional[Tuple[str, str]] = None  # (title, message)
    form_version: int = 0

    def error_for(self, path: str) -> Optional[str]:
        """Return the validation message for a field path such as ``kids.0.name``."""
        return self.errors.get(path)

    def widget_key(self, name: str) -> str:
        """
        Build a Streamlit widget key tied to the current form version.

        Bumping ``form_version`` on reset gives every widget a fresh key, so
        Streamlit drops the values the participant typed before.
        """
        return f"{WIDGET_KEY_PREFIX}{self.form_version}_{name}"
