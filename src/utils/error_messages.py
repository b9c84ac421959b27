"""Helpers that turn submission failures into user-facing text."""
from typing import Any

DEFAULT_ERROR_MESSAGE = "An unexpected error occurred. Please try again."


def get_error_message(error: Any) -> str:
    """
    Extract a readable message from an error-ish value.

    Accepts plain strings, exceptions (using ``message`` or ``str(error)``)
    and response-like objects exposing ``response.json()["message"]``.
    """
    if isinstance(error, str):
        return error or DEFAULT_ERROR_MESSAGE

    message = getattr(error, "message", None)
    if isinstance(message, str) and message:
        return message

    response = getattr(error, "response", None)
    if response is not None:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])

    if isinstance(error, Exception) and str(error):
        return str(error)

    return DEFAULT_ERROR_MESSAGE


def get_error_title(error: Any) -> str:
    """
    Pick a short heading for an error message.

    Returns one of "Already Registered", "Invalid Information",
    "Server Error", "Connection Error" or "Error".
    """
    message = get_error_message(error).lower()

    if "already registered" in message:
        return "Already Registered"

    if "validation" in message or "check your registration details" in message:
        return "Invalid Information"

    if "technical difficulties" in message or "server error" in message:
        return "Server Error"

    if "network" in message or "connection" in message:
        return "Connection Error"

    return "Error"
