"""Application settings read from the environment (and an optional .env file)."""
import logging
import os
from dataclasses import dataclass
from threading import Lock
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:5000"
DEFAULT_EVENT_NAME = "Sports & Family Day"
DEFAULT_REQUEST_TIMEOUT = 10
DEFAULT_RETRIES = 2

_ENV_LOADED = False
_ENV_LOCK = Lock()
_settings_cache: Optional["Settings"] = None


@dataclass
class Settings:
    """Runtime configuration for the registration site."""

    api_base_url: str = DEFAULT_API_URL
    request_timeout_s: int = DEFAULT_REQUEST_TIMEOUT
    retries: int = DEFAULT_RETRIES
    event_name: str = DEFAULT_EVENT_NAME
    log_level: str = "INFO"


def _load_env() -> None:
    """Load a .env file once per process; real environment variables win."""
    global _ENV_LOADED

    if _ENV_LOADED:
        return

    with _ENV_LOCK:
        if _ENV_LOADED:
            return
        load_dotenv(override=False)
        _ENV_LOADED = True


def _int_from_env(name: str, default: int, minimum: int = 0) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default
    if value < minimum:
        logger.warning("Ignoring out-of-range %s=%r, using %s", name, raw, default)
        return default
    return value


def get_settings() -> Settings:
    """
    Return the cached settings, reading the environment on first use.

    Environment variables:
        SPORTS_DAY_API_URL: Base URL of the registration endpoint
        SPORTS_DAY_REQUEST_TIMEOUT: Request timeout in seconds
        SPORTS_DAY_RETRIES: Extra attempts after a timeout/connection error
        SPORTS_DAY_EVENT_NAME: Event name shown in the page header
        SPORTS_DAY_LOG_LEVEL: Root log level (DEBUG, INFO, ...)
    """
    global _settings_cache

    if _settings_cache is not None:
        return _settings_cache

    _load_env()

    api_url = os.getenv("SPORTS_DAY_API_URL", "").strip() or DEFAULT_API_URL

    _settings_cache = Settings(
        api_base_url=api_url.rstrip("/"),
        request_timeout_s=_int_from_env("SPORTS_DAY_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT, minimum=1),
        retries=_int_from_env("SPORTS_DAY_RETRIES", DEFAULT_RETRIES),
        event_name=os.getenv("SPORTS_DAY_EVENT_NAME", "").strip() or DEFAULT_EVENT_NAME,
        log_level=os.getenv("SPORTS_DAY_LOG_LEVEL", "").strip().upper() or "INFO",
    )
    return _settings_cache


def _clear_cache():
    """Drop cached settings so the next call re-reads the environment."""
    global _settings_cache
    _settings_cache = None
