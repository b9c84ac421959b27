"""Tests for environment-driven settings."""
import logging

import pytest

from src.utils import settings as settings_module
from src.utils.logging_utils import coerce_level, configure_logging
from src.utils.settings import (
    DEFAULT_API_URL,
    DEFAULT_EVENT_NAME,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_RETRIES,
    get_settings,
)

ENV_VARS = [
    "SPORTS_DAY_API_URL",
    "SPORTS_DAY_REQUEST_TIMEOUT",
    "SPORTS_DAY_RETRIES",
    "SPORTS_DAY_EVENT_NAME",
    "SPORTS_DAY_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate each test from the real environment and any .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings_module, "_ENV_LOADED", True)
    settings_module._clear_cache()
    yield
    settings_module._clear_cache()


class TestGetSettings:
    """Tests for get_settings."""

    def test_defaults(self):
        settings = get_settings()

        assert settings.api_base_url == DEFAULT_API_URL
        assert settings.request_timeout_s == DEFAULT_REQUEST_TIMEOUT
        assert settings.retries == DEFAULT_RETRIES
        assert settings.event_name == DEFAULT_EVENT_NAME
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("SPORTS_DAY_API_URL", "https://register.example.ae/")
        monkeypatch.setenv("SPORTS_DAY_REQUEST_TIMEOUT", "30")
        monkeypatch.setenv("SPORTS_DAY_RETRIES", "0")
        monkeypatch.setenv("SPORTS_DAY_EVENT_NAME", "DOF Sports Day")
        monkeypatch.setenv("SPORTS_DAY_LOG_LEVEL", "debug")

        settings = get_settings()

        assert settings.api_base_url == "https://register.example.ae"
        assert settings.request_timeout_s == 30
        assert settings.retries == 0
        assert settings.event_name == "DOF Sports Day"
        assert settings.log_level == "DEBUG"

    def test_invalid_numbers_fall_back_to_defaults(self, monkeypatch):
        monkeypatch.setenv("SPORTS_DAY_REQUEST_TIMEOUT", "soon")
        monkeypatch.setenv("SPORTS_DAY_RETRIES", "-3")

        settings = get_settings()

        assert settings.request_timeout_s == DEFAULT_REQUEST_TIMEOUT
        assert settings.retries == DEFAULT_RETRIES

    def test_zero_timeout_rejected(self, monkeypatch):
        monkeypatch.setenv("SPORTS_DAY_REQUEST_TIMEOUT", "0")

        assert get_settings().request_timeout_s == DEFAULT_REQUEST_TIMEOUT

    def test_settings_are_cached(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("SPORTS_DAY_EVENT_NAME", "Changed")

        assert get_settings() is first

    def test_clear_cache_rereads_environment(self, monkeypatch):
        get_settings()
        monkeypatch.setenv("SPORTS_DAY_EVENT_NAME", "Changed")
        settings_module._clear_cache()

        assert get_settings().event_name == "Changed"

    def test_env_file_loaded_once(self, monkeypatch):
        calls = []
        monkeypatch.setattr(settings_module, "_ENV_LOADED", False)
        monkeypatch.setattr(settings_module, "load_dotenv", lambda **kwargs: calls.append(kwargs))

        get_settings()
        settings_module._clear_cache()
        get_settings()

        assert calls == [{"override": False}]


class TestLogging:
    """Tests for logging helpers."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("debug", logging.DEBUG),
            ("WARNING", logging.WARNING),
            ("20", 20),
            (logging.ERROR, logging.ERROR),
            ("", logging.INFO),
            (None, logging.INFO),
            ("verbose", logging.INFO),
        ],
    )
    def test_coerce_level(self, value, expected):
        assert coerce_level(value) == expected

    def test_configure_logging_sets_root_level(self):
        root = logging.getLogger()
        previous = root.level
        try:
            assert configure_logging("warning") == logging.WARNING
            assert root.level == logging.WARNING
        finally:
            root.setLevel(previous)
