"""
Tests for settings loading and logging setup.
"""

import logging

import pytest
from loguru import logger

from src.config.settings import AppSettings, load_settings
from src.logging.setup import setup_logging


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("PORT", "HOST", "LOG_LEVEL", "SEASON", "REQUEST_TIMEOUT", "VEXDB_API_URL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestAppSettings:
    def test_defaults(self, clean_env):
        settings = AppSettings(_env_file=None)

        assert settings.port == 5000
        assert settings.host == "0.0.0.0"
        assert settings.season == "current"
        assert settings.vexdb_api_url == "https://api.vexdb.io/v1"
        assert settings.teams_page_url.endswith("RE-VRC-18-6082.html")
        assert settings.request_timeout == 30.0
        assert settings.cors_allow_origins == ["*"]

    def test_port_from_environment(self, clean_env):
        clean_env.setenv("PORT", "8080")
        assert AppSettings(_env_file=None).port == 8080

    def test_environment_names_are_case_insensitive(self, clean_env):
        clean_env.setenv("season", "2018-2019")
        assert AppSettings(_env_file=None).season == "2018-2019"

    def test_timeout_must_be_positive(self, clean_env):
        clean_env.setenv("REQUEST_TIMEOUT", "0")
        with pytest.raises(ValueError):
            AppSettings(_env_file=None)


class TestLoadSettings:
    def test_log_level_is_upper_cased(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "debug")
        assert load_settings().log_level == "DEBUG"

    def test_invalid_log_level_falls_back_to_info(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "chatty")
        assert load_settings().log_level == "INFO"

    def test_invalid_values_exit(self, clean_env):
        clean_env.setenv("PORT", "not-a-port")
        with pytest.raises(SystemExit):
            load_settings()


class TestSetupLogging:
    def test_standard_logging_is_routed_to_loguru(self):
        setup_logging("DEBUG")
        messages = []
        sink_id = logger.add(lambda message: messages.append(message.record["message"]))
        try:
            logging.getLogger("httpx").info("HTTP Request: GET https://api.vexdb.io/v1")
        finally:
            logger.remove(sink_id)

        assert "HTTP Request: GET https://api.vexdb.io/v1" in messages

    def test_uvicorn_loggers_use_the_intercept_handler(self):
        setup_logging("INFO")
        handlers = logging.getLogger("uvicorn.error").handlers
        assert [type(h).__name__ for h in handlers] == ["InterceptHandler"]
