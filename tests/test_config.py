"""
Tests for settings and logging setup.
"""

import logging

import pytest
from pydantic import ValidationError

from emailcheck.config import Settings, configure_logging


class TestSettings:
    """Environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_REJECTIONS", raising=False)

        s = Settings(_env_file=None)

        assert s.APP_NAME == "emailcheck"
        assert s.LOG_REJECTIONS is False

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LOG_REJECTIONS", "true")

        s = Settings(_env_file=None)

        assert s.LOG_LEVEL == "DEBUG"
        assert s.LOG_REJECTIONS is True

    def test_invalid_bool_raises(self, monkeypatch):
        monkeypatch.setenv("LOG_REJECTIONS", "not-a-bool")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestConfigureLogging:
    """Opt-in logging setup."""

    @pytest.fixture(autouse=True)
    def restore_level(self):
        log = logging.getLogger("emailcheck")
        previous = log.level
        yield
        log.setLevel(previous)

    def test_sets_package_level(self):
        log = configure_logging("DEBUG")

        assert log.name == "emailcheck"
        assert log.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        log = configure_logging("chatty")

        assert log.level == logging.INFO
