"""Application Settings — environment overrides and validation."""

import pytest
from pydantic import ValidationError

from payments.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.app_name == "Payment Instructions API"
    assert settings.log_requests is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_FORMAT", "TEXT")
    settings = Settings(_env_file=None)
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "text"


def test_unknown_log_format_rejected(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
