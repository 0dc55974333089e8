"""Unit tests for client settings."""

import pytest
from pydantic import ValidationError as SchemaValidationError

from tourmanager import BASE_URL, Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("RK_API_URL", raising=False)
    monkeypatch.delenv("RK_API_KEY", raising=False)

    settings = Settings(_env_file=None)

    assert settings.api_url == BASE_URL
    assert settings.api_key is None
    assert settings.timeout == 30.0


def test_reads_prefixed_environment(monkeypatch):
    """Test settings come from RK_ environment variables."""
    monkeypatch.setenv("RK_API_URL", "https://staging.example.com/")
    monkeypatch.setenv("RK_API_KEY", "secret")
    monkeypatch.setenv("RK_ENVIRONMENT", "Staging")

    settings = Settings(_env_file=None)

    assert settings.api_url == "https://staging.example.com"
    assert settings.api_key == "secret"
    assert settings.environment == "staging"
    assert not settings.debug


def test_explicit_values_win(monkeypatch):
    monkeypatch.setenv("RK_API_KEY", "from-env")

    assert Settings(api_key="explicit", _env_file=None).api_key == "explicit"


def test_invalid_environment():
    with pytest.raises(SchemaValidationError):
        Settings(environment="qa", _env_file=None)


def test_invalid_timeout():
    with pytest.raises(SchemaValidationError):
        Settings(timeout=0, _env_file=None)


def test_log_level_normalized():
    assert Settings(log_level="debug", _env_file=None).log_level == "DEBUG"

    with pytest.raises(SchemaValidationError):
        Settings(log_level="verbose", _env_file=None)
