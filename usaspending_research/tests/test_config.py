"""Tests for configuration loading and validation."""

import pytest

from usaspending_research.config import Settings, load_config, validate_config


@pytest.fixture
def clean_env(settings, monkeypatch, tmp_path):
    """No USASPENDING_* variables and no .env file in the working directory."""
    monkeypatch.chdir(tmp_path)
    return monkeypatch


def test_defaults(clean_env):
    config = load_config()
    assert config.base_url == "https://api.usaspending.gov/api/v2"
    assert config.timeout_seconds == 90
    assert config.max_retries == 2
    assert config.retry_delay == 1.0
    assert config.request_delay == 0.1
    assert config.transport == "stdio"


def test_environment_overrides(clean_env):
    clean_env.setenv("USASPENDING_MAX_RETRIES", "5")
    clean_env.setenv("USASPENDING_REQUEST_DELAY_MS", "250")
    clean_env.setenv("USASPENDING_TRANSPORT", "http")
    clean_env.setenv("USASPENDING_LOG_LEVEL", "DEBUG")

    config = validate_config()
    assert config.max_retries == 5
    assert config.request_delay == 0.25
    assert config.transport == "http"
    assert config.log_level == "DEBUG"


def test_dotenv_file_is_read(clean_env, tmp_path):
    (tmp_path / ".env").write_text("USASPENDING_TIMEOUT_SECONDS=30\n")
    assert Settings().timeout_seconds == 30


def test_invalid_values_are_all_named(clean_env):
    clean_env.setenv("USASPENDING_TIMEOUT_SECONDS", "-1")
    clean_env.setenv("USASPENDING_TRANSPORT", "carrier-pigeon")

    with pytest.raises(ValueError) as exc_info:
        validate_config()

    message = str(exc_info.value)
    assert "USASPENDING_TIMEOUT_SECONDS" in message
    assert "USASPENDING_TRANSPORT" in message
