"""Tests for settings loaded from the environment."""

import pytest

from zenith.task_assistant.config import (
    DEFAULT_OLLAMA_BASE_URL,
    DEFAULT_OLLAMA_MODEL,
    DEFAULT_OLLAMA_TEMPERATURE,
    DEFAULT_OLLAMA_TIMEOUT,
    Settings,
)
from zenith.task_assistant.exceptions import ConfigurationError


@pytest.mark.unit
class TestSettingsFromEnv:
    """Test cases for Settings.from_env."""

    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        settings = Settings.from_env()

        assert settings.model == DEFAULT_OLLAMA_MODEL
        assert settings.base_url == DEFAULT_OLLAMA_BASE_URL
        assert settings.api_key is None
        assert settings.timeout == DEFAULT_OLLAMA_TIMEOUT
        assert settings.temperature == DEFAULT_OLLAMA_TEMPERATURE
        assert settings.offline is False

    def test_overrides(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("ZENITH_MODEL", "gpt-oss:20b")
        clean_env.setenv("ZENITH_OLLAMA_HOST", "https://ollama.com")
        clean_env.setenv("ZENITH_API_KEY", "secret")
        clean_env.setenv("ZENITH_TIMEOUT", "12.5")
        clean_env.setenv("ZENITH_TEMPERATURE", "0")
        clean_env.setenv("ZENITH_OFFLINE", "yes")

        settings = Settings.from_env()

        assert settings.model == "gpt-oss:20b"
        assert settings.base_url == "https://ollama.com"
        assert settings.api_key == "secret"
        assert settings.timeout == 12.5
        assert settings.temperature == 0.0
        assert settings.offline is True

    def test_api_key_fallback_variable(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("OLLAMA_API_KEY", "fallback")

        assert Settings.from_env().api_key == "fallback"

    def test_blank_values_use_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("ZENITH_MODEL", "  ")
        clean_env.setenv("ZENITH_TIMEOUT", "")

        settings = Settings.from_env()

        assert settings.model == DEFAULT_OLLAMA_MODEL
        assert settings.timeout == DEFAULT_OLLAMA_TIMEOUT

    def test_invalid_number_raises(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("ZENITH_TIMEOUT", "soon")

        with pytest.raises(ConfigurationError, match="ZENITH_TIMEOUT"):
            Settings.from_env()
