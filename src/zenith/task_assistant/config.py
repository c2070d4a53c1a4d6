"""Configuration for the task assistant."""

import os
from dataclasses import dataclass

from .exceptions import ConfigurationError

# Model service
DEFAULT_OLLAMA_MODEL = "llama3.2:3b"
DEFAULT_OLLAMA_BASE_URL = "http://localhost:11434"
DEFAULT_OLLAMA_TIMEOUT = 30.0  # seconds
DEFAULT_OLLAMA_TEMPERATURE = 0.1

# Environment variables
ENV_MODEL = "ZENITH_MODEL"
ENV_BASE_URL = "ZENITH_OLLAMA_HOST"
ENV_API_KEY = "ZENITH_API_KEY"
ENV_API_KEY_FALLBACK = "OLLAMA_API_KEY"
ENV_TIMEOUT = "ZENITH_TIMEOUT"
ENV_TEMPERATURE = "ZENITH_TEMPERATURE"
ENV_OFFLINE = "ZENITH_OFFLINE"

# Parser prompt
PARSER_PERSONA = (
    "You are the parser for Zenith.sys, a technical task management system.\n"
    "Your objective is to convert natural language input into a structured "
    "JSON task protocol."
)

# Schedule analysis
ANALYSIS_SYSTEM_INSTRUCTION = (
    "Analyze the user's workload as a technical system monitor. Provide a brief, "
    "clinical summary, 3 efficiency optimization protocols (suggestions), and "
    "determine the system load (mood: calm, busy, or overloaded)."
)
ANALYSIS_CONTENTS_PREFIX = "Here is the current task registry: "

IDLE_SUMMARY = "System idle. No active protocols detected."
IDLE_SUGGESTIONS = (
    "Initiate new protocols",
    "Review archived data",
    "Optimize system resources",
)
OFFLINE_SUMMARY = "Analysis subsystem offline."

_TRUE_VALUES = {"1", "true", "yes", "y", "on"}


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class Settings:
    """Model service settings, read once at startup."""

    model: str = DEFAULT_OLLAMA_MODEL
    base_url: str = DEFAULT_OLLAMA_BASE_URL
    api_key: str | None = None
    timeout: float = DEFAULT_OLLAMA_TIMEOUT
    temperature: float = DEFAULT_OLLAMA_TEMPERATURE
    offline: bool = False

    @staticmethod
    def from_env() -> "Settings":
        """
        Build settings from environment variables.

        The API key is not validated here; a missing or invalid key
        surfaces as a request error.

        Raises:
            ConfigurationError: If a numeric variable cannot be parsed
        """
        api_key = os.getenv(ENV_API_KEY) or os.getenv(ENV_API_KEY_FALLBACK) or None
        return Settings(
            model=_env_str(ENV_MODEL, DEFAULT_OLLAMA_MODEL),
            base_url=_env_str(ENV_BASE_URL, DEFAULT_OLLAMA_BASE_URL),
            api_key=api_key,
            timeout=_env_float(ENV_TIMEOUT, DEFAULT_OLLAMA_TIMEOUT),
            temperature=_env_float(ENV_TEMPERATURE, DEFAULT_OLLAMA_TEMPERATURE),
            offline=_env_bool(ENV_OFFLINE, False),
        )
