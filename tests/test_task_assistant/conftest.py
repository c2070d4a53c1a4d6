"""Shared fixtures for task assistant tests."""

from unittest.mock import AsyncMock

import pytest

from zenith.task_assistant.config import (
    ENV_API_KEY,
    ENV_API_KEY_FALLBACK,
    ENV_BASE_URL,
    ENV_MODEL,
    ENV_OFFLINE,
    ENV_TEMPERATURE,
    ENV_TIMEOUT,
)

ALL_ENV_VARS = (
    ENV_MODEL,
    ENV_BASE_URL,
    ENV_API_KEY,
    ENV_API_KEY_FALLBACK,
    ENV_TIMEOUT,
    ENV_TEMPERATURE,
    ENV_OFFLINE,
)


@pytest.fixture
def mock_generator() -> AsyncMock:
    """Create a mock content generator for testing."""
    generator = AsyncMock()
    generator.generate_content = AsyncMock()
    return generator


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every zenith environment variable for the test."""
    for name in ALL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
