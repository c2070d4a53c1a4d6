"""Tests for identifier and time helpers."""

import re
import uuid
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from zenith.task_assistant.utils import format_system_time, generate_id, now_local


@pytest.mark.unit
class TestGenerateId:
    """Test cases for identifier generation."""

    def test_returns_uuid4_when_available(self) -> None:
        value = generate_id()

        assert uuid.UUID(value).version == 4

    def test_ids_are_unique(self) -> None:
        assert len({generate_id() for _ in range(1000)}) == 1000

    def test_fallback_when_entropy_unavailable(self) -> None:
        """Test the time plus random fallback path."""
        with patch("zenith.task_assistant.utils.uuid.uuid4", side_effect=NotImplementedError):
            first = generate_id()
            second = generate_id()

        assert re.fullmatch(r"[0-9a-z]+", first)
        assert len(first) > 11
        assert first != second


@pytest.mark.unit
class TestFormatSystemTime:
    """Test cases for prompt timestamps."""

    def test_long_format_with_zone(self) -> None:
        now = datetime(2026, 10, 19, 14, 5, tzinfo=timezone.utc)

        assert format_system_time(now) == "Monday, October 19, 2026 at 14:05 UTC"

    def test_24_hour_clock(self) -> None:
        now = datetime(2026, 3, 7, 21, 30, tzinfo=timezone(timedelta(hours=-5), "EST"))

        assert format_system_time(now) == "Saturday, March 7, 2026 at 21:30 EST"

    def test_naive_datetime_gets_local_zone(self) -> None:
        result = format_system_time(datetime(2026, 10, 19, 14, 5))

        assert result.startswith("Monday, October 19, 2026 at 14:05 ")
        assert not result.endswith(" ")

    def test_now_local_is_aware(self) -> None:
        assert now_local().tzinfo is not None
