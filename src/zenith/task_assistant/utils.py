"""Identifier generation and time formatting helpers."""

import random
import string
import time
import uuid
from datetime import datetime

_BASE36_DIGITS = string.digits + string.ascii_lowercase


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def _fallback_id() -> str:
    """Millisecond timestamp plus a random suffix, both base-36."""
    timestamp = _to_base36(int(time.time() * 1000))
    suffix = "".join(random.choices(_BASE36_DIGITS, k=11))
    return timestamp + suffix


def generate_id() -> str:
    """
    Generate a unique identifier.

    Uses a random UUID from the OS entropy source. Platforms without one
    get a time plus random identifier instead, which is unique enough for
    subtasks within a single task.

    Returns:
        Identifier string
    """
    try:
        return str(uuid.uuid4())
    except NotImplementedError:
        return _fallback_id()


def now_local() -> datetime:
    """Current time as an aware datetime in the local timezone."""
    return datetime.now().astimezone()


def format_system_time(now: datetime) -> str:
    """
    Format a timestamp for embedding in a model prompt.

    Args:
        now: Timestamp to format; naive values are treated as local time

    Returns:
        String like "Monday, October 19, 2026 at 14:05 UTC"
    """
    if now.tzinfo is None:
        now = now.astimezone()
    zone = now.tzname() or now.strftime("%z")
    return f"{now:%A}, {now:%B} {now.day}, {now.year} at {now:%H:%M} {zone}"
