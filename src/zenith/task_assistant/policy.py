"""Priority, subtask, date and style rules for task parsing.

The rules are declared here once and used both to render the parser's
system instruction and by the offline generator.
"""

import re
from datetime import datetime, timedelta

from .models import TaskPriority

# Checked in this order; the first group with a match wins.
PRIORITY_KEYWORDS: dict[TaskPriority, tuple[str, ...]] = {
    TaskPriority.URGENT: ("urgent", "asap", "emergency", "critical", "right now"),
    TaskPriority.HIGH: ("high priority", "important", "major", "must do"),
    TaskPriority.LOW: ("low priority", "whenever", "eventually", "minor"),
}

# (upper bound, priority); anything at or past the last bound is LOW.
PRIORITY_THRESHOLDS: tuple[tuple[timedelta, TaskPriority], ...] = (
    (timedelta(hours=4), TaskPriority.URGENT),
    (timedelta(hours=24), TaskPriority.HIGH),
    (timedelta(hours=72), TaskPriority.MEDIUM),
)
FALLBACK_PRIORITY = TaskPriority.LOW

DEFAULT_DUE_OFFSET = timedelta(hours=24)

SUBTASK_RULES = (
    "Flatten nested lists.",
    'Break conditional tasks ("If X then Y") into steps.',
    'If vague goal ("Plan trip"), generate 3-5 logical steps.',
)

DATE_RULES = (
    "Resolve relative time to absolute ISO 8601.",
    "Default: 24h from now.",
)

STYLE_RULES = (
    "Title: Imperative, concise.",
    "Description: Technical summary.",
)

_KEYWORD_PATTERNS = {
    priority: re.compile(
        r"\b(?:" + "|".join(re.escape(word) for word in words) + r")\b",
        re.IGNORECASE,
    )
    for priority, words in PRIORITY_KEYWORDS.items()
}


def match_priority_keyword(text: str) -> TaskPriority | None:
    """Return the priority forced by an explicit keyword, if any."""
    for priority, pattern in _KEYWORD_PATTERNS.items():
        if pattern.search(text):
            return priority
    return None


def priority_for_due(due: datetime, now: datetime) -> TaskPriority:
    """Priority derived from the time remaining until the due date."""
    remaining = due - now
    for bound, priority in PRIORITY_THRESHOLDS:
        if remaining < bound:
            return priority
    return FALLBACK_PRIORITY


def assign_priority(text: str, due: datetime, now: datetime) -> TaskPriority:
    """Keyword override first, then time-until-due thresholds."""
    return match_priority_keyword(text) or priority_for_due(due, now)


def default_due_date(now: datetime) -> datetime:
    return now + DEFAULT_DUE_OFFSET


def _format_bound(bound: timedelta) -> str:
    return f"{int(bound.total_seconds() // 3600)}h"


def render_priority_rules() -> str:
    lines = ["- Override Keywords:"]
    for priority, words in PRIORITY_KEYWORDS.items():
        lines.append(f'  - "{priority.value}": {", ".join(words)}')
    lines.append("- Time-Based (If no keywords):")
    for bound, priority in PRIORITY_THRESHOLDS:
        lines.append(f"  - < {_format_bound(bound)}: {priority.value}")
    last_bound = PRIORITY_THRESHOLDS[-1][0]
    lines.append(f"  - >= {_format_bound(last_bound)}: {FALLBACK_PRIORITY.value}")
    return "\n".join(lines)


def render_rules(rules: tuple[str, ...]) -> str:
    return "\n".join(f"- {rule}" for rule in rules)
