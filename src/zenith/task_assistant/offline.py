"""Deterministic content generator used when no model service is configured."""

import json
import logging
import re
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

from pydantic import BaseModel

from .config import ANALYSIS_CONTENTS_PREFIX
from .exceptions import ContentGenerationError
from .interfaces import ContentGenerator, GenerationResponse
from .models import AnalysisMood, TaskPriority
from .policy import assign_priority, default_due_date
from .schemas import AnalysisResponse, TaskDraftResponse
from .utils import now_local

logger = logging.getLogger(__name__)

OFFLINE_MODEL = "offline"

_NUMBER_WORDS = {
    "a": 1,
    "an": 1,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
}
_UNITS = {
    "minute": timedelta(minutes=1),
    "hour": timedelta(hours=1),
    "day": timedelta(days=1),
    "week": timedelta(weeks=1),
}
_IN_PATTERN = re.compile(
    r"\bin\s+(\d+|" + "|".join(_NUMBER_WORDS) + r")\s+(minute|hour|day|week)s?\b",
    re.IGNORECASE,
)
_TOMORROW_PATTERN = re.compile(r"\btomorrow\b", re.IGNORECASE)
_NEXT_WEEK_PATTERN = re.compile(r"\bnext\s+week\b", re.IGNORECASE)
_BULLET_PATTERN = re.compile(r"^\s*(?:[-*•]|\d+[.)])\s+(.+)$")
_CONDITIONAL_PATTERN = re.compile(r"\bif\s+(.+?),?\s+then\s+(.+)", re.IGNORECASE)

MAX_TITLE_LENGTH = 80

# Load thresholds for offline mood classification
OVERLOADED_ACTIVE_COUNT = 8
OVERLOADED_URGENT_COUNT = 3
CALM_ACTIVE_COUNT = 2


def resolve_relative_due(text: str, now: datetime) -> datetime | None:
    """
    Resolve a simple relative time expression.

    Supports "in N minutes/hours/days/weeks", "tomorrow" and "next week".

    Returns:
        Absolute due date, or None if the text has no supported expression
    """
    match = _IN_PATTERN.search(text)
    if match:
        amount_text = match.group(1).lower()
        amount = int(amount_text) if amount_text.isdigit() else _NUMBER_WORDS[amount_text]
        return now + amount * _UNITS[match.group(2).lower()]
    if _TOMORROW_PATTERN.search(text):
        return now + timedelta(days=1)
    if _NEXT_WEEK_PATTERN.search(text):
        return now + timedelta(weeks=1)
    return None


def _strip_time_expressions(text: str) -> str:
    for pattern in (_IN_PATTERN, _TOMORROW_PATTERN, _NEXT_WEEK_PATTERN):
        text = pattern.sub("", text)
    return " ".join(text.split())


def _parse_due(value: Any) -> datetime | None:
    """Parse an ISO due date as an aware datetime; naive values are local."""
    if not isinstance(value, str):
        return None
    try:
        due = datetime.fromisoformat(value)
    except ValueError:
        logger.debug(f"Ignoring unreadable due date: {value!r}")
        return None
    return due if due.tzinfo else due.astimezone()


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:] if text else text


class OfflineContentGenerator(ContentGenerator):
    """
    Offline deterministic generator for demos and tests.

    Applies the parsing rules locally instead of asking a model:
    - Task drafts: keyword/threshold priority, simple relative dates,
      bullet lines and "if X then Y" clauses as subtasks
    - Schedule analysis: load classified from active and urgent counts
    """

    def __init__(self, clock: Callable[[], datetime] = now_local) -> None:
        self._clock = clock
        self.call_count = 0

    async def generate_content(
        self,
        *,
        contents: str,
        system_instruction: str,
        schema: type[BaseModel],
    ) -> GenerationResponse:
        self.call_count += 1

        if schema is TaskDraftResponse:
            payload = self._draft(contents)
        elif schema is AnalysisResponse:
            payload = self._analysis(contents)
        else:
            raise ContentGenerationError(f"Offline generator cannot produce {schema.__name__}")

        logger.debug(f"Offline generator produced {schema.__name__}")
        return GenerationResponse(text=json.dumps(payload), model=OFFLINE_MODEL)

    def _draft(self, contents: str) -> dict[str, Any]:
        now = self._clock()
        text = contents.strip()
        due = resolve_relative_due(text, now) or default_due_date(now)
        priority = assign_priority(text, due, now)

        headline = ""
        steps: list[str] = []
        for line in text.splitlines():
            bullet = _BULLET_PATTERN.match(line)
            if bullet:
                steps.append(_capitalize(bullet.group(1).strip()))
            elif line.strip() and not headline:
                headline = line.strip()

        conditional = _CONDITIONAL_PATTERN.search(headline)
        if conditional:
            condition, action = conditional.groups()
            steps = [
                f"Check whether {condition.strip()}",
                _capitalize(action.strip().rstrip(".")),
                *steps,
            ]

        title = _capitalize(_strip_time_expressions(headline).rstrip(".!?"))
        if len(title) > MAX_TITLE_LENGTH:
            title = title[: MAX_TITLE_LENGTH - 3].rstrip() + "..."

        return {
            "title": title or "Untitled task",
            "description": f"Offline draft from input: {headline or text}",
            "dueDate": due.isoformat(timespec="seconds"),
            "priority": priority.value,
            "subtasks": [{"title": step} for step in steps],
        }

    def _analysis(self, contents: str) -> dict[str, Any]:
        registry = contents.removeprefix(ANALYSIS_CONTENTS_PREFIX)
        try:
            tasks = json.loads(registry)
        except json.JSONDecodeError as e:
            raise ContentGenerationError(f"Unreadable task registry: {e}") from e

        active = len(tasks)
        urgent = [t for t in tasks if t.get("priority") == TaskPriority.URGENT.value]

        if active >= OVERLOADED_ACTIVE_COUNT or len(urgent) >= OVERLOADED_URGENT_COUNT:
            mood = AnalysisMood.OVERLOADED
        elif active <= CALM_ACTIVE_COUNT and not urgent:
            mood = AnalysisMood.CALM
        else:
            mood = AnalysisMood.BUSY

        suggestions = []
        if urgent:
            suggestions.append(f"Clear URGENT protocol '{urgent[0]['title']}' first")
        else:
            suggestions.append("Batch low-priority protocols into a single session")

        dated = [(due, t) for t in tasks if (due := _parse_due(t.get("due")))]
        if dated:
            _, earliest = min(dated, key=lambda pair: pair[0])
            suggestions.append(f"Schedule '{earliest['title']}' before {earliest['due']}")
        else:
            suggestions.append("Assign due dates to undated protocols")

        largest = max(tasks, key=lambda t: t.get("subtasksCount", 0), default=None)
        if largest and largest.get("subtasksCount"):
            suggestions.append(
                f"Work through the {largest['subtasksCount']} subtasks of "
                f"'{largest['title']}' in order"
            )
        else:
            suggestions.append("Break large protocols into subtasks")

        return {
            "summary": (
                f"{active} active protocol(s) registered; {len(urgent)} flagged "
                f"URGENT. System load: {mood.value}."
            ),
            "suggestions": suggestions,
            "mood": mood.value,
        }
