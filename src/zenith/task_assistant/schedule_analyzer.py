"""Workload analysis of the active task list."""

import json
import logging
from collections.abc import Iterable
from typing import Any

from .config import (
    ANALYSIS_CONTENTS_PREFIX,
    ANALYSIS_SYSTEM_INSTRUCTION,
    IDLE_SUGGESTIONS,
    IDLE_SUMMARY,
    OFFLINE_SUMMARY,
)
from .exceptions import ContentGenerationError
from .interfaces import ContentGenerator
from .models import AIAnalysisResult, AnalysisMood, Task
from .schemas import AnalysisResponse, parse_response

logger = logging.getLogger(__name__)


def idle_result() -> AIAnalysisResult:
    """Result returned when there is nothing to analyze."""
    return AIAnalysisResult(
        summary=IDLE_SUMMARY,
        suggestions=list(IDLE_SUGGESTIONS),
        mood=AnalysisMood.CALM,
    )


def offline_result() -> AIAnalysisResult:
    """Degraded result returned when analysis fails."""
    return AIAnalysisResult(summary=OFFLINE_SUMMARY, suggestions=[], mood=AnalysisMood.BUSY)


def project_task(task: Task) -> dict[str, Any]:
    """Minimal view of a task sent to the model."""
    return {
        "title": task.title,
        "due": task.due_date,
        "priority": task.priority.value,
        "subtasksCount": len(task.subtasks),
    }


class ScheduleAnalyzer:
    """
    Summarizes the current workload.

    Analysis is advisory: failures are logged and replaced by a degraded
    result so they never block the caller.
    """

    def __init__(self, generator: ContentGenerator) -> None:
        self._generator = generator

    async def analyze_schedule(self, tasks: Iterable[Task]) -> AIAnalysisResult:
        """
        Analyze the tasks that are not yet done.

        Args:
            tasks: Full task collection; DONE tasks are ignored

        Returns:
            AIAnalysisResult; the idle result without a model call when no
            task is active, the offline result on any failure
        """
        active_tasks = [task for task in tasks if task.is_active]

        if not active_tasks:
            logger.debug("No active tasks, skipping analysis")
            return idle_result()

        tasks_json = json.dumps(
            [project_task(task) for task in active_tasks], separators=(",", ":")
        )

        try:
            response = await self._generator.generate_content(
                contents=f"{ANALYSIS_CONTENTS_PREFIX}{tasks_json}",
                system_instruction=ANALYSIS_SYSTEM_INSTRUCTION,
                schema=AnalysisResponse,
            )
            if not response.text:
                raise ContentGenerationError("No analysis returned")

            data = parse_response(AnalysisResponse, response.text)
            result = AIAnalysisResult(
                summary=data.summary,
                suggestions=list(data.suggestions),
                mood=data.mood,
            )
        except Exception as e:
            logger.error(f"Error analyzing schedule: {e}")
            return offline_result()

        logger.info(
            f"Schedule analyzed: active={len(active_tasks)}, mood={result.mood.value}"
        )
        return result
