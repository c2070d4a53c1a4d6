"""Tests for the offline content generator."""

import json
from datetime import timedelta

import pytest
from pydantic import BaseModel

from zenith.task_assistant.config import ANALYSIS_CONTENTS_PREFIX
from zenith.task_assistant.exceptions import ContentGenerationError
from zenith.task_assistant.offline import OfflineContentGenerator, resolve_relative_due
from zenith.task_assistant.schemas import AnalysisResponse, TaskDraftResponse, parse_response

from .fakes import FIXED_NOW, fixed_clock


@pytest.mark.unit
class TestResolveRelativeDue:
    """Test cases for relative time expressions."""

    @pytest.mark.parametrize(
        ("text", "offset"),
        [
            ("in 30 minutes", timedelta(minutes=30)),
            ("in 2 hours", timedelta(hours=2)),
            ("in an hour", timedelta(hours=1)),
            ("In three days", timedelta(days=3)),
            ("in 2 weeks", timedelta(weeks=2)),
            ("finish tomorrow", timedelta(days=1)),
            ("sometime next week", timedelta(weeks=1)),
        ],
    )
    def test_supported_expressions(self, text: str, offset: timedelta) -> None:
        assert resolve_relative_due(text, FIXED_NOW) == FIXED_NOW + offset

    def test_no_expression(self) -> None:
        assert resolve_relative_due("water the plants", FIXED_NOW) is None


@pytest.mark.unit
@pytest.mark.asyncio
class TestOfflineDraft:
    """Test cases for offline task drafts."""

    async def _draft(self, text: str) -> dict:
        generator = OfflineContentGenerator(clock=fixed_clock)
        response = await generator.generate_content(
            contents=text, system_instruction="", schema=TaskDraftResponse
        )
        return parse_response(TaskDraftResponse, response.text).model_dump(mode="json")

    async def test_output_conforms_to_schema(self) -> None:
        data = await self._draft("Submit report in 2 days")

        assert data["title"] == "Submit report"
        assert data["priority"] == "MEDIUM"
        assert data["dueDate"] == (FIXED_NOW + timedelta(days=2)).isoformat(timespec="seconds")

    async def test_conditional_split_into_steps(self) -> None:
        data = await self._draft("If the build fails then roll back the deploy")

        assert [s["title"] for s in data["subtasks"]] == [
            "Check whether the build fails",
            "Roll back the deploy",
        ]

    async def test_long_title_truncated(self) -> None:
        data = await self._draft("Review " + "very " * 40 + "long document")

        assert len(data["title"]) <= 80
        assert data["title"].endswith("...")

    async def test_counts_calls(self) -> None:
        generator = OfflineContentGenerator(clock=fixed_clock)

        await generator.generate_content(
            contents="a", system_instruction="", schema=TaskDraftResponse
        )
        await generator.generate_content(
            contents="b", system_instruction="", schema=TaskDraftResponse
        )

        assert generator.call_count == 2

    async def test_unknown_schema_rejected(self) -> None:
        class Poem(BaseModel):
            text: str

        generator = OfflineContentGenerator()

        with pytest.raises(ContentGenerationError, match="Poem"):
            await generator.generate_content(contents="x", system_instruction="", schema=Poem)


@pytest.mark.unit
@pytest.mark.asyncio
class TestOfflineAnalysis:
    """Test cases for offline workload analysis."""

    async def _analyze(self, tasks: list[dict]) -> dict:
        generator = OfflineContentGenerator(clock=fixed_clock)
        response = await generator.generate_content(
            contents=ANALYSIS_CONTENTS_PREFIX + json.dumps(tasks),
            system_instruction="",
            schema=AnalysisResponse,
        )
        return parse_response(AnalysisResponse, response.text).model_dump(mode="json")

    async def test_busy_load(self) -> None:
        tasks = [
            {"title": f"Task {i}", "due": f"2026-10-2{i}", "priority": "MEDIUM", "subtasksCount": i}
            for i in range(4)
        ]

        data = await self._analyze(tasks)

        assert data["mood"] == "busy"
        assert data["suggestions"] == [
            "Batch low-priority protocols into a single session",
            "Schedule 'Task 0' before 2026-10-20",
            "Work through the 3 subtasks of 'Task 3' in order",
        ]
        assert data["summary"].startswith("4 active protocol(s) registered; 0 flagged URGENT.")

    async def test_many_tasks_overloaded(self) -> None:
        tasks = [{"title": f"T{i}", "priority": "LOW", "subtasksCount": 0} for i in range(8)]

        data = await self._analyze(tasks)

        assert data["mood"] == "overloaded"
        assert data["suggestions"][1:] == [
            "Assign due dates to undated protocols",
            "Break large protocols into subtasks",
        ]

    async def test_earliest_due_compares_instants(self) -> None:
        """Test that due dates in different offsets are compared as times."""
        tasks = [
            {"title": "Ship", "due": "2026-10-20T08:00:00-05:00", "priority": "LOW"},
            {"title": "Call", "due": "2026-10-20T10:00:00+00:00", "priority": "LOW"},
        ]

        data = await self._analyze(tasks)

        assert data["suggestions"][1] == "Schedule 'Call' before 2026-10-20T10:00:00+00:00"

    async def test_unreadable_due_dates_ignored(self) -> None:
        tasks = [
            {"title": "Someday", "due": "whenever", "priority": "LOW"},
            {"title": "Report", "due": "2026-10-25", "priority": "LOW"},
        ]

        data = await self._analyze(tasks)

        assert data["suggestions"][1] == "Schedule 'Report' before 2026-10-25"

    async def test_unreadable_registry(self) -> None:
        generator = OfflineContentGenerator()

        with pytest.raises(ContentGenerationError, match="Unreadable task registry"):
            await generator.generate_content(
                contents="garbage", system_instruction="", schema=AnalysisResponse
            )
