"""Data models for the task assistant."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .utils import generate_id


class TaskStatus(str, Enum):
    """Task status enumeration."""

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class TaskPriority(str, Enum):
    """Task priority enumeration."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


class AnalysisMood(str, Enum):
    """Qualitative workload classification."""

    CALM = "calm"
    BUSY = "busy"
    OVERLOADED = "overloaded"


@dataclass
class Subtask:
    """A step belonging to a single parent task."""

    id: str
    title: str
    is_completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "isCompleted": self.is_completed}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Subtask":
        return cls(
            id=str(data.get("id") or generate_id()),
            title=str(data.get("title", "")),
            is_completed=bool(data.get("isCompleted", False)),
        )


@dataclass
class Task:
    """Represents a task item as exchanged with the UI layer."""

    title: str
    due_date: str  # ISO 8601
    priority: TaskPriority
    status: TaskStatus = TaskStatus.TODO
    description: str = ""
    subtasks: list[Subtask] = field(default_factory=list)
    ai_suggested: bool = False
    alerted: bool = False
    id: str = field(default_factory=generate_id)

    @property
    def is_active(self) -> bool:
        """True until the task reaches the terminal DONE state."""
        return self.status != TaskStatus.DONE

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "dueDate": self.due_date,
            "priority": self.priority.value,
            "status": self.status.value,
            "subtasks": [subtask.to_dict() for subtask in self.subtasks],
            "aiSuggested": self.ai_suggested,
            "alerted": self.alerted,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        """
        Build a task from its camelCase JSON form.

        Args:
            data: Task record as stored by the UI layer

        Returns:
            Task instance

        Raises:
            KeyError: If title, dueDate or priority is missing
            ValueError: If priority or status is not a known value
        """
        return cls(
            id=str(data.get("id") or generate_id()),
            title=data["title"],
            description=data.get("description") or "",
            due_date=data["dueDate"],
            priority=TaskPriority(data["priority"]),
            status=TaskStatus(data.get("status", TaskStatus.TODO.value)),
            subtasks=[Subtask.from_dict(item) for item in data.get("subtasks") or []],
            ai_suggested=bool(data.get("aiSuggested", False)),
            alerted=bool(data.get("alerted", False)),
        )


@dataclass
class TaskDraft:
    """Partially populated task produced by natural-language parsing."""

    title: str
    due_date: str  # ISO 8601, as returned by the model
    priority: TaskPriority
    description: str = ""
    subtasks: list[Subtask] = field(default_factory=list)
    status: TaskStatus = TaskStatus.TODO
    ai_suggested: bool = True
    alerted: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.metadata,
            "title": self.title,
            "description": self.description,
            "dueDate": self.due_date,
            "priority": self.priority.value,
            "subtasks": [subtask.to_dict() for subtask in self.subtasks],
            "status": self.status.value,
            "aiSuggested": self.ai_suggested,
            "alerted": self.alerted,
        }


@dataclass
class AIAnalysisResult:
    """Workload summary produced by the schedule analyzer."""

    summary: str
    suggestions: list[str]
    mood: AnalysisMood

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": self.summary,
            "suggestions": list(self.suggestions),
            "mood": self.mood.value,
        }
