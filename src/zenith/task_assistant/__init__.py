"""Task assistant: natural-language task parsing and workload analysis."""

from .client import OllamaContentGenerator, create_content_generator
from .config import Settings
from .models import (
    AIAnalysisResult,
    AnalysisMood,
    Subtask,
    Task,
    TaskDraft,
    TaskPriority,
    TaskStatus,
)
from .offline import OfflineContentGenerator
from .schedule_analyzer import ScheduleAnalyzer
from .task_parser import TaskParser

__all__ = [
    "Task",
    "TaskDraft",
    "Subtask",
    "TaskStatus",
    "TaskPriority",
    "AnalysisMood",
    "AIAnalysisResult",
    "Settings",
    "TaskParser",
    "ScheduleAnalyzer",
    "OllamaContentGenerator",
    "OfflineContentGenerator",
    "create_content_generator",
]
