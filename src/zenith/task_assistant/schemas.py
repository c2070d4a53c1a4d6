"""Response models for structured model output."""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ResponseValidationError
from .models import AnalysisMood, TaskPriority

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)


class SubtaskResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    # Optional so one untitled step does not reject the whole draft
    title: str | None = None


class TaskDraftResponse(BaseModel):
    """Task draft as requested from the model."""

    model_config = ConfigDict(extra="allow")

    title: str
    description: str | None = None
    dueDate: str = Field(..., description="ISO 8601 format date string")
    priority: TaskPriority
    subtasks: list[SubtaskResponse] = Field(default_factory=list)

    @field_validator("subtasks", mode="before")
    @classmethod
    def null_subtasks_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class AnalysisResponse(BaseModel):
    """Workload analysis as requested from the model."""

    summary: str
    suggestions: list[str]
    mood: AnalysisMood


def _error_location(loc: tuple[int | str, ...]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


def parse_response(model: type[ResponseModel], text: str) -> ResponseModel:
    """
    Decode and validate a JSON response body.

    Args:
        model: Response model the text must conform to
        text: Raw JSON text returned by the model

    Returns:
        Validated model instance

    Raises:
        ResponseValidationError: If the text is not JSON or violates the model
    """
    try:
        return model.model_validate_json(text)
    except ValidationError as e:
        error = e.errors()[0]
        location = _error_location(error["loc"])
        prefix = f"Field '{location}'" if location else f"{model.__name__} response"
        raise ResponseValidationError(
            f"{prefix}: {error['msg']}", field=location or None
        ) from e
