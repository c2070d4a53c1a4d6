"""Custom exceptions for the task assistant."""


class TaskAssistantError(Exception):
    """Base exception for task assistant errors."""

    pass


class ContentGenerationError(TaskAssistantError):
    """Exception raised when the model service fails or returns no content."""

    pass


class ResponseValidationError(TaskAssistantError, ValueError):
    """Exception raised when a model response violates its response schema."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class ConfigurationError(TaskAssistantError):
    """Exception raised for invalid configuration values."""

    pass
