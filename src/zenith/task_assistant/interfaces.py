"""Abstract interfaces for the task assistant."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from pydantic import BaseModel


@dataclass
class GenerationResponse:
    """Raw result of a structured generation request."""

    text: str | None
    model: str | None = None


class ContentGenerator(ABC):
    """Abstract interface for a structured-output model service."""

    @abstractmethod
    async def generate_content(
        self,
        *,
        contents: str,
        system_instruction: str,
        schema: type[BaseModel],
    ) -> GenerationResponse:
        """
        Generate JSON content that follows a response schema.

        The request is sent once. Implementations do not retry.

        Args:
            contents: Prompt content, sent as the user message
            system_instruction: Instruction sent as the system message
            schema: Response model the JSON output must follow

        Returns:
            GenerationResponse whose text holds the JSON-encoded result

        Raises:
            ContentGenerationError: If the model service fails
        """
        pass
