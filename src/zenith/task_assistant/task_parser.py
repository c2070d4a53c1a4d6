"""Natural-language task parsing via a structured-output model."""

import logging
import time
from collections.abc import Callable
from datetime import datetime

from .config import PARSER_PERSONA
from .exceptions import ContentGenerationError
from .interfaces import ContentGenerator
from .models import Subtask, TaskDraft, TaskStatus
from .policy import (
    DATE_RULES,
    STYLE_RULES,
    SUBTASK_RULES,
    render_priority_rules,
    render_rules,
)
from .schemas import TaskDraftResponse, parse_response
from .utils import format_system_time, generate_id, now_local

logger = logging.getLogger(__name__)


class TaskParser:
    """Turns free-text input into a structured task draft."""

    def __init__(
        self,
        generator: ContentGenerator,
        *,
        clock: Callable[[], datetime] = now_local,
        id_generator: Callable[[], str] = generate_id,
    ) -> None:
        """
        Initialize the parser.

        Args:
            generator: Structured-output model service
            clock: Source of the current time embedded in the prompt
            id_generator: Source of subtask identifiers
        """
        self._generator = generator
        self._clock = clock
        self._id_generator = id_generator

    def _generate_system_instruction(self, now: datetime) -> str:
        """
        Generate the system instruction for the model.

        Args:
            now: Current time, used to resolve relative dates

        Returns:
            Formatted instruction string
        """
        return f"""{PARSER_PERSONA}

CURRENT SYSTEM TIME: {format_system_time(now)}

### 1. PRIORITY ASSIGNMENT ALGORITHM (Strict Order)
{render_priority_rules()}

### 2. SUBTASK GENERATION
{render_rules(SUBTASK_RULES)}

### 3. DATE & TIME
{render_rules(DATE_RULES)}

### 4. STYLE
{render_rules(STYLE_RULES)}"""

    def _map_response(self, response: TaskDraftResponse) -> TaskDraft:
        """
        Map a validated response onto a task draft.

        Title, due date and priority are kept exactly as returned. Every
        subtask gets a fresh identifier and starts incomplete. Fields the
        model added beyond the response model end up in the metadata.
        """
        subtasks = []
        for item in response.subtasks:
            if not item.title or not item.title.strip():
                logger.warning(f"Dropping subtask without a title: {item.model_dump()}")
                continue
            subtasks.append(Subtask(id=self._id_generator(), title=item.title))

        return TaskDraft(
            title=response.title,
            description=response.description or "",
            due_date=response.dueDate,
            priority=response.priority,
            subtasks=subtasks,
            status=TaskStatus.TODO,
            ai_suggested=True,
            alerted=False,
            metadata=dict(response.model_extra or {}),
        )

    async def parse_task(self, text: str) -> TaskDraft:
        """
        Parse free text into a task draft.

        Args:
            text: Natural-language task description

        Returns:
            TaskDraft with status TODO, marked as AI suggested

        Raises:
            ContentGenerationError: If the model fails or returns no text
            ResponseValidationError: If the response is not JSON or does not
                match TaskDraftResponse
        """
        start_time = time.time()

        try:
            system_instruction = self._generate_system_instruction(self._clock())
            response = await self._generator.generate_content(
                contents=text,
                system_instruction=system_instruction,
                schema=TaskDraftResponse,
            )
            if not response.text:
                raise ContentGenerationError("No response text from model")

            draft = self._map_response(parse_response(TaskDraftResponse, response.text))
        except Exception as e:
            logger.error(f"Error parsing task with AI: {e}")
            raise

        logger.info(
            f"Task parsed: title='{draft.title}', priority={draft.priority.value}, "
            f"due={draft.due_date}, subtasks={len(draft.subtasks)}, "
            f"time={time.time() - start_time:.3f}s"
        )
        return draft
