"""Structured content generation via Ollama."""

import logging
import time

import httpx
import ollama
from pydantic import BaseModel

from .config import (
    DEFAULT_OLLAMA_BASE_URL,
    DEFAULT_OLLAMA_MODEL,
    DEFAULT_OLLAMA_TEMPERATURE,
    DEFAULT_OLLAMA_TIMEOUT,
    Settings,
)
from .exceptions import ContentGenerationError
from .interfaces import ContentGenerator, GenerationResponse
from .logging_utils import TRACE_LEVEL
from .offline import OfflineContentGenerator

logger = logging.getLogger(__name__)


class OllamaContentGenerator(ContentGenerator):
    """Generates schema-constrained JSON using an Ollama chat endpoint."""

    def __init__(
        self,
        model: str = DEFAULT_OLLAMA_MODEL,
        base_url: str = DEFAULT_OLLAMA_BASE_URL,
        api_key: str | None = None,
        timeout: float = DEFAULT_OLLAMA_TIMEOUT,
        temperature: float = DEFAULT_OLLAMA_TEMPERATURE,
    ) -> None:
        """
        Initialize the generator.

        Args:
            model: Ollama model name
            base_url: Ollama service URL, local or hosted
            api_key: Bearer token for hosted endpoints, if any
            timeout: Transport timeout in seconds
            temperature: LLM temperature for generation
        """
        self.model = model
        self.base_url = base_url
        self.timeout = timeout
        self.temperature = temperature
        headers = {"Authorization": f"Bearer {api_key}"} if api_key else None
        self._client = ollama.AsyncClient(host=base_url, headers=headers, timeout=timeout)

    async def generate_content(
        self,
        *,
        contents: str,
        system_instruction: str,
        schema: type[BaseModel],
    ) -> GenerationResponse:
        logger.log(TRACE_LEVEL, f"System instruction:\n{system_instruction}")
        logger.log(TRACE_LEVEL, f"Contents: {contents}")
        start_time = time.time()

        try:
            response = await self._client.chat(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_instruction},
                    {"role": "user", "content": contents},
                ],
                format=schema.model_json_schema(),
                options={"temperature": self.temperature},
            )
        except ollama.ResponseError as e:
            raise ContentGenerationError(
                f"Model request failed ({e.status_code}): {e.error}"
            ) from e
        except ConnectionError as e:
            raise ContentGenerationError(f"Connection failed: {e}") from e
        except httpx.TimeoutException as e:
            raise ContentGenerationError(
                f"Request timed out after {self.timeout}s: {e}"
            ) from e
        except httpx.HTTPError as e:
            raise ContentGenerationError(f"Transport error: {e}") from e

        text = response["message"]["content"]
        logger.debug(
            f"Generated {schema.__name__} with model={self.model} "
            f"in {time.time() - start_time:.3f}s"
        )
        logger.log(TRACE_LEVEL, f"Raw response: {text}")

        return GenerationResponse(text=text, model=self.model)


def create_content_generator(settings: Settings) -> ContentGenerator:
    """
    Build the content generator for the given settings.

    Called once at startup; the returned generator is shared by every call.
    """
    if settings.offline:
        logger.info("Using offline content generator")
        return OfflineContentGenerator()

    logger.info(f"Using Ollama model {settings.model} at {settings.base_url}")
    return OllamaContentGenerator(
        model=settings.model,
        base_url=settings.base_url,
        api_key=settings.api_key,
        timeout=settings.timeout,
        temperature=settings.temperature,
    )
