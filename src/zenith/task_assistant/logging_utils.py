"""Logging utilities with custom trace level."""

import logging
from typing import Any

# Define custom TRACE level (lower than DEBUG)
TRACE_LEVEL = 5

# Third-party loggers that are chatty below WARNING
NOISY_LOGGERS = ("httpx", "httpcore", "ollama")


def add_trace_level() -> None:
    """Add a custom TRACE logging level."""
    logging.addLevelName(TRACE_LEVEL, "TRACE")

    def trace(self: logging.Logger, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a message with severity 'TRACE'."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, message, args, **kwargs)

    logging.Logger.trace = trace  # type: ignore[attr-defined]


def configure_logging(verbose: bool = False, trace: bool = False) -> None:
    """
    Configure root logging for command-line use.

    Args:
        verbose: Log at DEBUG
        trace: Log at TRACE, including prompts and raw model responses
    """
    add_trace_level()

    if trace:
        logging.basicConfig(
            level=TRACE_LEVEL,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    elif verbose:
        logging.basicConfig(
            level="DEBUG", format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    else:
        logging.basicConfig(
            level="INFO", format="%(asctime)s - %(levelname)s - %(message)s"
        )

    # HTTP request lines are only interesting when tracing
    noisy_level = logging.DEBUG if trace else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)
