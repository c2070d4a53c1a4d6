"""Command-line interface for the task assistant."""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import replace
from typing import Any, TextIO

from dotenv import load_dotenv

from .task_assistant.client import create_content_generator
from .task_assistant.config import Settings
from .task_assistant.exceptions import TaskAssistantError
from .task_assistant.interfaces import ContentGenerator
from .task_assistant.logging_utils import configure_logging
from .task_assistant.models import Task
from .task_assistant.schedule_analyzer import ScheduleAnalyzer
from .task_assistant.task_parser import TaskParser

logger = logging.getLogger(__name__)


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="zenith",
        description="Zenith task assistant - Parse tasks and analyze workload using an LLM",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  zenith parse "Submit the quarterly report by Friday, asap"
  zenith analyze tasks.json                  # Analyze a JSON task list
  cat tasks.json | zenith analyze -          # Read the task list from stdin
  zenith --offline parse "Plan trip in 3 days"
  zenith --model llama3.1 --host http://gpu-box:11434 parse "Fix the build"

Environment:
  ZENITH_MODEL, ZENITH_OLLAMA_HOST, ZENITH_API_KEY, ZENITH_TIMEOUT,
  ZENITH_TEMPERATURE, ZENITH_OFFLINE (a .env file is loaded if present)
        """,
    )

    parser.add_argument("--model", type=str, default=None, help="Model name override")
    parser.add_argument(
        "--host", type=str, default=None, metavar="URL", help="Ollama service URL override"
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Use the deterministic offline generator instead of a model service",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging and debug information",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace logging (includes prompts and raw model responses)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Parse free text into a task draft")
    parse_cmd.add_argument("text", nargs="+", help="Natural-language task description")

    analyze_cmd = subparsers.add_parser("analyze", help="Analyze a JSON task list")
    analyze_cmd.add_argument(
        "file", type=str, help="Path to a JSON array of tasks, or - for stdin"
    )

    return parser


def build_settings(args: argparse.Namespace) -> Settings:
    """Merge command-line overrides onto environment settings."""
    settings = Settings.from_env()
    overrides: dict[str, Any] = {}
    if args.model:
        overrides["model"] = args.model
    if args.host:
        overrides["base_url"] = args.host
    if args.offline:
        overrides["offline"] = True
    return replace(settings, **overrides)


def load_tasks(source: TextIO) -> list[Task]:
    """
    Load tasks from a JSON array in camelCase form.

    Raises:
        ValueError: If the document is not a JSON array of valid tasks
    """
    data = json.load(source)
    if not isinstance(data, list):
        raise ValueError("Task file must contain a JSON array")
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"Task {index} must be a JSON object")
        subtasks = item.get("subtasks") or []
        if not isinstance(subtasks, list) or not all(
            isinstance(subtask, dict) for subtask in subtasks
        ):
            raise ValueError(f"Subtasks of task {index} must be a JSON array of objects")
    try:
        return [Task.from_dict(item) for item in data]
    except KeyError as e:
        raise ValueError(f"Task is missing required field {e}") from e


async def run_parse(generator: ContentGenerator, text: str) -> dict[str, Any]:
    draft = await TaskParser(generator).parse_task(text)
    return draft.to_dict()


async def run_analyze(generator: ContentGenerator, tasks: list[Task]) -> dict[str, Any]:
    result = await ScheduleAnalyzer(generator).analyze_schedule(tasks)
    return result.to_dict()


def main(argv: list[str] | None = None) -> int:
    """
    Run the CLI.

    Returns:
        Process exit code
    """
    load_dotenv()
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, trace=args.trace)

    try:
        generator = create_content_generator(build_settings(args))

        if args.command == "parse":
            output = asyncio.run(run_parse(generator, " ".join(args.text)))
        else:
            if args.file == "-":
                tasks = load_tasks(sys.stdin)
            else:
                with open(args.file, encoding="utf-8") as f:
                    tasks = load_tasks(f)
            output = asyncio.run(run_analyze(generator, tasks))
    except (TaskAssistantError, ValueError, OSError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"❌ {e}", file=sys.stderr)
        return 1

    print(json.dumps(output, indent=2))
    return 0


def cli_entry_with_args() -> None:
    """CLI entry point with argument parsing."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    cli_entry_with_args()
