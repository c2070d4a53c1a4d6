"""Example demonstrating task parsing and schedule analysis."""

import asyncio
import logging

from zenith.task_assistant.client import create_content_generator
from zenith.task_assistant.config import Settings
from zenith.task_assistant.models import Task, TaskStatus
from zenith.task_assistant.schedule_analyzer import ScheduleAnalyzer
from zenith.task_assistant.task_parser import TaskParser

logging.basicConfig(level=logging.INFO)


async def main() -> None:
    """Demonstrate parsing and analysis with the offline generator."""
    # Swap for Settings.from_env() to talk to a real Ollama endpoint
    generator = create_content_generator(Settings(offline=True))

    parser = TaskParser(generator)
    analyzer = ScheduleAnalyzer(generator)

    # Example 1: Parse free text into a task draft
    print("=== Parsing tasks ===")
    inputs = [
        "Patch the payment service asap",
        "Prepare the demo in 2 days\n- write script\n- record backup video",
        "Sort the photo archive whenever",
    ]
    tasks = []
    for text in inputs:
        draft = await parser.parse_task(text)
        print(f"Draft: {draft.to_dict()}")
        tasks.append(
            Task(
                title=draft.title,
                description=draft.description,
                due_date=draft.due_date,
                priority=draft.priority,
                subtasks=draft.subtasks,
                ai_suggested=draft.ai_suggested,
            )
        )
    print()

    # Example 2: Analyze the workload
    print("=== Analyzing workload ===")
    result = await analyzer.analyze_schedule(tasks)
    print(f"Analysis: {result.to_dict()}")
    print()

    # Example 3: Nothing active, no model call
    print("=== Analyzing finished work ===")
    for task in tasks:
        task.status = TaskStatus.DONE
    result = await analyzer.analyze_schedule(tasks)
    print(f"Analysis: {result.to_dict()}")


if __name__ == "__main__":
    asyncio.run(main())
