# src/todo_tracker/cli/commands.py

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.ports import TaskRepo
from ..errors import InvalidInput, NotFound
from ..tasks.task_models import Task, TaskFilter

CommandHandler = Callable[[TaskRepo, argparse.Namespace], str]
ArgsConfigurator = Callable[[argparse.ArgumentParser], None]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Command:
    name: str
    handler: CommandHandler
    help_text: str
    configure: ArgsConfigurator | None
    aliases: list[str]


class CommandRegistry:
    """Subcommand registry: the CLI parser is built from it and dispatches through it."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._handlers: dict[str, CommandHandler] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        configure: ArgsConfigurator | None = None,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._commands[key] = Command(key, handler, help_text, configure, list(aliases))
        self._handlers[key] = handler
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def commands(self) -> list[Command]:
        return list(self._commands.values())

    def handle(self, repo: TaskRepo, name: str, args: argparse.Namespace) -> str:
        """Run one command against the repo and return the text to print."""
        handler = self._handlers.get(name.lower())
        if handler is None:
            raise InvalidInput(f"Unknown command: {name}.")
        return handler(repo, args)


registry = CommandRegistry()


def render_task(task: Task) -> str:
    checkbox = "[x]" if task.completed else "[ ]"
    return f"{checkbox} {task.id} - {task.description}"


_LIST_HEADERS = {
    TaskFilter.ALL: "Your To-Do List:",
    TaskFilter.COMPLETED: "Completed tasks:",
    TaskFilter.PENDING: "Pending tasks:",
}


def filter_from_args(args: argparse.Namespace) -> TaskFilter:
    if getattr(args, "completed", False):
        return TaskFilter.COMPLETED
    if getattr(args, "pending", False):
        return TaskFilter.PENDING
    return TaskFilter.ALL


# ---- handlers ----


def cmd_add(repo: TaskRepo, args: argparse.Namespace) -> str:
    words = args.description
    description = " ".join(words) if isinstance(words, list) else str(words or "")

    collection = repo.load()
    task = repo.add(collection, description)
    repo.save(collection)

    logger.info("Task added id=%s", task.id)
    return f"✓ Task {task.id} added: {task.description}"


def cmd_list(repo: TaskRepo, args: argparse.Namespace) -> str:
    task_filter = filter_from_args(args)
    tasks = repo.load().filter(task_filter)
    if not tasks:
        return "No tasks found."

    lines = [_LIST_HEADERS[task_filter]]
    lines.extend(render_task(t) for t in tasks)
    return "\n".join(lines)


def cmd_complete(repo: TaskRepo, args: argparse.Namespace) -> str:
    task_id = int(args.id)
    collection = repo.load()
    task = collection.find(task_id)
    if task is None:
        raise NotFound(task_id)

    if task.completed:
        return f"Task {task_id} is already completed."

    task.completed = True
    repo.save(collection)
    logger.info("Task completed id=%s", task_id)
    return f"✓ Task {task_id} marked as complete!"


def cmd_delete(repo: TaskRepo, args: argparse.Namespace) -> str:
    task_id = int(args.id)
    collection = repo.load()
    task = collection.find(task_id)
    if task is None:
        raise NotFound(task_id)

    # Keep the counter: the removed id must not come back.
    collection.next_id = repo.next_id(collection)
    collection.tasks.remove(task)
    repo.save(collection)
    logger.info("Task deleted id=%s", task_id)
    return f"✓ Task {task_id} deleted."


def cmd_clear(repo: TaskRepo, args: argparse.Namespace) -> str:
    if not getattr(args, "yes", False):
        raise InvalidInput("This will delete all tasks. Use --yes to confirm.")

    collection = repo.load()
    count = len(collection)
    collection.next_id = repo.next_id(collection)
    collection.tasks.clear()
    repo.save(collection)
    logger.info("Cleared %d task(s)", count)
    return f"✓ Cleared {count} task(s)."


# ---- argument wiring ----


def _add_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("description", nargs="+", help="The task description")


def _list_args(p: argparse.ArgumentParser) -> None:
    group = p.add_mutually_exclusive_group()
    group.add_argument("-c", "--completed", action="store_true", help="Show only completed tasks")
    group.add_argument("-p", "--pending", action="store_true", help="Show only pending tasks")


def _id_args(action: str) -> ArgsConfigurator:
    def configure(p: argparse.ArgumentParser) -> None:
        p.add_argument("id", type=int, help=f"The ID of the task to {action}")

    return configure


def _clear_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("-y", "--yes", action="store_true", help="Confirm clearing all tasks")


registry.register("add", cmd_add, help_text="Add a new task to the to-do list.", configure=_add_args)
registry.register(
    "list", cmd_list, help_text="List tasks (all, completed or pending).", configure=_list_args, aliases=["ls"]
)
registry.register(
    "complete", cmd_complete, help_text="Mark a task as complete.", configure=_id_args("complete"), aliases=["done"]
)
registry.register(
    "delete", cmd_delete, help_text="Delete a task.", configure=_id_args("delete"), aliases=["rm"]
)
registry.register("clear", cmd_clear, help_text="Clear all tasks (requires --yes).", configure=_clear_args)
