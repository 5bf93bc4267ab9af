# src/todo_tracker/tasks/task_models.py

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum


class TaskFilter(StrEnum):
    """Which tasks `list` shows."""

    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"

    def matches(self, task: Task) -> bool:
        if self is TaskFilter.COMPLETED:
            return task.completed
        if self is TaskFilter.PENDING:
            return not task.completed
        return True


@dataclass(slots=True)
class Task:
    id: int
    description: str
    completed: bool = False
    created_at: str | None = None


@dataclass(slots=True)
class TaskCollection:
    """
    Ordered tasks plus the id counter.

    next_id is persisted so that deleting the newest task does not free its id.
    """

    tasks: list[Task] = field(default_factory=list)
    next_id: int = 1

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def find(self, task_id: int) -> Task | None:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def filter(self, task_filter: TaskFilter) -> list[Task]:
        return [t for t in self.tasks if task_filter.matches(t)]
