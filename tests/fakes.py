# tests/fakes.py

from __future__ import annotations

import copy

from todo_tracker.errors import InvalidInput
from todo_tracker.tasks.task_models import Task, TaskCollection


class FakeTaskRepo:
    """
    In-memory TaskRepo for command tests.

    load() hands out a deep copy, so a handler that raises before save()
    can never leak a mutation into the "stored" collection.
    """

    def __init__(self, tasks: list[Task] | None = None, next_id: int | None = None) -> None:
        tasks = list(tasks or [])
        if next_id is None:
            next_id = max((t.id for t in tasks), default=0) + 1
        self.stored = TaskCollection(tasks=tasks, next_id=next_id)
        self.saves = 0

    def load(self) -> TaskCollection:
        return copy.deepcopy(self.stored)

    def save(self, collection: TaskCollection) -> None:
        self.stored = copy.deepcopy(collection)
        self.saves += 1

    def next_id(self, collection: TaskCollection) -> int:
        highest = max((t.id for t in collection), default=0)
        return max(highest + 1, collection.next_id)

    def add(self, collection: TaskCollection, description: str) -> Task:
        text = description.strip()
        if not text:
            raise InvalidInput("Task description must not be empty.")
        task = Task(id=self.next_id(collection), description=text)
        collection.tasks.append(task)
        collection.next_id = task.id + 1
        return task
