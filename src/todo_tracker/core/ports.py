# src/todo_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command layer.

Commands depend on this Protocol rather than on TaskStore directly,
so tests can swap in an in-memory repo.
"""

from typing import Protocol

from ..tasks.task_models import Task, TaskCollection


class TaskRepo(Protocol):
    def load(self) -> TaskCollection: ...
    def save(self, collection: TaskCollection) -> None: ...
    def next_id(self, collection: TaskCollection) -> int: ...
    def add(self, collection: TaskCollection, description: str) -> Task: ...
