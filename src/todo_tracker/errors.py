# src/todo_tracker/errors.py

"""
Error kinds surfaced to the user.

Every error carries an exit code; the CLI prints the message and exits with it.
"""

from __future__ import annotations


class TodoError(Exception):
    exit_code: int = 1


class CorruptStore(TodoError):
    """Storage file exists but cannot be parsed. Never overwritten."""


class NotFound(TodoError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with ID {task_id} not found.")
        self.task_id = task_id


class InvalidInput(TodoError):
    """Empty description, missing confirmation, ..."""


class IOFailure(TodoError):
    """Storage path unreadable/unwritable. The OSError is chained as __cause__."""
