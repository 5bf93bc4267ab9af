# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_tracker.config import Settings
from todo_tracker.tasks.task_store import TaskStore

from .fakes import FakeTaskRepo


@pytest.fixture()
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def store(store_path: Path) -> TaskStore:
    return TaskStore(store_path)


@pytest.fixture()
def repo() -> FakeTaskRepo:
    return FakeTaskRepo()


@pytest.fixture()
def settings(store_path: Path) -> Settings:
    """
    Explicit settings pointing at a tmp task file.

    Passed straight into main() so tests never read the real environment or ~/.
    """
    return Settings(store_path=store_path, log_level="WARNING", log_file=None)


@pytest.fixture()
def args():
    """Build an argparse-like namespace for calling handlers directly."""

    def _make(**kwargs) -> SimpleNamespace:
        return SimpleNamespace(**kwargs)

    return _make
