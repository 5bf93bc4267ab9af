# src/todo_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any

from ..errors import CorruptStore, InvalidInput, IOFailure
from .task_models import Task, TaskCollection

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


class TaskStore:
    """
    JSON file task store.

    The whole collection is read on load() and rewritten on save():
    - missing file -> empty collection (first run)
    - unparsable file -> CorruptStore, file left untouched
    - writes go to a sibling .tmp file, then os.replace() over the target

    The legacy layout (a bare JSON list of task records) is still readable;
    the next save upgrades it to the versioned envelope.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    # ---- parsing helpers ----

    def _corrupt(self, reason: str) -> CorruptStore:
        return CorruptStore(f"Task file {self._path} is corrupt: {reason}")

    def _record_to_task(self, raw: Any, index: int) -> Task:
        if not isinstance(raw, dict):
            raise self._corrupt(f"record #{index} is not an object")

        tid = raw.get("id")
        if isinstance(tid, bool) or not isinstance(tid, int) or tid < 1:
            raise self._corrupt(f"record #{index} has invalid id {tid!r}")

        description = raw.get("description")
        if not isinstance(description, str) or not description.strip():
            raise self._corrupt(f"task {tid} has no description")

        if "completed" not in raw:
            raise self._corrupt(f"task {tid} has no 'completed'")
        completed = raw["completed"]
        if not isinstance(completed, bool):
            raise self._corrupt(f"task {tid} has non-boolean 'completed'")

        created_at = raw.get("created_at")
        if created_at is not None and not isinstance(created_at, str):
            raise self._corrupt(f"task {tid} has invalid 'created_at'")

        return Task(id=tid, description=description, completed=completed, created_at=created_at)

    @staticmethod
    def _task_to_record(task: Task) -> dict[str, Any]:
        return {
            "id": task.id,
            "description": task.description,
            "completed": task.completed,
            "created_at": task.created_at,
        }

    def _parse(self, data: Any) -> TaskCollection:
        stored_next: int | None = None
        if isinstance(data, list):
            records = data
        elif isinstance(data, dict):
            records = data.get("tasks")
            if not isinstance(records, list):
                raise self._corrupt("'tasks' is missing or not a list")
            stored_next = data.get("next_id")
            if stored_next is not None and (
                isinstance(stored_next, bool) or not isinstance(stored_next, int) or stored_next < 1
            ):
                raise self._corrupt(f"invalid next_id {stored_next!r}")
        else:
            raise self._corrupt("expected a JSON object or list")

        tasks: list[Task] = []
        seen: set[int] = set()
        for i, raw in enumerate(records):
            task = self._record_to_task(raw, i)
            if task.id in seen:
                raise self._corrupt(f"duplicate task id {task.id}")
            seen.add(task.id)
            tasks.append(task)

        floor = max(seen) + 1 if seen else 1
        return TaskCollection(tasks=tasks, next_id=max(floor, stored_next or 1))

    # ---- public API ----

    def load(self) -> TaskCollection:
        try:
            raw = self._path.read_text("utf-8")
        except FileNotFoundError:
            logger.debug("No task file at %s, starting empty", self._path)
            return TaskCollection()
        except UnicodeDecodeError as e:
            raise self._corrupt("not valid UTF-8") from e
        except OSError as e:
            raise IOFailure(f"Cannot read task file {self._path}: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise self._corrupt(f"invalid JSON ({e})") from e

        collection = self._parse(data)
        logger.debug(
            "Loaded %d task(s) from %s next_id=%s", len(collection), self._path, collection.next_id
        )
        return collection

    def save(self, collection: TaskCollection) -> None:
        payload = {
            "version": FORMAT_VERSION,
            "next_id": self.next_id(collection),
            "tasks": [self._task_to_record(t) for t in collection],
        }
        text = json.dumps(payload, ensure_ascii=False, indent=2) + "\n"

        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(text, "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise IOFailure(f"Cannot write task file {self._path}: {e}") from e

        with contextlib.suppress(OSError):
            # Best-effort: personal data, keep the file private on disk.
            os.chmod(self._path, 0o600)
        logger.debug("Saved %d task(s) to %s", len(collection), self._path)

    @staticmethod
    def next_id(collection: TaskCollection) -> int:
        highest = max((t.id for t in collection), default=0)
        return max(highest + 1, collection.next_id)

    def add(self, collection: TaskCollection, description: str) -> Task:
        """Append a new pending task. Mutates the collection only; call save() after."""
        text = (description or "").strip()
        if not text:
            raise InvalidInput("Task description must not be empty.")

        task = Task(
            id=self.next_id(collection),
            description=text,
            completed=False,
            created_at=datetime.now().astimezone().isoformat(timespec="seconds"),
        )
        collection.tasks.append(task)
        collection.next_id = task.id + 1
        return task
