# tests/test_task_models.py

from __future__ import annotations

from todo_tracker.tasks.task_models import Task, TaskCollection, TaskFilter


def test_task_filter_matches() -> None:
    done = Task(id=1, description="a", completed=True)
    open_ = Task(id=2, description="b")

    assert TaskFilter.ALL.matches(done) and TaskFilter.ALL.matches(open_)
    assert TaskFilter.COMPLETED.matches(done) and not TaskFilter.COMPLETED.matches(open_)
    assert TaskFilter.PENDING.matches(open_) and not TaskFilter.PENDING.matches(done)
    assert TaskFilter("pending") is TaskFilter.PENDING


def test_collection_find_and_filter() -> None:
    collection = TaskCollection(
        tasks=[Task(id=3, description="x"), Task(id=1, description="y", completed=True)]
    )

    assert collection.find(1).description == "y"
    assert collection.find(99) is None
    assert [t.id for t in collection.filter(TaskFilter.PENDING)] == [3]
    assert [t.id for t in collection] == [3, 1]
    assert len(collection) == 2
