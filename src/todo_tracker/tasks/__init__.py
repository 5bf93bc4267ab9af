from .task_models import Task, TaskCollection, TaskFilter
from .task_store import TaskStore

__all__ = ["Task", "TaskCollection", "TaskFilter", "TaskStore"]
