"""Models for taskpad."""

from .config import TaskpadConfig
from .task import Category, Priority, Task, TaskDraft, TaskListAdapter

__all__ = [
    'TaskpadConfig',
    'Category',
    'Priority',
    'Task',
    'TaskDraft',
    'TaskListAdapter',
]
