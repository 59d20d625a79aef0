"""Core functionality for taskpad."""

from .kv_store import FileKeyValueStore, KeyValueStore, MemoryKeyValueStore
from .task_store import TaskStore

__all__ = [
    'FileKeyValueStore',
    'KeyValueStore',
    'MemoryKeyValueStore',
    'TaskStore',
]
