"""Error types shared by the storage and task layers."""

from .exceptions import (
    TaskpadError,
    StorageError,
    StorageReadError,
    StorageWriteError,
    InvalidKeyError,
    TaskStoreError,
    LoadFailure,
    WriteFailure,
)

__all__ = [
    "TaskpadError",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "InvalidKeyError",
    "TaskStoreError",
    "LoadFailure",
    "WriteFailure",
]
