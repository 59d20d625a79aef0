"""Custom exceptions for taskpad."""


class TaskpadError(Exception):
    """Base exception for all taskpad errors."""

    pass


class StorageError(TaskpadError):
    """Exception raised by key-value store operations."""

    pass


class StorageReadError(StorageError):
    """Exception raised when a stored value cannot be read."""

    pass


class StorageWriteError(StorageError):
    """Exception raised when a value cannot be written."""

    pass


class InvalidKeyError(StorageError, ValueError):
    """Exception raised for a key the store cannot hold."""

    pass


class TaskStoreError(TaskpadError):
    """Exception raised for task store operations."""

    pass


class LoadFailure(TaskStoreError):
    """Persisted task list is missing or corrupt."""

    pass


class WriteFailure(TaskStoreError):
    """Persisting the task list was rejected."""

    pass
