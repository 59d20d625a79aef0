"""Key-value byte stores used to persist the task list."""
import logging
import os
import re
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from ..services.exceptions import InvalidKeyError, StorageReadError, StorageWriteError

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9_.-]*")


def _file_mode() -> int:
    # Mode a plain open() would give a new file under the current umask
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class KeyValueStore(ABC):
    """Get/set-by-key byte store."""

    @abstractmethod
    def get(self, key: str) -> Optional[bytes]:
        """Return the bytes stored under key, or None if the key is absent.

        Raises:
            StorageReadError: If the stored value exists but cannot be read
        """

    @abstractmethod
    def set(self, key: str, value: bytes) -> None:
        """Store value under key, replacing any previous value as a whole.

        Raises:
            StorageWriteError: If the write is rejected
        """


class FileKeyValueStore(KeyValueStore):
    """Stores each key as one file inside a directory."""

    def __init__(self, directory: Path):
        """Initialize the file store.

        Args:
            directory: Directory holding one file per key. Created on first write.
        """
        self.directory = Path(directory)

    def _path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.fullmatch(key):
            raise InvalidKeyError(f"Invalid storage key: {key!r}")
        return self.directory / key

    def get(self, key: str) -> Optional[bytes]:
        path = self._path_for(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageReadError(f"Failed to read '{key}' from {path}: {e}") from e

    def set(self, key: str, value: bytes) -> None:
        path = self._path_for(key)
        tmp_path = None
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            # Write a sibling temp file and rename over the target so readers
            # only ever see the old value or the complete new one
            with tempfile.NamedTemporaryFile(
                dir=self.directory, prefix=f".{key}.", suffix=".tmp", delete=False
            ) as f:
                tmp_path = Path(f.name)
                f.write(value)
                f.flush()
                os.fsync(f.fileno())
            # NamedTemporaryFile creates the file 0600
            os.chmod(tmp_path, _file_mode())
            os.replace(tmp_path, path)
        except OSError as e:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise StorageWriteError(f"Failed to write '{key}' to {path}: {e}") from e
        logger.debug(f"Wrote {len(value)} bytes to {path}")


class MemoryKeyValueStore(KeyValueStore):
    """Dict-backed store."""

    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self._data: Dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)
