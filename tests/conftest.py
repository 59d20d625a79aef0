import logging
from datetime import datetime

import pytest
from click.testing import CliRunner

from taskpad.core.kv_store import MemoryKeyValueStore
from taskpad.core.task_store import TaskStore


FIXED_NOW = datetime(2024, 1, 1, 9, 30)


class FakeClock:
    """Clock returning a settable time."""

    def __init__(self, now=FIXED_NOW):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def data_dir(tmp_path):
    """Data directory for a test; not created up front."""
    return tmp_path / ".taskpad"


@pytest.fixture
def clock():
    """Provides a fixed clock at 2024-01-01 09:30."""
    return FakeClock()


@pytest.fixture
def memory_store():
    """Provides an empty in-memory key-value store."""
    return MemoryKeyValueStore()


@pytest.fixture
def task_store(memory_store, clock):
    """Provides a loaded, empty task store over memory_store."""
    store = TaskStore(memory_store, clock=clock)
    store.load()
    return store


@pytest.fixture(autouse=True)
def reset_taskpad_logger():
    """Undo CLI logging setup so caplog sees taskpad records in every test."""
    yield
    logger = logging.getLogger("taskpad")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture(autouse=True)
def isolated_data_dir_env(monkeypatch):
    """Keep tests away from a real TASKPAD_HOME."""
    monkeypatch.delenv("TASKPAD_HOME", raising=False)
