"""
Pytest configuration and shared fixtures.
Every test gets its own task file under tmp_path.
"""
from datetime import datetime, timedelta

import pytest

from task_tracker.config import get_settings
from task_tracker.services import TaskRegistry
from task_tracker.storage import TaskStore


class FakeClock:
    """Clock that advances one minute per call."""

    def __init__(self, start=datetime(2026, 10, 17, 9, 0, 0)):
        self.current = start

    def __call__(self):
        now = self.current
        self.current = self.current + timedelta(minutes=1)
        return now


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Keep settings isolated from the developer's environment."""
    monkeypatch.delenv("TASK_TRACKER_FILE", raising=False)
    monkeypatch.delenv("TASK_TRACKER_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def tasks_path(tmp_path):
    """Path of a task file that does not exist yet."""
    return tmp_path / "tasks.json"


@pytest.fixture
def store(tasks_path):
    return TaskStore(tasks_path)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def registry(store, clock):
    """Registry over an empty store with a deterministic clock."""
    return TaskRegistry.from_store(store, clock=clock)
