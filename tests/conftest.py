# tests/conftest.py

import os
from datetime import datetime, timedelta

# headless Qt; must be set before the QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from todo_app.config import Settings
from todo_app.core.task_manager import TaskManager


class FakeClock:
    """Deterministic clock: each call advances by `step`."""

    def __init__(self, start: datetime = datetime(2024, 5, 1, 9, 0, 0), step: timedelta = timedelta(seconds=1)):
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def task_manager(qapp, clock) -> TaskManager:
    return TaskManager(clock=clock)


@pytest.fixture()
def fast_settings() -> Settings:
    """Short timers so UI flows finish quickly under qtbot."""
    return Settings(splash_delay_ms=20, login_delay_ms=20, toast_duration_ms=50)
