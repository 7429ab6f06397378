"""Pytest configuration and fixtures for tasklist-mcp tests."""

from datetime import date, datetime, timedelta, timezone

import pytest
import pytest_asyncio

from tasklist_mcp.config import Settings
from tasklist_mcp.enums import Priority
from tasklist_mcp.models.task import TaskModel
from tasklist_mcp.repository import TaskRepository
from tasklist_mcp.server import reset_state
from tasklist_mcp.session import AppState
from tasklist_mcp.storage import SessionStore


class FakeClock:
    """Deterministic clock: every call moves time forward by `step`."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)):
        self.now = start or datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        self.now = self.now + self.step
        return self.now


@pytest.fixture
def test_settings():
    """Settings with a short debounce and a long notification interval."""
    return Settings(
        notification_interval_seconds=3600.0,
        notification_display_limit=5,
        notify_on_change=False,
        search_debounce_seconds=0.01,
        storage_quota_bytes=None,
    )


@pytest.fixture
def store():
    return SessionStore()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def repository(store, clock):
    return TaskRepository(store, clock=clock)


@pytest.fixture
def app_state(test_settings):
    """Session state used synchronously (no event loop, so no recurring timers)."""
    state = AppState(test_settings)
    yield state
    state.close()


@pytest_asyncio.fixture
async def served_state(test_settings):
    """Fresh state installed as the one the MCP tools operate on."""
    state = reset_state(AppState(test_settings))
    yield state
    state.close()


@pytest.fixture
def task_factory():
    """Build TaskModel instances directly, ids and creation times ascending."""
    counter = {"n": 0}

    def make(
        title: str,
        description: str = "something to do",
        priority: Priority | str = Priority.MEDIUM,
        completed: bool = False,
        due_date: date = date(2024, 6, 1),
    ) -> TaskModel:
        counter["n"] += 1
        n = counter["n"]
        return TaskModel(
            id=n,
            title=title,
            description=description,
            priority=Priority(priority),
            due_date=due_date,
            completed=completed,
            created_at=datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc) + timedelta(minutes=n),
        )

    return make


@pytest.fixture
def sample_tasks(task_factory):
    """A mixed task list in newest-first order."""
    oldest_first = [
        task_factory("Buy Milk", "two litres", priority="low"),
        task_factory("Pay bills", "due friday", priority="high"),
        task_factory("Ship release", "tag and publish", priority="high", completed=True),
        task_factory("Call mom", "weekly call", priority="medium", completed=True),
        task_factory("Fix bike", "rear brake squeaks", priority="high"),
    ]
    return list(reversed(oldest_first))
