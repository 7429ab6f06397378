"""
Simulated email notifications.

A recurring check that looks at the pending tasks and appends one log line
about the oldest of them. Nothing is ever sent; the log is the only output.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from tasklist_mcp.models.task import NotificationEntry, TaskModel
from tasklist_mcp.repository import TaskRepository, _utcnow
from tasklist_mcp.scheduling import RecurringTimer

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 1200.0
DEFAULT_DISPLAY_LIMIT = 5


def build_pending_message(pending: list[TaskModel]) -> str | None:
    """
    Describe the pending tasks, naming the oldest one.

    Output: 'Email: 3 pending - "Pay bills" +2 more'
    """
    if not pending:
        return None
    oldest = min(pending, key=lambda t: (t.created_at, t.id))
    message = f'Email: {len(pending)} pending - "{oldest.title}"'
    if len(pending) > 1:
        message += f" +{len(pending) - 1} more"
    return message


class NotificationScheduler:
    """
    Periodic pending-task check for an authenticated session.

    start() runs one check immediately and then every `interval_seconds`;
    stop() cancels the timer. The log is append-only until reset().
    """

    def __init__(
        self,
        repository: TaskRepository,
        *,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._repository = repository
        self._clock = clock
        self._entries: list[NotificationEntry] = []
        self._timer = RecurringTimer(interval_seconds, self.tick, name="pending-task-notifier")

    @property
    def running(self) -> bool:
        return self._timer.running

    @property
    def interval_seconds(self) -> float:
        return self._timer.interval

    @property
    def entries(self) -> list[NotificationEntry]:
        return list(self._entries)

    def tick(self) -> NotificationEntry | None:
        """Run one check. Returns the new entry, or None when nothing is pending."""
        message = build_pending_message(self._repository.pending())
        if message is None:
            return None

        entry = NotificationEntry(timestamp=self._clock(), message=message)
        self._entries.append(entry)
        logger.info("%s", entry.render())
        return entry

    def start(self) -> None:
        if self.running:
            return
        self.tick()
        self._timer.start()

    def restart(self) -> None:
        """Run a check now; a running timer begins a fresh interval from this moment."""
        was_running = self.running
        self.stop()
        self.tick()
        if was_running:
            self._timer.start()

    def stop(self) -> None:
        self._timer.cancel()

    def reset(self) -> None:
        self.stop()
        self._entries.clear()

    def recent(self, limit: int = DEFAULT_DISPLAY_LIMIT) -> list[NotificationEntry]:
        """Most recent entries, newest first."""
        if limit <= 0:
            return []
        return list(reversed(self._entries[-limit:]))
