"""
Cancellable timers on top of asyncio.

- Debouncer: runs a callback once a quiet period has elapsed since the last trigger.
- RecurringTimer: runs a callback every interval until cancelled.

Both need a running event loop to defer work. Without one, a Debouncer fires
immediately and a RecurringTimer does not recur.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class Debouncer:
    """Delay a callback until `delay` seconds pass with no further trigger."""

    def __init__(self, delay: float, callback: Callable[[Any], None]) -> None:
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self._delay = float(delay)
        self._callback = callback
        self._handle: asyncio.TimerHandle | None = None

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def trigger(self, value: Any) -> None:
        """Restart the quiet period; `value` is passed to the callback when it fires."""
        self.cancel()

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._callback(value)
            return

        if self._delay == 0:
            self._callback(value)
            return

        self._handle = loop.call_later(self._delay, self._fire, value)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, value: Any) -> None:
        self._handle = None
        self._callback(value)


class RecurringTimer:
    """
    Run a callback every `interval` seconds until cancelled.

    Callback failures are logged and do not stop the timer.
    To stop the timer, call cancel().
    """

    def __init__(self, interval: float, callback: Callable[[], Any], *, name: str = "recurring-timer") -> None:
        if interval <= 0:
            raise ValueError("interval must be > 0")
        self._interval = float(interval)
        self._callback = callback
        self._name = name
        self._task: asyncio.Task[None] | None = None

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> bool:
        """Schedule recurring runs. Returns False when there is no running loop."""
        if self.running:
            return True

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning("No running event loop; %s will not recur", self._name)
            return False

        self._task = loop.create_task(self._run(), name=self._name)
        logger.debug("%s started interval=%.3fs", self._name, self._interval)
        return True

    def cancel(self) -> None:
        if self._task is None:
            return
        if not self._task.done():
            self._task.cancel()
        self._task = None
        logger.debug("%s cancelled", self._name)

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                self._callback()
            except Exception:
                logger.exception("%s callback failed", self._name)
