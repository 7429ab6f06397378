"""Tests for the session store and timers."""

import asyncio

import pytest

from tasklist_mcp.errors import SessionStorageError
from tasklist_mcp.scheduling import Debouncer, RecurringTimer
from tasklist_mcp.storage import SessionStore


class TestSessionStore:
    """Tests for key/value session storage."""

    def test_json_round_trip(self, store):
        store.set_json("k", {"a": [1, 2], "b": "ü"})
        assert store.get_json("k") == {"a": [1, 2], "b": "ü"}
        assert store.get_item("k") == '{"a": [1, 2], "b": "ü"}'

    def test_missing_key(self, store):
        assert store.get_json("missing") is None
        assert store.get_item("missing") is None

    def test_remove_and_clear(self, store):
        store.set_item("a", "1")
        store.set_item("b", "2")
        store.remove_item("a")
        store.remove_item("a")
        assert store.keys() == ["b"]
        store.clear()
        assert len(store) == 0

    def test_unserializable_value(self, store):
        with pytest.raises(SessionStorageError):
            store.set_json("k", {"obj": object()})
        assert "k" not in store

    def test_invalid_json(self, store):
        store.set_item("k", "{oops")
        with pytest.raises(SessionStorageError):
            store.get_json("k")

    def test_quota_exceeded_keeps_old_value(self):
        store = SessionStore(quota_bytes=20)
        store.set_item("k", "small")
        with pytest.raises(SessionStorageError):
            store.set_item("k", "x" * 50)
        assert store.get_item("k") == "small"

    def test_quota_counts_replaced_value_once(self):
        store = SessionStore(quota_bytes=10)
        store.set_item("k", "12345678")
        store.set_item("k", "87654321")
        assert store.usage_bytes() == 9

    def test_no_quota(self, store):
        store.set_item("k", "x" * 100_000)
        assert store.usage_bytes() == 100_001


class TestDebouncer:
    """Tests for the debounce timer."""

    def test_fires_immediately_without_event_loop(self):
        seen = []
        debouncer = Debouncer(1.0, seen.append)
        debouncer.trigger("a")
        assert seen == ["a"]
        assert not debouncer.pending

    def test_negative_delay_rejected(self):
        with pytest.raises(ValueError):
            Debouncer(-1, print)

    @pytest.mark.asyncio
    async def test_only_last_value_fires(self):
        seen = []
        debouncer = Debouncer(0.03, seen.append)
        for value in ("a", "ab", "abc"):
            debouncer.trigger(value)
        assert debouncer.pending
        await asyncio.sleep(0.1)
        assert seen == ["abc"]

    @pytest.mark.asyncio
    async def test_cancel(self):
        seen = []
        debouncer = Debouncer(0.03, seen.append)
        debouncer.trigger("a")
        debouncer.cancel()
        await asyncio.sleep(0.1)
        assert seen == []

    @pytest.mark.asyncio
    async def test_zero_delay_fires_at_once(self):
        seen = []
        Debouncer(0, seen.append).trigger("a")
        assert seen == ["a"]


class TestRecurringTimer:
    """Tests for the recurring timer."""

    def test_invalid_interval(self):
        with pytest.raises(ValueError):
            RecurringTimer(0, lambda: None)

    def test_start_without_event_loop(self):
        timer = RecurringTimer(1.0, lambda: None)
        assert timer.start() is False
        assert not timer.running

    @pytest.mark.asyncio
    async def test_runs_until_cancelled(self):
        calls = []
        timer = RecurringTimer(0.02, lambda: calls.append(1))
        assert timer.start() is True
        assert calls == []
        await asyncio.sleep(0.11)
        timer.cancel()
        assert len(calls) >= 3
        assert not timer.running

    @pytest.mark.asyncio
    async def test_callback_failure_does_not_stop_timer(self):
        calls = []

        def flaky():
            calls.append(1)
            if len(calls) == 1:
                raise RuntimeError("first run fails")

        timer = RecurringTimer(0.02, flaky)
        timer.start()
        await asyncio.sleep(0.11)
        timer.cancel()
        assert len(calls) >= 2
