"""Tests for the application state and login gate."""

import asyncio

import pytest

from tasklist_mcp.config import Settings
from tasklist_mcp.errors import LoginValidationError, NotAuthenticatedError, SessionStorageError
from tasklist_mcp.session import AppState, validate_login
from tasklist_mcp.storage import AUTH_KEY, TASKS_KEY


class TestValidateLogin:
    """Tests for login input checks."""

    def test_valid(self):
        assert validate_login("  me@example.com ", "secret") == "me@example.com"

    def test_missing_both(self):
        with pytest.raises(LoginValidationError) as exc_info:
            validate_login("", "")
        assert exc_info.value.errors == {"email": "Email is required", "password": "Password is required"}

    def test_email_without_at(self):
        with pytest.raises(LoginValidationError) as exc_info:
            validate_login("not-an-email", "secret")
        assert exc_info.value.errors == {"email": "Please enter a valid email"}

    def test_missing_password(self):
        with pytest.raises(LoginValidationError) as exc_info:
            validate_login("me@example.com", None)
        assert exc_info.value.errors == {"password": "Password is required"}


class TestLoginLogout:
    """Tests for the session lifecycle."""

    def test_login_records_session(self, app_state):
        record = app_state.login("me@example.com", "secret")
        assert record.email == "me@example.com"
        assert app_state.is_authenticated
        assert app_state.email == "me@example.com"
        assert app_state.store.get_json(AUTH_KEY) == {"email": "me@example.com", "loggedIn": True}

    def test_failed_login_leaves_no_session(self, app_state):
        with pytest.raises(LoginValidationError):
            app_state.login("nobody", "secret")
        assert not app_state.is_authenticated
        assert AUTH_KEY not in app_state.store

    def test_require_login(self, app_state):
        with pytest.raises(NotAuthenticatedError):
            app_state.require_login()
        app_state.login("me@example.com", "secret")
        app_state.require_login()

    def test_end_to_end_scenario(self, app_state):
        app_state.login("me@example.com", "secret")
        task = app_state.repository.create(
            title="Pay bills", description="due friday", priority="high", due_date="2024-06-01"
        )

        stats = app_state.repository.stats()
        assert (stats.total, stats.pending, stats.high_priority) == (1, 1, 1)

        app_state.repository.toggle_complete(task.id)
        stats = app_state.repository.stats()
        assert (stats.completed, stats.pending) == (1, 0)

        app_state.logout()
        assert len(app_state.repository) == 0
        assert not app_state.is_authenticated
        assert AUTH_KEY not in app_state.store
        assert TASKS_KEY not in app_state.store

    def test_logout_clears_filters_and_log(self, app_state):
        app_state.login("me@example.com", "secret")
        app_state.repository.create(title="A", description="d", due_date="2024-06-01")
        app_state.notifier.tick()
        app_state.filters.set_status("pending")

        app_state.logout()

        assert app_state.notifier.entries == []
        assert app_state.filters.status.value == "all"

    def test_relogin_starts_fresh(self, app_state):
        app_state.login("me@example.com", "secret")
        app_state.repository.create(title="A", description="d", due_date="2024-06-01")
        app_state.logout()

        app_state.login("me@example.com", "secret")
        assert len(app_state.repository) == 0
        assert app_state.notifier.entries == []

    def test_login_ticks_when_tasks_are_pending(self, app_state):
        app_state.login("me@example.com", "secret")
        app_state.repository.create(title="A", description="d", due_date="2024-06-01")
        app_state.close()

        other = AppState(app_state.settings, store=app_state.store)
        other.login("me@example.com", "secret")
        assert [e.message for e in other.notifier.entries] == ['Email: 1 pending - "A"']
        other.close()

    def test_visible_tasks_uses_filter_state(self, app_state):
        app_state.login("me@example.com", "secret")
        a = app_state.repository.create(title="Buy Milk", description="d", due_date="2024-06-01")
        app_state.repository.create(title="Pay bills", description="d", due_date="2024-06-01")
        app_state.filters.set_search("milk")
        assert app_state.visible_tasks() == [a]

    @pytest.mark.asyncio
    async def test_notifications_run_only_while_logged_in(self, app_state):
        assert not app_state.notifier.running
        app_state.login("me@example.com", "secret")
        assert app_state.notifier.running
        app_state.logout()
        assert not app_state.notifier.running


class TestRestore:
    """Tests for picking up an existing session record."""

    def test_restore_existing_session(self, app_state):
        app_state.login("me@example.com", "secret")
        app_state.repository.create(title="A", description="d", due_date="2024-06-01")
        app_state.close()

        restored = AppState(app_state.settings, store=app_state.store)
        assert restored.restore() is True
        assert restored.email == "me@example.com"
        assert [t.title for t in restored.repository.list_tasks()] == ["A"]
        restored.close()

    def test_restore_without_record(self, app_state):
        assert app_state.restore() is False
        assert not app_state.is_authenticated

    def test_restore_logged_out_record(self, app_state):
        app_state.store.set_json(AUTH_KEY, {"email": "me@example.com", "loggedIn": False})
        assert app_state.restore() is False

    def test_restore_malformed_record(self, app_state):
        app_state.store.set_json(AUTH_KEY, {"loggedIn": True})
        with pytest.raises(SessionStorageError):
            app_state.restore()


class TestNotifyOnChange:
    """Tests for the optional change-driven notification check."""

    def test_change_triggers_check(self, test_settings):
        settings = test_settings.model_copy(update={"notify_on_change": True})
        state = AppState(settings)
        state.login("me@example.com", "secret")
        assert state.notifier.entries == []

        task = state.repository.create(title="A", description="d", due_date="2024-06-01")
        assert [e.message for e in state.notifier.entries] == ['Email: 1 pending - "A"']

        state.repository.toggle_complete(task.id)
        assert len(state.notifier.entries) == 1

        state.logout()
        assert state.notifier.entries == []
        state.close()

    def test_no_checks_before_login(self, test_settings):
        settings = test_settings.model_copy(update={"notify_on_change": True})
        state = AppState(settings)
        state.repository.create(title="A", description="d", due_date="2024-06-01")
        assert state.notifier.entries == []

    def test_disabled_by_default(self):
        assert Settings.model_fields["notify_on_change"].default is False


class TestSwitchingUser:
    """Tests for logging in as someone else while a session is open."""

    def test_other_email_starts_a_new_session(self, app_state):
        app_state.login("a@example.com", "secret")
        app_state.repository.create(title="A", description="d", due_date="2024-06-01")
        app_state.notifier.tick()
        app_state.filters.set_status("pending")

        app_state.login("b@example.com", "secret")

        assert app_state.email == "b@example.com"
        assert len(app_state.repository) == 0
        assert app_state.notifier.entries == []
        assert app_state.filters.status.value == "all"
        assert TASKS_KEY not in app_state.store
        assert app_state.store.get_json(AUTH_KEY) == {"email": "b@example.com", "loggedIn": True}

    def test_same_email_keeps_session(self, app_state):
        app_state.login("a@example.com", "secret")
        app_state.repository.create(title="A", description="d", due_date="2024-06-01")

        app_state.login("a@example.com", "secret")

        assert [t.title for t in app_state.repository.list_tasks()] == ["A"]

    def test_failed_switch_keeps_current_session(self, app_state):
        app_state.login("a@example.com", "secret")
        app_state.repository.create(title="A", description="d", due_date="2024-06-01")

        with pytest.raises(LoginValidationError):
            app_state.login("b@example.com", "")

        assert app_state.email == "a@example.com"
        assert len(app_state.repository) == 1


class TestChangeRephasing:
    """Tests for the interval restarting after a change-driven check."""

    @pytest.mark.asyncio
    async def test_mutation_restarts_interval(self, test_settings):
        settings = test_settings.model_copy(
            update={"notify_on_change": True, "notification_interval_seconds": 0.3}
        )
        state = AppState(settings)
        try:
            state.login("me@example.com", "secret")
            assert state.notifier.entries == []

            await asyncio.sleep(0.2)
            state.repository.create(title="A", description="d", due_date="2024-06-01")
            assert len(state.notifier.entries) == 1
            assert state.notifier.running

            # the login phase would have ticked at 0.3
            await asyncio.sleep(0.15)
            assert len(state.notifier.entries) == 1

            await asyncio.sleep(0.25)
            assert len(state.notifier.entries) == 2
        finally:
            state.close()
