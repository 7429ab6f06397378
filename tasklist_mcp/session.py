"""Application state for one session: login gate, tasks, filters, notifications."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from tasklist_mcp.config import Settings, get_settings
from tasklist_mcp.enums import ChangeKind
from tasklist_mcp.errors import LoginValidationError, NotAuthenticatedError, SessionStorageError
from tasklist_mcp.filters import FilterState
from tasklist_mcp.models.task import SessionRecord, TaskModel
from tasklist_mcp.notifications import NotificationScheduler
from tasklist_mcp.repository import ChangeEvent, TaskRepository
from tasklist_mcp.storage import AUTH_KEY, SessionStore

logger = logging.getLogger(__name__)


def validate_login(email: str | None, password: str | None) -> str:
    """
    Check login input. Any email containing '@' and any non-empty password pass.

    Returns:
        The trimmed email

    Raises:
        LoginValidationError: With one message per invalid field
    """
    errors: dict[str, str] = {}
    clean_email = (email or "").strip()

    if not clean_email:
        errors["email"] = "Email is required"
    elif "@" not in clean_email:
        errors["email"] = "Please enter a valid email"

    if not password:
        errors["password"] = "Password is required"

    if errors:
        raise LoginValidationError(errors)
    return clean_email


class AppState:
    """
    Explicit state for one session.

    Owns the session store, the task repository, the filter state and the
    notification scheduler. Nothing here is a security boundary: login only
    sets a flag.

    Logging out clears the whole session, tasks included.
    """

    def __init__(self, settings: Settings | None = None, *, store: SessionStore | None = None) -> None:
        self.settings = settings or get_settings()
        self.store = store if store is not None else SessionStore(quota_bytes=self.settings.storage_quota_bytes)
        self.repository = TaskRepository(self.store)
        self.filters = FilterState(debounce_seconds=self.settings.search_debounce_seconds)
        self.notifier = NotificationScheduler(
            self.repository,
            interval_seconds=self.settings.notification_interval_seconds,
        )
        self._email: str | None = None

        if self.settings.notify_on_change:
            self.repository.subscribe(self._on_tasks_changed)

    @property
    def is_authenticated(self) -> bool:
        return self._email is not None

    @property
    def email(self) -> str | None:
        return self._email

    def require_login(self) -> None:
        if not self.is_authenticated:
            raise NotAuthenticatedError()

    def login(self, email: str | None, password: str | None) -> SessionRecord:
        """Validate input, record the session, restore saved tasks and start notifications."""
        clean_email = validate_login(email, password)
        if self.is_authenticated and clean_email != self._email:
            # a different user never inherits the current session
            self.logout()

        record = SessionRecord(email=clean_email, logged_in=True)
        self.store.set_json(AUTH_KEY, record.model_dump(by_alias=True))

        already = self.is_authenticated
        self._email = clean_email
        if not already:
            self.repository.load_snapshot()
        self.notifier.start()
        logger.info("Session started email=%s tasks=%s", clean_email, len(self.repository))
        return record

    def restore(self) -> bool:
        """
        Re-establish a session from an existing auth record in the store.

        Returns:
            True if a logged-in record was found
        """
        raw = self.store.get_json(AUTH_KEY)
        if raw is None:
            return False
        try:
            record = SessionRecord.model_validate(raw)
        except ValidationError as e:
            raise SessionStorageError(f"Stored '{AUTH_KEY}' is malformed - {str(e)}") from e
        if not record.logged_in:
            return False

        self._email = record.email
        self.repository.load_snapshot()
        self.notifier.start()
        logger.info("Session restored email=%s tasks=%s", record.email, len(self.repository))
        return True

    def logout(self) -> None:
        """End the session: stop notifications and discard the flag, tasks, filters and log."""
        email = self._email
        self.notifier.reset()
        self.filters.reset()
        self.repository.clear()
        self.store.clear()
        self._email = None
        logger.info("Session ended email=%s", email)

    def visible_tasks(self) -> list[TaskModel]:
        """Tasks passing the session's current filters."""
        return self.filters.apply(self.repository.list_tasks())

    def close(self) -> None:
        """Cancel timers when the owner shuts down. Stored session data is left as is."""
        self.notifier.stop()
        self.filters.reset()

    def _on_tasks_changed(self, event: ChangeEvent) -> None:
        if not self.is_authenticated or event.kind in (ChangeKind.CLEARED, ChangeKind.LOADED):
            return
        self.notifier.restart()
