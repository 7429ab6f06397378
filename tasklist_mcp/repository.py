"""In-memory task repository mirrored to the session store."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timezone

from pydantic import ValidationError

from tasklist_mcp.enums import ChangeKind, Priority
from tasklist_mcp.errors import SessionStorageError, TaskNotFoundError, TaskValidationError
from tasklist_mcp.models.task import TaskModel, TaskStats
from tasklist_mcp.storage import TASKS_KEY, SessionStore
from tasklist_mcp.utils.parsers import _dump_tasks, _parse_due_date, _parse_tasks

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ChangeEvent:
    """Emitted to subscribers after every successful mutation."""

    kind: ChangeKind
    task_id: int | None = None


Listener = Callable[[ChangeEvent], None]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def validate_task_fields(
    title: str | None,
    description: str | None,
    priority: Priority | str | None,
    due_date: str | date | None,
) -> tuple[str, str, Priority, date]:
    """
    Check required task fields and normalize them.

    Returns:
        Tuple of (title, description, priority, due_date), trimmed and parsed

    Raises:
        TaskValidationError: With one message per invalid field
    """
    errors: dict[str, str] = {}

    clean_title = (title or "").strip()
    if not clean_title:
        errors["title"] = "Title is required"

    clean_description = (description or "").strip()
    if not clean_description:
        errors["description"] = "Description is required"

    clean_priority = Priority.MEDIUM
    if priority is not None and priority != "":
        try:
            clean_priority = Priority(priority)
        except ValueError:
            errors["priority"] = "Priority must be one of: low, medium, high"

    clean_due: date | None = None
    if due_date is None or (isinstance(due_date, str) and not due_date.strip()):
        errors["due_date"] = "Due date is required"
    else:
        try:
            clean_due = _parse_due_date(due_date)
        except ValueError:
            errors["due_date"] = "Due date must be a valid date (YYYY-MM-DD)"

    if errors or clean_due is None:
        raise TaskValidationError(errors)

    return clean_title, clean_description, clean_priority, clean_due


class TaskRepository:
    """
    Authoritative task list for one session, newest first.

    Every mutation writes the full snapshot to the session store before the
    in-memory list is replaced, so a failed write leaves both unchanged.
    Subscribers are notified after the change is committed.
    """

    def __init__(self, store: SessionStore, *, clock: Callable[[], datetime] = _utcnow) -> None:
        self._store = store
        self._clock = clock
        self._tasks: list[TaskModel] = []
        self._listeners: list[Listener] = []
        self._last_id = 0

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self):
        return iter(list(self._tasks))

    # ---- observers ----

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener. Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, kind: ChangeKind, task_id: int | None = None) -> None:
        event = ChangeEvent(kind=kind, task_id=task_id)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Change listener failed kind=%s task_id=%s", kind.value, task_id)

    # ---- persistence ----

    def _commit(self, tasks: list[TaskModel], kind: ChangeKind, task_id: int | None = None) -> None:
        self._store.set_json(TASKS_KEY, _dump_tasks(tasks))
        self._tasks = tasks
        logger.debug("Tasks %s task_id=%s total=%s", kind.value, task_id, len(tasks))
        self._emit(kind, task_id)

    def load_snapshot(self) -> int:
        """
        Replace the in-memory list with the snapshot held in the session store.

        Returns:
            Number of tasks loaded (0 when no snapshot exists)

        Raises:
            SessionStorageError: If the snapshot is not a list of valid tasks with unique ids
        """
        raw = self._store.get_json(TASKS_KEY)
        if raw is None:
            return 0
        if not isinstance(raw, list):
            raise SessionStorageError(f"Stored '{TASKS_KEY}' is not a list")
        try:
            tasks = _parse_tasks(raw)
        except ValidationError as e:
            raise SessionStorageError(f"Stored '{TASKS_KEY}' holds malformed task records - {str(e)}") from e

        seen: set[int] = set()
        for task in tasks:
            if task.id in seen:
                raise SessionStorageError(f"Stored '{TASKS_KEY}' holds duplicate task id {task.id}")
            if not task.title.strip() or not task.description.strip():
                raise SessionStorageError(
                    f"Stored '{TASKS_KEY}' holds task {task.id} with a blank title or description"
                )
            seen.add(task.id)

        self._tasks = tasks
        self._last_id = max([self._last_id, *(t.id for t in tasks)])
        logger.info("Loaded %s task(s) from session store", len(tasks))
        self._emit(ChangeKind.LOADED)
        return len(tasks)

    # ---- queries ----

    def list_tasks(self) -> list[TaskModel]:
        return list(self._tasks)

    def get(self, task_id: int) -> TaskModel:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)

    def find(self, task_id: int) -> TaskModel | None:
        return next((t for t in self._tasks if t.id == task_id), None)

    def pending(self) -> list[TaskModel]:
        return [t for t in self._tasks if not t.completed]

    def stats(self) -> TaskStats:
        completed = sum(1 for t in self._tasks if t.completed)
        return TaskStats(
            total=len(self._tasks),
            completed=completed,
            pending=len(self._tasks) - completed,
            high_priority=sum(1 for t in self._tasks if t.priority == Priority.HIGH),
        )

    # ---- mutations ----

    def _next_id(self, now: datetime) -> int:
        candidate = int(now.timestamp() * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        return candidate

    def create(
        self,
        *,
        title: str | None,
        description: str | None,
        due_date: str | date | None,
        priority: Priority | str | None = Priority.MEDIUM,
    ) -> TaskModel:
        """Validate fields and prepend a new pending task."""
        clean_title, clean_description, clean_priority, clean_due = validate_task_fields(
            title, description, priority, due_date
        )

        now = self._clock()
        task = TaskModel(
            id=self._next_id(now),
            title=clean_title,
            description=clean_description,
            priority=clean_priority,
            due_date=clean_due,
            completed=False,
            created_at=now,
        )
        self._commit([task, *self._tasks], ChangeKind.CREATED, task.id)
        self._last_id = task.id
        return task

    def update(
        self,
        task_id: int,
        *,
        title: str | None,
        description: str | None,
        due_date: str | date | None,
        priority: Priority | str | None = Priority.MEDIUM,
        completed: bool | None = None,
    ) -> TaskModel:
        """
        Replace a task's editable fields, keeping its id and creation time.

        Raises:
            TaskNotFoundError: If no task has this id
            TaskValidationError: If a required field is missing or malformed
        """
        current = self.get(task_id)
        clean_title, clean_description, clean_priority, clean_due = validate_task_fields(
            title, description, priority, due_date
        )

        updated = current.model_copy(
            update={
                "title": clean_title,
                "description": clean_description,
                "priority": clean_priority,
                "due_date": clean_due,
                "completed": current.completed if completed is None else completed,
            }
        )
        tasks = [updated if t.id == task_id else t for t in self._tasks]
        self._commit(tasks, ChangeKind.UPDATED, task_id)
        return updated

    def toggle_complete(self, task_id: int) -> TaskModel | None:
        """Flip a task's completed flag. Returns None (no-op) if the id is absent."""
        current = self.find(task_id)
        if current is None:
            logger.debug("Toggle ignored, no task id=%s", task_id)
            return None

        toggled = current.model_copy(update={"completed": not current.completed})
        tasks = [toggled if t.id == task_id else t for t in self._tasks]
        self._commit(tasks, ChangeKind.TOGGLED, task_id)
        return toggled

    def delete(self, task_id: int) -> bool:
        """Remove a task. Returns False (no-op) if the id is absent."""
        if self.find(task_id) is None:
            logger.debug("Delete ignored, no task id=%s", task_id)
            return False

        self._commit([t for t in self._tasks if t.id != task_id], ChangeKind.DELETED, task_id)
        return True

    def clear(self) -> None:
        """Drop every task, persisting the empty list."""
        self._commit([], ChangeKind.CLEARED)
