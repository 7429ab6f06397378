"""Task filtering: a pure filter function and the session's filter state."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from tasklist_mcp.enums import PriorityFilter, StatusFilter
from tasklist_mcp.models.task import TaskModel
from tasklist_mcp.scheduling import Debouncer


def matches_search(task: TaskModel, search_text: str) -> bool:
    """True when title or description contains the text, ignoring case."""
    query = search_text.strip().lower()
    if not query:
        return True
    return query in task.title.lower() or query in task.description.lower()


def filter_tasks(
    tasks: Iterable[TaskModel],
    status: StatusFilter | str = StatusFilter.ALL,
    priority: PriorityFilter | str = PriorityFilter.ALL,
    search_text: str = "",
) -> list[TaskModel]:
    """
    Derive the visible task list.

    All predicates must pass, input order is preserved:
    - status: completed -> completed only, pending -> incomplete only, all -> any
    - priority: anything but all -> exact priority match
    - search_text: non-empty -> case-insensitive substring of title or description

    Args:
        tasks: Tasks in display order
        status: Status selector
        priority: Priority selector
        search_text: Settled search text

    Returns:
        New list with the matching tasks
    """
    status = StatusFilter(status)
    priority = PriorityFilter(priority)

    result: list[TaskModel] = []
    for task in tasks:
        if status == StatusFilter.COMPLETED and not task.completed:
            continue
        if status == StatusFilter.PENDING and task.completed:
            continue
        if priority != PriorityFilter.ALL and task.priority.value != priority.value:
            continue
        if search_text and not matches_search(task, search_text):
            continue
        result.append(task)
    return result


class FilterState:
    """
    Transient filter selectors for one session.

    Status and priority apply at once. Search text is debounced: `search_text`
    holds what was typed, `applied_search` what filtering actually uses.
    """

    def __init__(self, *, debounce_seconds: float = 0.3) -> None:
        self.status = StatusFilter.ALL
        self.priority = PriorityFilter.ALL
        self.search_text = ""
        self.applied_search = ""
        self._debouncer = Debouncer(debounce_seconds, self._apply_search)

    @property
    def search_pending(self) -> bool:
        return self._debouncer.pending

    def set_status(self, status: StatusFilter | str) -> None:
        self.status = StatusFilter(status)

    def set_priority(self, priority: PriorityFilter | str) -> None:
        self.priority = PriorityFilter(priority)

    def set_search(self, text: str) -> None:
        self.search_text = text
        self._debouncer.trigger(text)

    def flush_search(self) -> None:
        """Apply the typed search text now, dropping any pending delay."""
        self._debouncer.cancel()
        self.applied_search = self.search_text

    def _apply_search(self, text: str) -> None:
        self.applied_search = text

    def apply(self, tasks: Iterable[TaskModel]) -> list[TaskModel]:
        return filter_tasks(tasks, self.status, self.priority, self.applied_search)

    def reset(self) -> None:
        self._debouncer.cancel()
        self.status = StatusFilter.ALL
        self.priority = PriorityFilter.ALL
        self.search_text = ""
        self.applied_search = ""

    def snapshot(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "priority": self.priority.value,
            "search": self.search_text,
            "applied_search": self.applied_search,
            "search_pending": self.search_pending,
        }
