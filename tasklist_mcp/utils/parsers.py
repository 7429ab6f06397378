"""Parser helpers for stored task data."""

from datetime import date
from typing import Any

from tasklist_mcp.models.task import TaskModel


def _parse_task(task_dict: dict[str, Any]) -> TaskModel:
    """
    Parse a stored task record into a TaskModel.

    Args:
        task_dict: Dictionary from a session store snapshot (camelCase keys)

    Returns:
        TaskModel instance with validated data
    """
    return TaskModel.model_validate(task_dict)


def _parse_tasks(tasks: list[dict[str, Any]]) -> list[TaskModel]:
    """
    Parse a list of stored task records into TaskModel instances.

    Args:
        tasks: List of dictionaries from a session store snapshot

    Returns:
        List of TaskModel instances, order preserved
    """
    return [TaskModel.model_validate(t) for t in tasks]


def _dump_tasks(tasks: list[TaskModel]) -> list[dict[str, Any]]:
    """Serialize tasks into the plain records kept in the session store."""
    return [t.model_dump(mode="json", by_alias=True) for t in tasks]


def _parse_due_date(raw: str | date) -> date:
    """
    Parse a calendar date given as YYYY-MM-DD.

    Raises:
        ValueError: If the text is not a valid ISO calendar date
    """
    if isinstance(raw, date):
        return raw
    return date.fromisoformat(raw.strip())
