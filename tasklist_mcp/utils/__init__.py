"""Utility functions for Tasklist MCP."""

from tasklist_mcp.utils.formatters import (
    _format_error,
    _format_notifications_markdown,
    _format_stats_markdown,
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
)
from tasklist_mcp.utils.parsers import _dump_tasks, _parse_due_date, _parse_task, _parse_tasks

__all__ = [
    "_parse_task",
    "_parse_tasks",
    "_parse_due_date",
    "_dump_tasks",
    "_format_task_concise",
    "_format_tasks_concise",
    "_format_task_markdown",
    "_format_tasks_markdown",
    "_format_stats_markdown",
    "_format_notifications_markdown",
    "_format_error",
]
