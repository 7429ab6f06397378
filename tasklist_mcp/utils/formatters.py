"""Formatting utilities for tool output."""

from tasklist_mcp.errors import FieldErrors, TaskListError
from tasklist_mcp.models.task import NotificationEntry, TaskModel, TaskStats

FIELD_LABELS = {"title": "Title", "description": "Description", "due_date": "Due date", "priority": "Priority"}


def _format_task_concise(task: TaskModel) -> str:
    """
    Format a single task in concise format.

    Output: "#1717171717000: Pay bills (HIGH, due:2024-06-01) [done]"
    """
    title = task.title[:50] if task.title else "Untitled"
    line = f"#{task.id}: {title} ({task.priority.value.upper()}, due:{task.due_date.isoformat()})"
    if task.completed:
        line += " [done]"
    return line


def _format_tasks_concise(tasks: list[TaskModel], title: str | None = None) -> str:
    """
    Format a list of tasks in concise format.

    Output:
    2 task(s) | pending
    #2: Task two (LOW, due:2024-06-02)
    #1: Task one (HIGH, due:2024-06-01)
    """
    if not tasks:
        return "0 tasks"

    header = f"{len(tasks)} task(s)"
    if title:
        header = f"{len(tasks)} task(s) | {title}"

    lines = [header]
    for task in tasks:
        lines.append(_format_task_concise(task))

    return "\n".join(lines)


def _format_task_markdown(task: TaskModel) -> str:
    """Format a single task as markdown."""
    box = "[x]" if task.completed else "[ ]"
    lines = [f"### {box} [{task.id}] {task.title}"]

    details = [
        f"**Priority**: {task.priority.value.capitalize()}",
        f"**Due**: {task.due_date:%b} {task.due_date.day}, {task.due_date.year}",
        f"**Status**: {'completed' if task.completed else 'pending'}",
    ]
    lines.append(" | ".join(details))

    if task.description:
        lines.append(task.description)

    return "\n".join(lines)


def _format_tasks_markdown(tasks: list[TaskModel], title: str = "Tasks", empty_hint: str | None = None) -> str:
    """Format a list of tasks as markdown."""
    if not tasks:
        text = f"# {title}\n\nNo tasks found."
        if empty_hint:
            text += f" {empty_hint}"
        return text

    lines = [f"# {title}", f"*{len(tasks)} task(s)*", ""]

    for task in tasks:
        lines.append(_format_task_markdown(task))
        lines.append("")

    return "\n".join(lines)


def _format_stats_markdown(stats: TaskStats) -> str:
    """Format the dashboard counters as markdown."""
    return "\n".join(
        [
            "# Task Summary",
            "",
            f"- **Total**: {stats.total}",
            f"- **Completed**: {stats.completed}",
            f"- **Pending**: {stats.pending}",
            f"- **High Priority**: {stats.high_priority}",
        ]
    )


def _format_notifications_markdown(entries: list[NotificationEntry]) -> str:
    """Format notification log entries (already newest first) as markdown."""
    if not entries:
        return "# Email Notification Log\n\nNo notifications yet."

    lines = ["# Email Notification Log", ""]
    for entry in entries:
        lines.append(f"- `{entry.render()}`")
    return "\n".join(lines)


def _format_error(exc: TaskListError) -> str:
    """
    Render a task list error as a tool response.

    Field errors are listed one per line:
    Error: Invalid task
    - Title: Title is required
    """
    if isinstance(exc, FieldErrors):
        lines = [f"Error: {exc.summary}"]
        for field, message in exc.errors.items():
            lines.append(f"- {FIELD_LABELS.get(field, field.capitalize())}: {message}")
        return "\n".join(lines)
    return f"Error: {exc}"
