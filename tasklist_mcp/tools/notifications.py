"""MCP tool for reading the simulated email notification log."""

import json

from mcp.types import ToolAnnotations

from tasklist_mcp.enums import ResponseFormat
from tasklist_mcp.errors import TaskListError
from tasklist_mcp.models.inputs import NotificationsInput
from tasklist_mcp.server import get_state, mcp
from tasklist_mcp.utils.formatters import _format_error, _format_notifications_markdown


@mcp.tool(
    name="tasklist_notifications",
    annotations=ToolAnnotations(
        title="Email Notification Log",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasklist_notifications(params: NotificationsInput) -> str:
    """
    Show the most recent pending-task email notifications, newest first.

    While logged in, a check runs at login and then periodically. Each check
    with pending tasks logs one line naming the oldest pending task. No email
    is actually sent.

    Args:
        params: NotificationsInput containing limit and response_format

    Returns:
        Log entries (markdown, concise or JSON)
    """
    state = get_state()
    try:
        state.require_login()
    except TaskListError as e:
        return _format_error(e)

    limit = params.limit or state.settings.notification_display_limit
    entries = state.notifier.recent(limit)

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {
                "total": len(state.notifier.entries),
                "count": len(entries),
                "entries": [e.model_dump(mode="json") for e in entries],
            },
            indent=2,
        )

    if params.response_format == ResponseFormat.CONCISE:
        return "\n".join(e.render() for e in entries) or "0 notifications"

    return _format_notifications_markdown(entries)
