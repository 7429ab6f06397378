"""MCP tool definitions for the task list."""

# Import all tools to register them with the MCP server
from tasklist_mcp.tools.core import (
    tasklist_add,
    tasklist_delete,
    tasklist_get,
    tasklist_list,
    tasklist_set_filter,
    tasklist_summary,
    tasklist_toggle,
    tasklist_update,
)
from tasklist_mcp.tools.notifications import tasklist_notifications
from tasklist_mcp.tools.session import tasklist_login, tasklist_logout

__all__ = [
    # Session tools
    "tasklist_login",
    "tasklist_logout",
    # Core tools
    "tasklist_add",
    "tasklist_update",
    "tasklist_toggle",
    "tasklist_delete",
    "tasklist_get",
    "tasklist_list",
    "tasklist_set_filter",
    "tasklist_summary",
    # Notification tools
    "tasklist_notifications",
]
