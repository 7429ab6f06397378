"""
MCP Server for a session-scoped task list.

This server provides tools to log in, create, edit, complete, delete, filter
and search tasks, and to read a simulated email-notification log about pending
tasks. All state lives for the session only.
"""

# Re-export enums
from tasklist_mcp.enums import ChangeKind, Priority, PriorityFilter, ResponseFormat, StatusFilter

# Re-export errors
from tasklist_mcp.errors import (
    LoginValidationError,
    NotAuthenticatedError,
    SessionStorageError,
    TaskListError,
    TaskNotFoundError,
    TaskValidationError,
)

# Re-export models
from tasklist_mcp.models import (
    AddTaskInput,
    DeleteTaskInput,
    GetTaskInput,
    ListTasksInput,
    LoginInput,
    NotificationEntry,
    NotificationsInput,
    SessionRecord,
    SetFilterInput,
    SummaryInput,
    TaskModel,
    TaskStats,
    ToggleTaskInput,
    UpdateTaskInput,
)

# Re-export core components
from tasklist_mcp.filters import FilterState, filter_tasks
from tasklist_mcp.notifications import NotificationScheduler
from tasklist_mcp.repository import ChangeEvent, TaskRepository
from tasklist_mcp.session import AppState
from tasklist_mcp.storage import SessionStore

# Re-export MCP server instance
from tasklist_mcp.server import get_state, mcp, reset_state

# Re-export tools
from tasklist_mcp.tools import (
    tasklist_add,
    tasklist_delete,
    tasklist_get,
    tasklist_list,
    tasklist_login,
    tasklist_logout,
    tasklist_notifications,
    tasklist_set_filter,
    tasklist_summary,
    tasklist_toggle,
    tasklist_update,
)

__all__ = [
    # Enums
    "ResponseFormat",
    "Priority",
    "StatusFilter",
    "PriorityFilter",
    "ChangeKind",
    # Errors
    "TaskListError",
    "TaskValidationError",
    "LoginValidationError",
    "TaskNotFoundError",
    "NotAuthenticatedError",
    "SessionStorageError",
    # Models
    "TaskModel",
    "TaskStats",
    "SessionRecord",
    "NotificationEntry",
    # Input models
    "LoginInput",
    "AddTaskInput",
    "UpdateTaskInput",
    "ToggleTaskInput",
    "DeleteTaskInput",
    "GetTaskInput",
    "ListTasksInput",
    "SetFilterInput",
    "SummaryInput",
    "NotificationsInput",
    # Core components
    "SessionStore",
    "TaskRepository",
    "ChangeEvent",
    "FilterState",
    "filter_tasks",
    "NotificationScheduler",
    "AppState",
    # MCP server
    "mcp",
    "get_state",
    "reset_state",
    # Tools
    "tasklist_login",
    "tasklist_logout",
    "tasklist_add",
    "tasklist_update",
    "tasklist_toggle",
    "tasklist_delete",
    "tasklist_get",
    "tasklist_list",
    "tasklist_set_filter",
    "tasklist_summary",
    "tasklist_notifications",
]
