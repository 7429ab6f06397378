"""Pydantic models for Tasklist MCP."""

from tasklist_mcp.models.inputs import (
    AddTaskInput,
    DeleteTaskInput,
    GetTaskInput,
    ListTasksInput,
    LoginInput,
    NotificationsInput,
    SetFilterInput,
    SummaryInput,
    ToggleTaskInput,
    UpdateTaskInput,
)
from tasklist_mcp.models.task import NotificationEntry, SessionRecord, TaskModel, TaskStats

__all__ = [
    # Core models
    "TaskModel",
    "TaskStats",
    "SessionRecord",
    "NotificationEntry",
    # Session input models
    "LoginInput",
    # Task input models
    "AddTaskInput",
    "UpdateTaskInput",
    "ToggleTaskInput",
    "DeleteTaskInput",
    "GetTaskInput",
    # Filtering input models
    "ListTasksInput",
    "SetFilterInput",
    # Reporting input models
    "SummaryInput",
    "NotificationsInput",
]
