"""Core task and session models for Tasklist MCP."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from tasklist_mcp.enums import Priority


class TaskModel(BaseModel):
    """A single task record.

    Records are immutable; the repository replaces them on every change.
    Stored snapshots use the camelCase aliases (``dueDate``, ``createdAt``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    title: str
    description: str
    priority: Priority = Priority.MEDIUM
    due_date: date = Field(alias="dueDate")
    completed: bool = False
    created_at: datetime = Field(alias="createdAt")


class SessionRecord(BaseModel):
    """Authentication record kept in the session store."""

    model_config = ConfigDict(populate_by_name=True)

    email: str
    logged_in: bool = Field(default=True, alias="loggedIn")


class TaskStats(BaseModel):
    """Dashboard counters over the whole task list."""

    total: int = 0
    completed: int = 0
    pending: int = 0
    high_priority: int = 0


class NotificationEntry(BaseModel):
    """One line of the simulated email notification log."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    message: str

    def render(self) -> str:
        return f"[{self.timestamp.strftime('%H:%M:%S')}] {self.message}"
