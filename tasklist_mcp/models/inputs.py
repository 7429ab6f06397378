"""Input models for Tasklist MCP tools."""

from pydantic import BaseModel, ConfigDict, Field

from tasklist_mcp.enums import Priority, PriorityFilter, ResponseFormat, StatusFilter

# ============================================================================
# Session Input Models
# ============================================================================


class LoginInput(BaseModel):
    """Input model for starting a session."""

    email: str = Field(..., description="Email address (any address containing '@' is accepted)", max_length=320)
    password: str = Field(..., description="Password (any non-empty value is accepted)", max_length=1000)


# ============================================================================
# Task Input Models
# ============================================================================


class AddTaskInput(BaseModel):
    """Input model for creating a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., description="Task title (required)", max_length=200)
    description: str = Field(..., description="Task description (required)", max_length=2000)
    priority: Priority = Field(default=Priority.MEDIUM, description="Task priority: low, medium, or high")
    due_date: str = Field(..., description="Due date as YYYY-MM-DD (required)")


class UpdateTaskInput(BaseModel):
    """Input model for editing a task. Omitted fields keep their current value."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: int = Field(..., description="ID of the task to edit", ge=1)
    title: str | None = Field(default=None, description="New title", max_length=200)
    description: str | None = Field(default=None, description="New description", max_length=2000)
    priority: Priority | None = Field(default=None, description="New priority: low, medium, or high")
    due_date: str | None = Field(default=None, description="New due date as YYYY-MM-DD")
    completed: bool | None = Field(default=None, description="New completion state")


class ToggleTaskInput(BaseModel):
    """Input model for toggling a task's completion state."""

    task_id: int = Field(..., description="ID of the task to toggle", ge=1)


class DeleteTaskInput(BaseModel):
    """Input model for deleting a task."""

    task_id: int = Field(..., description="ID of the task to delete", ge=1)


class GetTaskInput(BaseModel):
    """Input model for getting a single task."""

    task_id: int = Field(..., description="ID of the task to retrieve", ge=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


# ============================================================================
# Filtering Input Models
# ============================================================================


class ListTasksInput(BaseModel):
    """Input model for listing tasks.

    Filters left as None fall back to the session's current filter state.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    status: StatusFilter | None = Field(
        default=None,
        description="Filter by status: all, completed, or pending (default: session filter)",
    )
    priority: PriorityFilter | None = Field(
        default=None,
        description="Filter by priority: all, low, medium, or high (default: session filter)",
    )
    search: str | None = Field(
        default=None,
        description="Case-insensitive text matched against title and description (default: session filter)",
        max_length=200,
    )
    limit: int | None = Field(default=50, description="Maximum number of tasks to return", ge=1, le=500)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class SetFilterInput(BaseModel):
    """Input model for updating the session's filter state."""

    status: StatusFilter | None = Field(default=None, description="Status filter: all, completed, or pending")
    priority: PriorityFilter | None = Field(default=None, description="Priority filter: all, low, medium, or high")
    search: str | None = Field(
        default=None,
        description="Search text, applied after a short quiet period (use empty string to clear)",
        max_length=200,
    )


# ============================================================================
# Reporting Input Models
# ============================================================================


class SummaryInput(BaseModel):
    """Input model for the task counters summary."""

    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class NotificationsInput(BaseModel):
    """Input model for reading the notification log."""

    limit: int | None = Field(
        default=None,
        description="Number of most recent entries to show (default: server setting, usually 5)",
        ge=1,
        le=50,
    )
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )
