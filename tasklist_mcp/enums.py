"""Enums for Tasklist MCP."""

from enum import Enum


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    CONCISE = "concise"  # One line per task
    MARKDOWN = "markdown"  # Human-readable (default)
    JSON = "json"  # Machine-readable with all fields


class Priority(str, Enum):
    """Task priority levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class StatusFilter(str, Enum):
    """Task status filter options."""

    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"


class PriorityFilter(str, Enum):
    """Task priority filter options."""

    ALL = "all"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ChangeKind(str, Enum):
    """Kinds of repository change events."""

    CREATED = "created"
    UPDATED = "updated"
    TOGGLED = "toggled"
    DELETED = "deleted"
    CLEARED = "cleared"
    LOADED = "loaded"
