"""Exception hierarchy for Tasklist MCP."""


class TaskListError(Exception):
    """Base class for all task list errors."""


class FieldErrors(TaskListError):
    """Error carrying per-field validation messages."""

    summary = "Validation failed"

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        details = "; ".join(f"{field}: {msg}" for field, msg in self.errors.items())
        super().__init__(f"{self.summary}: {details}" if details else self.summary)


class TaskValidationError(FieldErrors):
    """Raised when task fields are missing or malformed."""

    summary = "Invalid task"


class LoginValidationError(FieldErrors):
    """Raised when login input is missing or malformed."""

    summary = "Invalid login"


class TaskNotFoundError(TaskListError):
    """Raised when an operation requires a task that does not exist."""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")


class NotAuthenticatedError(TaskListError):
    """Raised when a task operation is attempted without a session."""

    def __init__(self, message: str = "Not logged in. Use tasklist_login first."):
        super().__init__(message)


class SessionStorageError(TaskListError):
    """Raised when the session store cannot serialize or hold a value."""
