"""MCP tools for starting and ending a session."""

from mcp.types import ToolAnnotations

from tasklist_mcp.errors import TaskListError
from tasklist_mcp.models.inputs import LoginInput
from tasklist_mcp.server import get_state, mcp
from tasklist_mcp.utils.formatters import _format_error


@mcp.tool(
    name="tasklist_login",
    annotations=ToolAnnotations(
        title="Log In",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasklist_login(params: LoginInput) -> str:
    """
    Start a session so tasks can be managed.

    Any email containing '@' and any non-empty password are accepted; there is
    no real credential check. Starting a session also starts the periodic
    pending-task email notifications (simulated, written to a log only).

    Args:
        params: LoginInput containing email and password

    Returns:
        Confirmation message, or field-level errors

    Examples:
        - Log in: params with email="me@example.com", password="secret"
    """
    state = get_state()
    try:
        record = state.login(params.email, params.password)
    except TaskListError as e:
        return _format_error(e)

    stats = state.repository.stats()
    return f"Logged in as {record.email}.\n{stats.total} task(s), {stats.pending} pending."


@mcp.tool(
    name="tasklist_logout",
    annotations=ToolAnnotations(
        title="Log Out",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasklist_logout() -> str:
    """
    End the session.

    WARNING: logging out discards everything held by the session, including
    all tasks and the notification log. Notifications stop until the next login.

    Returns:
        Confirmation message with the number of tasks discarded
    """
    state = get_state()
    if not state.is_authenticated:
        return "Not logged in. Nothing to do."

    discarded = len(state.repository)
    try:
        state.logout()
    except TaskListError as e:
        return _format_error(e)
    return f"Logged out. {discarded} task(s) discarded."
