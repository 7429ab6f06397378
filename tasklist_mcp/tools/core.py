"""Core MCP tool definitions for the task list."""

import json

from mcp.types import ToolAnnotations

from tasklist_mcp.enums import PriorityFilter, ResponseFormat, StatusFilter
from tasklist_mcp.errors import TaskListError
from tasklist_mcp.filters import filter_tasks
from tasklist_mcp.models.inputs import (
    AddTaskInput,
    DeleteTaskInput,
    GetTaskInput,
    ListTasksInput,
    SetFilterInput,
    SummaryInput,
    ToggleTaskInput,
    UpdateTaskInput,
)
from tasklist_mcp.server import get_state, mcp
from tasklist_mcp.utils.formatters import (
    _format_error,
    _format_stats_markdown,
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
)


@mcp.tool(
    name="tasklist_add",
    annotations=ToolAnnotations(
        title="Add Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def tasklist_add(params: AddTaskInput) -> str:
    """
    Create a new task at the top of the list.

    USE THIS WHEN:
    - Adding a new task to track

    DO NOT USE WHEN:
    - Changing an existing task → use tasklist_update instead
    - Marking a task done → use tasklist_toggle instead

    Title, description and due date are all required.

    Args:
        params: AddTaskInput containing title, description, priority and due_date

    Returns:
        Confirmation message with the created task ID, or field-level errors

    Examples:
        - params with title="Pay bills", description="due friday", priority="high", due_date="2024-06-01"
    """
    state = get_state()
    try:
        state.require_login()
        task = state.repository.create(
            title=params.title,
            description=params.description,
            priority=params.priority,
            due_date=params.due_date,
        )
    except TaskListError as e:
        return _format_error(e)

    return f"Task created successfully.\n{_format_task_concise(task)}"


@mcp.tool(
    name="tasklist_update",
    annotations=ToolAnnotations(
        title="Edit Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasklist_update(params: UpdateTaskInput) -> str:
    """
    Edit an existing task. The task keeps its ID and creation time.

    Omitted fields keep their current value; fields that are given must still
    be valid (empty title, description or due date is rejected).

    Args:
        params: UpdateTaskInput containing task_id and the fields to change

    Returns:
        Confirmation message with the updated task, or an error

    Examples:
        - Rename: params with task_id=1717171717000, title="Pay all bills"
        - Reprioritize: params with task_id=1717171717000, priority="low"
    """
    state = get_state()
    try:
        state.require_login()
        current = state.repository.get(params.task_id)
        task = state.repository.update(
            params.task_id,
            title=current.title if params.title is None else params.title,
            description=current.description if params.description is None else params.description,
            priority=current.priority if params.priority is None else params.priority,
            due_date=current.due_date if params.due_date is None else params.due_date,
            completed=params.completed,
        )
    except TaskListError as e:
        return _format_error(e)

    return f"Task {task.id} updated successfully.\n{_format_task_concise(task)}"


@mcp.tool(
    name="tasklist_toggle",
    annotations=ToolAnnotations(
        title="Toggle Task Completion",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def tasklist_toggle(params: ToggleTaskInput) -> str:
    """
    Flip a task between pending and completed.

    Calling this twice on the same task restores its original state.

    Args:
        params: ToggleTaskInput containing the task_id

    Returns:
        Confirmation message with the new state
    """
    state = get_state()
    try:
        state.require_login()
        task = state.repository.toggle_complete(params.task_id)
    except TaskListError as e:
        return _format_error(e)

    if task is None:
        return f"Task {params.task_id} not found. Nothing changed."
    return f"Task {task.id} marked as {'completed' if task.completed else 'pending'}."


@mcp.tool(
    name="tasklist_delete",
    annotations=ToolAnnotations(
        title="Delete Task",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasklist_delete(params: DeleteTaskInput) -> str:
    """
    Delete a task permanently. There is no undo.

    Deleting an ID that does not exist changes nothing.

    Args:
        params: DeleteTaskInput containing the task_id

    Returns:
        Confirmation message
    """
    state = get_state()
    try:
        state.require_login()
        deleted = state.repository.delete(params.task_id)
    except TaskListError as e:
        return _format_error(e)

    if not deleted:
        return f"Task {params.task_id} not found. Nothing deleted."
    return f"Task {params.task_id} deleted."


@mcp.tool(
    name="tasklist_get",
    annotations=ToolAnnotations(
        title="Get Task Details",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasklist_get(params: GetTaskInput) -> str:
    """
    Retrieve full details for a single task by ID.

    Args:
        params: GetTaskInput containing task_id and response_format

    Returns:
        Task details (markdown, concise or JSON)
    """
    state = get_state()
    try:
        state.require_login()
        task = state.repository.get(params.task_id)
    except TaskListError as e:
        return (
            f"{_format_error(e)}\n"
            f"Tip: Use tasklist_list to find valid task IDs."
        )

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(task.model_dump(mode="json"), indent=2)

    if params.response_format == ResponseFormat.CONCISE:
        return _format_task_concise(task)

    return _format_task_markdown(task)


@mcp.tool(
    name="tasklist_list",
    annotations=ToolAnnotations(
        title="List Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasklist_list(params: ListTasksInput) -> str:
    """
    List tasks, newest first, filtered by status, priority and search text.

    All filters must match. Filters that are not given fall back to the
    session's filter state (see tasklist_set_filter). A search given here is
    applied immediately.

    Args:
        params: ListTasksInput containing status, priority, search, limit and response_format

    Returns:
        Formatted list of tasks (markdown, concise or JSON)

    Examples:
        - Everything: params with status="all", priority="all", search=""
        - Open high-priority work: params with status="pending", priority="high"
        - Text search: params with search="milk"
    """
    state = get_state()
    try:
        state.require_login()
    except TaskListError as e:
        return _format_error(e)

    status = params.status if params.status is not None else state.filters.status
    priority = params.priority if params.priority is not None else state.filters.priority
    search = params.search if params.search is not None else state.filters.applied_search

    all_tasks = state.repository.list_tasks()
    tasks = filter_tasks(all_tasks, status, priority, search)
    total_count = len(tasks)

    if params.limit and len(tasks) > params.limit:
        tasks = tasks[: params.limit]

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {
                "total": total_count,
                "count": len(tasks),
                "filters": {"status": status.value, "priority": priority.value, "search": search},
                "tasks": [t.model_dump(mode="json") for t in tasks],
            },
            indent=2,
        )

    labels = []
    if status != StatusFilter.ALL:
        labels.append(status.value)
    if priority != PriorityFilter.ALL:
        labels.append(f"priority:{priority.value}")
    if search:
        labels.append(f"'{search}'")

    if params.response_format == ResponseFormat.CONCISE:
        return _format_tasks_concise(tasks, " ".join(labels) or None)

    title = "Tasks"
    if labels:
        title = f"Tasks ({', '.join(labels)})"
    hint = "Create your first task!" if not all_tasks else "Try different filters."
    return _format_tasks_markdown(tasks, title, empty_hint=hint)


@mcp.tool(
    name="tasklist_set_filter",
    annotations=ToolAnnotations(
        title="Set Task Filter",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasklist_set_filter(params: SetFilterInput) -> str:
    """
    Update the session's filter state used by tasklist_list.

    Status and priority apply immediately. Search text is applied after a
    short quiet period; sending new text restarts the wait.

    Args:
        params: SetFilterInput with any of status, priority, search

    Returns:
        JSON with the current filter state
    """
    state = get_state()
    try:
        state.require_login()
    except TaskListError as e:
        return _format_error(e)

    if params.status is not None:
        state.filters.set_status(params.status)
    if params.priority is not None:
        state.filters.set_priority(params.priority)
    if params.search is not None:
        state.filters.set_search(params.search)

    return json.dumps(state.filters.snapshot(), indent=2)


@mcp.tool(
    name="tasklist_summary",
    annotations=ToolAnnotations(
        title="Task Summary",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def tasklist_summary(params: SummaryInput) -> str:
    """
    Show task counters: total, completed, pending and high priority.

    Args:
        params: SummaryInput containing response_format

    Returns:
        Counters (markdown or JSON)
    """
    state = get_state()
    try:
        state.require_login()
    except TaskListError as e:
        return _format_error(e)

    stats = state.repository.stats()
    if params.response_format == ResponseFormat.JSON:
        return json.dumps(stats.model_dump(), indent=2)
    if params.response_format == ResponseFormat.CONCISE:
        return (
            f"total:{stats.total} completed:{stats.completed} "
            f"pending:{stats.pending} high:{stats.high_priority}"
        )
    return _format_stats_markdown(stats)
