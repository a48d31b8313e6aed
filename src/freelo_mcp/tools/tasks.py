from __future__ import annotations

from typing import Any, Literal, Optional

from freelo_mcp.core.adapters import tasks as api
from freelo_mcp.core.client import FreeloClient
from freelo_mcp.models import (
    ReminderInput,
    TaskCreateInput,
    TaskEditInput,
    TaskFilters,
    dump,
)


async def get_all_tasks(
    client: FreeloClient, filters: Optional[TaskFilters] = None
) -> Any:
    """
    Search tasks across projects with optional filters (state, projects,
    tasklists, labels, due date ranges, worker), paginated via ``p``.
    """
    return (await api.get_all_tasks(client, dump(filters))).data


async def get_tasklist_tasks(
    client: FreeloClient,
    project_id: str,
    tasklist_id: str,
    order_by: Literal["priority", "name", "date_add", "date_edited_at"] = "priority",
    order: Literal["asc", "desc"] = "asc",
) -> Any:
    """List tasks of a tasklist, sorted."""
    params = {"order_by": order_by, "order": order}
    return (
        await api.get_tasklist_tasks(client, project_id, tasklist_id, params)
    ).data


async def create_task(
    client: FreeloClient, project_id: str, tasklist_id: str, task_data: TaskCreateInput
) -> Any:
    """Create a task in a tasklist."""
    return (
        await api.create_task(client, project_id, tasklist_id, task_data.payload())
    ).data


async def get_task_details(client: FreeloClient, task_id: str) -> Any:
    """Get details of a task."""
    return (await api.get_task(client, task_id)).data


async def edit_task(client: FreeloClient, task_id: str, task_data: TaskEditInput) -> Any:
    """Edit a task; only the given fields are changed."""
    return (await api.edit_task(client, task_id, task_data.payload())).data


async def delete_task(client: FreeloClient, task_id: str) -> Any:
    """Delete a task."""
    return (await api.delete_task(client, task_id)).data


async def finish_task(client: FreeloClient, task_id: str) -> Any:
    """Mark a task as finished."""
    return (await api.finish_task(client, task_id)).data


async def activate_task(client: FreeloClient, task_id: str) -> Any:
    """Re-open a finished task."""
    return (await api.activate_task(client, task_id)).data


async def get_finished_tasks(
    client: FreeloClient, tasklist_id: str, search_query: Optional[str] = None
) -> Any:
    """List finished tasks of a tasklist, optionally filtered by text."""
    params = {"search_query": search_query} if search_query else {}
    return (await api.get_finished_tasks(client, tasklist_id, params)).data


async def move_task(
    client: FreeloClient, task_id: str, target_tasklist_id: str
) -> Any:
    """Move a task to another tasklist."""
    return (await api.move_task(client, task_id, target_tasklist_id)).data


async def get_task_description(client: FreeloClient, task_id: str) -> Any:
    """Get the description of a task."""
    return (await api.get_task_description(client, task_id)).data


async def update_task_description(
    client: FreeloClient, task_id: str, description: str
) -> Any:
    """Replace the description of a task (HTML allowed)."""
    body = {"content": description}
    return (await api.update_task_description(client, task_id, body)).data


async def create_task_reminder(
    client: FreeloClient, task_id: str, reminder_data: ReminderInput
) -> Any:
    """Set a reminder on a task for the given date and users."""
    body: dict = {"remind_at": reminder_data.date}
    if reminder_data.user_ids:
        body["user_ids"] = reminder_data.user_ids
    return (await api.create_task_reminder(client, task_id, body)).data


async def delete_task_reminder(client: FreeloClient, task_id: str) -> Any:
    """Remove the reminder of a task."""
    return (await api.delete_task_reminder(client, task_id)).data


async def get_public_link(client: FreeloClient, task_id: str) -> Any:
    """Get (or create) the public link of a task."""
    return (await api.get_public_link(client, task_id)).data


async def delete_public_link(client: FreeloClient, task_id: str) -> Any:
    """Revoke the public link of a task."""
    return (await api.delete_public_link(client, task_id)).data


async def create_task_from_template(
    client: FreeloClient, template_id: str, project_id: str, tasklist_id: str
) -> Any:
    """Create a task from a template task in the given project and tasklist."""
    body = {"project_id": project_id, "tasklist_id": tasklist_id}
    return (await api.create_task_from_template(client, template_id, body)).data


async def set_total_time_estimate(
    client: FreeloClient, task_id: str, minutes: int
) -> Any:
    """Set the total time estimate of a task in minutes."""
    return (
        await api.set_total_time_estimate(client, task_id, {"minutes": minutes})
    ).data


async def delete_total_time_estimate(client: FreeloClient, task_id: str) -> Any:
    """Remove the total time estimate of a task."""
    return (await api.delete_total_time_estimate(client, task_id)).data


async def set_user_time_estimate(
    client: FreeloClient, task_id: str, user_id: str, minutes: int
) -> Any:
    """Set one user's time estimate on a task in minutes."""
    return (
        await api.set_user_time_estimate(
            client, task_id, user_id, {"minutes": minutes}
        )
    ).data


async def delete_user_time_estimate(
    client: FreeloClient, task_id: str, user_id: str
) -> Any:
    """Remove one user's time estimate from a task."""
    return (await api.delete_user_time_estimate(client, task_id, user_id)).data
