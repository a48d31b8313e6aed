from __future__ import annotations

from typing import Any, Optional

from freelo_mcp.core.adapters import tasklists as api
from freelo_mcp.core.client import FreeloClient
from freelo_mcp.models import TasklistCreateInput, TasklistFilters, dump


async def get_project_tasklists(client: FreeloClient, project_id: str) -> Any:
    """List tasklists of a project."""
    return (await api.get_project_tasklists(client, project_id)).data


async def get_all_tasklists(
    client: FreeloClient, filters: Optional[TasklistFilters] = None
) -> Any:
    """List tasklists across projects, optionally limited to given project ids."""
    return (await api.get_all_tasklists(client, dump(filters))).data


async def create_tasklist(
    client: FreeloClient, project_id: str, tasklist_data: TasklistCreateInput
) -> Any:
    """Create a tasklist in a project."""
    return (
        await api.create_tasklist(client, project_id, tasklist_data.payload())
    ).data


async def get_tasklist_details(client: FreeloClient, tasklist_id: str) -> Any:
    """Get details of a tasklist."""
    return (await api.get_tasklist(client, tasklist_id)).data


async def get_assignable_workers(
    client: FreeloClient, project_id: str, tasklist_id: str
) -> Any:
    """List workers that can be assigned to tasks in a tasklist."""
    return (await api.get_assignable_workers(client, project_id, tasklist_id)).data


async def create_tasklist_from_template(
    client: FreeloClient, template_id: int, project_id: int
) -> Any:
    """Copy a template tasklist into a target project."""
    body = {"tasklist_id": template_id, "target_project_id": project_id}
    return (await api.create_tasklist_from_template(client, template_id, body)).data
