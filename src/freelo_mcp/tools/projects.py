from __future__ import annotations

from typing import Any, List, Optional

from freelo_mcp.core.adapters import projects as api
from freelo_mcp.core.client import FreeloClient
from freelo_mcp.models import (
    ProjectCreateInput,
    ProjectFromTemplateInput,
    TemplateProjectFilters,
    UserProjectFilters,
    dump,
)


def _page(page: Optional[int]) -> dict:
    return {"p": page} if page is not None else {}


async def get_projects(client: FreeloClient) -> Any:
    """List own active projects together with their active tasklists."""
    return (await api.get_projects(client)).data


async def get_all_projects(client: FreeloClient, page: Optional[int] = None) -> Any:
    """
    List every project the user can access (own and invited), paginated.

    Returns:
        {"total": int, "count": int, "page": int, "per_page": int,
         "data": {"projects": [...]}}
    """
    return (await api.get_all_projects(client, _page(page))).data


async def get_invited_projects(
    client: FreeloClient, page: Optional[int] = None
) -> Any:
    """List projects the user was invited to, paginated."""
    return (await api.get_invited_projects(client, _page(page))).data


async def get_archived_projects(
    client: FreeloClient, page: Optional[int] = None
) -> Any:
    """List archived projects, paginated."""
    return (await api.get_archived_projects(client, _page(page))).data


async def get_template_projects(
    client: FreeloClient, filters: Optional[TemplateProjectFilters] = None
) -> Any:
    """List template projects, optionally filtered by tags or users and sorted."""
    return (await api.get_template_projects(client, dump(filters))).data


async def get_user_projects(
    client: FreeloClient, user_id: str, filters: Optional[UserProjectFilters] = None
) -> Any:
    """List all projects of a given user."""
    return (await api.get_user_projects(client, user_id, dump(filters))).data


async def create_project(client: FreeloClient, project_data: ProjectCreateInput) -> Any:
    """Create a project (name, currency CZK/EUR/USD, optional owner id)."""
    return (await api.create_project(client, project_data.payload())).data


async def get_project_details(client: FreeloClient, project_id: str) -> Any:
    """Get details of a single project."""
    return (await api.get_project(client, project_id)).data


async def archive_project(client: FreeloClient, project_id: str) -> Any:
    """Archive a project."""
    return (await api.archive_project(client, project_id)).data


async def activate_project(client: FreeloClient, project_id: str) -> Any:
    """Re-activate an archived project."""
    return (await api.activate_project(client, project_id)).data


async def delete_project(client: FreeloClient, project_id: str) -> Any:
    """Delete a project."""
    return (await api.delete_project(client, project_id)).data


async def get_project_workers(
    client: FreeloClient, project_id: str, page: Optional[int] = None
) -> Any:
    """List workers of a project, paginated."""
    return (await api.get_project_workers(client, project_id, _page(page))).data


async def remove_workers(
    client: FreeloClient, project_id: str, user_ids: List[str]
) -> Any:
    """Remove workers from a project by their user ids."""
    body = {"users_ids": user_ids}
    return (await api.remove_workers_by_ids(client, project_id, body)).data


async def remove_workers_by_emails(
    client: FreeloClient, project_id: str, emails: List[str]
) -> Any:
    """Remove workers from a project by their e-mail addresses."""
    body = {"emails": emails}
    return (await api.remove_workers_by_emails(client, project_id, body)).data


async def create_project_from_template(
    client: FreeloClient, template_id: str, project_data: ProjectFromTemplateInput
) -> Any:
    """Create a new project from a template project."""
    return (
        await api.create_project_from_template(
            client, template_id, project_data.payload()
        )
    ).data
