from __future__ import annotations

from typing import Any, List

from freelo_mcp.core.adapters import users as api
from freelo_mcp.core.client import FreeloClient
from freelo_mcp.models import OutOfOfficeInput


async def get_users(client: FreeloClient) -> Any:
    """List users (workers) the account collaborates with."""
    return (await api.get_users(client)).data


async def get_project_manager_of(client: FreeloClient) -> Any:
    """List users whose projects the current user manages."""
    return (await api.get_project_manager_of(client)).data


async def invite_users_by_email(
    client: FreeloClient, project_id: str, emails: List[str]
) -> Any:
    """Invite people to a project by e-mail address."""
    body = {"project_id": project_id, "emails": emails}
    return (await api.manage_workers(client, body)).data


async def invite_users_by_ids(
    client: FreeloClient, project_id: str, user_ids: List[str]
) -> Any:
    """Add existing users to a project by their ids."""
    body = {"projects_ids": [project_id], "users_ids": user_ids}
    return (await api.manage_workers(client, body)).data


async def get_out_of_office(client: FreeloClient, user_id: str) -> Any:
    """Get a user's out-of-office setting."""
    return (await api.get_out_of_office(client, user_id)).data


async def set_out_of_office(
    client: FreeloClient, user_id: str, out_of_office_data: OutOfOfficeInput
) -> Any:
    """Set a user's out-of-office period."""
    body = {"out_of_office": out_of_office_data.payload()}
    return (await api.set_out_of_office(client, user_id, body)).data


async def delete_out_of_office(client: FreeloClient, user_id: str) -> Any:
    """Clear a user's out-of-office setting."""
    return (await api.delete_out_of_office(client, user_id)).data
