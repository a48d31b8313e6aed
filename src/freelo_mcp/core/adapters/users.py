from __future__ import annotations

from dataclasses import replace

from ..client import FreeloClient, FreeloResponse
from . import Body, Params, segment

TOOL = "users"


def _as_list(data) -> list:
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        inner = data.get("data")
        if isinstance(inner, dict) and isinstance(inner.get("users"), list):
            return inner["users"]
        if isinstance(data.get("users"), list):
            return data["users"]
    return []


async def get_users(client: FreeloClient, params: Params = None) -> FreeloResponse:
    """Workers the user collaborates with, always as a list."""
    resp = await client.get("/users", params=params, tool=TOOL)
    return replace(resp, data=_as_list(resp.data))


async def get_project_manager_of(
    client: FreeloClient, params: Params = None
) -> FreeloResponse:
    return await client.get("/users/project-manager-of", params=params, tool=TOOL)


async def manage_workers(client: FreeloClient, body: Body) -> FreeloResponse:
    return await client.post("/users/manage-workers", json=body, tool=TOOL)


async def get_out_of_office(client: FreeloClient, user_id) -> FreeloResponse:
    return await client.get(f"/user/{segment(user_id)}/out-of-office", tool=TOOL)


async def set_out_of_office(
    client: FreeloClient, user_id, body: Body
) -> FreeloResponse:
    return await client.post(
        f"/user/{segment(user_id)}/out-of-office", json=body, tool=TOOL
    )


async def delete_out_of_office(client: FreeloClient, user_id) -> FreeloResponse:
    return await client.delete(f"/user/{segment(user_id)}/out-of-office", tool=TOOL)
