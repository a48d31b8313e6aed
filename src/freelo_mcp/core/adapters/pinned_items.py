from __future__ import annotations

from ..client import FreeloClient, FreeloResponse
from . import Body, segment

TOOL = "pinned_items"


async def get_pinned_items(client: FreeloClient, project_id) -> FreeloResponse:
    return await client.get(f"/project/{segment(project_id)}/pinned-items", tool=TOOL)


async def pin_item(client: FreeloClient, project_id, body: Body) -> FreeloResponse:
    return await client.post(
        f"/project/{segment(project_id)}/pinned-items", json=body, tool=TOOL
    )


async def delete_pinned_item(client: FreeloClient, pinned_item_id) -> FreeloResponse:
    return await client.delete(f"/pinned-item/{segment(pinned_item_id)}", tool=TOOL)
