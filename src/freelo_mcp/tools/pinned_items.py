from __future__ import annotations

from typing import Any

from freelo_mcp.core.adapters import pinned_items as api
from freelo_mcp.core.client import FreeloClient
from freelo_mcp.models import PinItemInput


async def get_pinned_items(client: FreeloClient, project_id: str) -> Any:
    """List items pinned in a project."""
    return (await api.get_pinned_items(client, project_id)).data


async def pin_item(client: FreeloClient, project_id: str, item_data: PinItemInput) -> Any:
    """Pin a task, note or file in a project."""
    body = item_data.payload()
    # upstream rejects a missing or empty link
    body["link"] = item_data.link or "#"
    return (await api.pin_item(client, project_id, body)).data


async def delete_pinned_item(client: FreeloClient, pinned_item_id: str) -> Any:
    """Unpin an item."""
    return (await api.delete_pinned_item(client, pinned_item_id)).data
