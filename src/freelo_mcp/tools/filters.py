from __future__ import annotations

from typing import Any

from freelo_mcp.core.adapters import custom_filters as api
from freelo_mcp.core.client import FreeloClient


async def get_custom_filters(client: FreeloClient) -> Any:
    """List saved dashboard filters."""
    return (await api.get_custom_filters(client)).data


async def get_tasks_by_filter_uuid(client: FreeloClient, uuid: str) -> Any:
    """List tasks matching a saved filter, by filter uuid."""
    return (await api.get_tasks_by_filter_uuid(client, uuid)).data


async def get_tasks_by_filter_name(client: FreeloClient, name: str) -> Any:
    """List tasks matching a saved filter, by its webalized name."""
    return (await api.get_tasks_by_filter_name(client, name)).data
