from __future__ import annotations

from typing import Any, Optional

from freelo_mcp.core.adapters import events as api
from freelo_mcp.core.client import FreeloClient
from freelo_mcp.models import EventFilters, dump


async def get_events(
    client: FreeloClient, filters: Optional[EventFilters] = None
) -> Any:
    """
    List activity events (task changes, comments, ...) with filters for
    projects, users, event types, tasks and a date range.
    """
    return (await api.get_events(client, dump(filters))).data
