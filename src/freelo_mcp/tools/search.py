from __future__ import annotations

from typing import Any

from freelo_mcp.core.adapters import search as api
from freelo_mcp.core.client import FreeloClient
from freelo_mcp.models import SearchInput


async def search_elasticsearch(client: FreeloClient, search_data: SearchInput) -> Any:
    """
    Full-text search over projects, tasklists, tasks, subtasks, files and
    comments. ``search_query`` is required; everything else narrows results.
    """
    return (await api.search(client, search_data.payload())).data
