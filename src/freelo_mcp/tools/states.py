from __future__ import annotations

from typing import Any

from freelo_mcp.core.adapters import states as api
from freelo_mcp.core.client import FreeloClient


async def get_all_states(client: FreeloClient) -> Any:
    """List task/project states."""
    return (await api.get_states(client)).data
