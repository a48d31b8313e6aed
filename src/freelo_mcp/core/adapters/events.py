from __future__ import annotations

from ..client import FreeloClient, FreeloResponse
from . import Params


async def get_events(client: FreeloClient, params: Params = None) -> FreeloResponse:
    """Paginated activity events; filters such as ``date_range[date_from]`` pass through."""
    return await client.get("/events", params=params, tool="events")
