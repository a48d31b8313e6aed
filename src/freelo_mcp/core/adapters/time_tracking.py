from __future__ import annotations

from ..client import FreeloClient, FreeloResponse
from . import Body, Params

TOOL = "time_tracking"


async def start(client: FreeloClient, params: Params = None) -> FreeloResponse:
    """Start tracking; ``task_id`` travels as a query parameter, no body."""
    return await client.post("/timetracking/start", params=params, tool=TOOL)


async def stop(client: FreeloClient) -> FreeloResponse:
    return await client.post("/timetracking/stop", tool=TOOL)


async def edit(
    client: FreeloClient, params: Params = None, body: Body = None
) -> FreeloResponse:
    return await client.post(
        "/timetracking/edit", params=params, json=body, tool=TOOL
    )
