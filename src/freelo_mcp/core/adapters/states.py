from __future__ import annotations

from ..client import FreeloClient, FreeloResponse


async def get_states(client: FreeloClient) -> FreeloResponse:
    """Task state enumeration (active, finished, ...)."""
    return await client.get("/states", tool="states")
