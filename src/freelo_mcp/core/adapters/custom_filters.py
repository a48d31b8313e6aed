from __future__ import annotations

from ..client import FreeloClient, FreeloResponse
from . import Params, segment

TOOL = "custom_filters"


async def get_custom_filters(client: FreeloClient) -> FreeloResponse:
    return await client.get("/dashboard/custom-filters", tool=TOOL)


async def get_tasks_by_filter_uuid(
    client: FreeloClient, uuid, params: Params = None
) -> FreeloResponse:
    return await client.get(
        f"/dashboard/custom-filter/by-uuid/{segment(uuid)}/tasks",
        params=params,
        tool=TOOL,
    )


async def get_tasks_by_filter_name(
    client: FreeloClient, name_webalized, params: Params = None
) -> FreeloResponse:
    return await client.get(
        f"/dashboard/custom-filter/by-name/{segment(name_webalized)}/tasks",
        params=params,
        tool=TOOL,
    )
