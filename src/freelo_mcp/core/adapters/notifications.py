from __future__ import annotations

from ..client import FreeloClient, FreeloResponse
from . import Params, segment

TOOL = "notifications"


async def get_all_notifications(
    client: FreeloClient, params: Params = None
) -> FreeloResponse:
    return await client.get("/all-notifications", params=params, tool=TOOL)


async def mark_as_read(client: FreeloClient, notification_id) -> FreeloResponse:
    return await client.post(
        f"/notification/{segment(notification_id)}/mark-as-read", tool=TOOL
    )


async def mark_as_unread(client: FreeloClient, notification_id) -> FreeloResponse:
    return await client.post(
        f"/notification/{segment(notification_id)}/mark-as-unread", tool=TOOL
    )
