from starlette.requests import Request
from starlette.routing import Route

from freelo_mcp.core.adapters import notifications as api

from ..http import call, query


async def get_all_notifications(request: Request):
    return await call(request, api.get_all_notifications, query(request))


async def mark_as_read(request: Request):
    return await call(request, api.mark_as_read, request.path_params["notification_id"])


async def mark_as_unread(request: Request):
    return await call(
        request, api.mark_as_unread, request.path_params["notification_id"]
    )


routes = [
    Route("/all-notifications", get_all_notifications, methods=["GET"]),
    Route(
        "/notification/{notification_id}/mark-as-read", mark_as_read, methods=["POST"]
    ),
    Route(
        "/notification/{notification_id}/mark-as-unread",
        mark_as_unread,
        methods=["POST"],
    ),
]
