from starlette.requests import Request
from starlette.routing import Route

from freelo_mcp.core.adapters import pinned_items as api

from ..http import call, read_json


async def get_pinned_items(request: Request):
    return await call(request, api.get_pinned_items, request.path_params["project_id"])


async def pin_item(request: Request):
    return await call(
        request,
        api.pin_item,
        request.path_params["project_id"],
        await read_json(request),
    )


async def delete_pinned_item(request: Request):
    return await call(
        request, api.delete_pinned_item, request.path_params["pinned_item_id"]
    )


routes = [
    Route("/project/{project_id}/pinned-items", get_pinned_items, methods=["GET"]),
    Route("/project/{project_id}/pinned-items", pin_item, methods=["POST"]),
    Route("/pinned-item/{pinned_item_id}", delete_pinned_item, methods=["DELETE"]),
]
