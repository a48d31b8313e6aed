from starlette.requests import Request
from starlette.routing import Route

from freelo_mcp.core.adapters import custom_filters as api

from ..http import call, query


async def get_custom_filters(request: Request):
    return await call(request, api.get_custom_filters)


async def get_tasks_by_filter_uuid(request: Request):
    return await call(
        request,
        api.get_tasks_by_filter_uuid,
        request.path_params["uuid"],
        query(request),
    )


async def get_tasks_by_filter_name(request: Request):
    return await call(
        request,
        api.get_tasks_by_filter_name,
        request.path_params["name_webalized"],
        query(request),
    )


routes = [
    Route("/dashboard/custom-filters", get_custom_filters, methods=["GET"]),
    Route(
        "/dashboard/custom-filter/by-uuid/{uuid}/tasks",
        get_tasks_by_filter_uuid,
        methods=["GET"],
    ),
    Route(
        "/dashboard/custom-filter/by-name/{name_webalized}/tasks",
        get_tasks_by_filter_name,
        methods=["GET"],
    ),
]
