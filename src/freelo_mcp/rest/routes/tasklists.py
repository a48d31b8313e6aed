from starlette.requests import Request
from starlette.routing import Route

from freelo_mcp.core.adapters import tasklists as api

from ..http import call, query, read_json


async def create_tasklist(request: Request):
    return await call(
        request,
        api.create_tasklist,
        request.path_params["project_id"],
        await read_json(request),
    )


async def get_project_tasklists(request: Request):
    return await call(
        request,
        api.get_project_tasklists,
        request.path_params["project_id"],
        query(request),
    )


async def get_all_tasklists(request: Request):
    return await call(request, api.get_all_tasklists, query(request))


async def get_assignable_workers(request: Request):
    return await call(
        request,
        api.get_assignable_workers,
        request.path_params["project_id"],
        request.path_params["tasklist_id"],
    )


async def get_tasklist(request: Request):
    return await call(request, api.get_tasklist, request.path_params["tasklist_id"])


async def create_tasklist_from_template(request: Request):
    return await call(
        request,
        api.create_tasklist_from_template,
        request.path_params["template_id"],
        await read_json(request),
    )


routes = [
    Route("/project/{project_id}/tasklists", get_project_tasklists, methods=["GET"]),
    Route("/project/{project_id}/tasklists", create_tasklist, methods=["POST"]),
    Route("/all-tasklists", get_all_tasklists, methods=["GET"]),
    Route(
        "/project/{project_id}/tasklist/{tasklist_id}/assignable-workers",
        get_assignable_workers,
        methods=["GET"],
    ),
    Route(
        "/tasklist/create-from-template/{template_id}",
        create_tasklist_from_template,
        methods=["POST"],
    ),
    Route("/tasklist/{tasklist_id}", get_tasklist, methods=["GET"]),
]
