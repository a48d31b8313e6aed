from starlette.requests import Request
from starlette.routing import Route

from freelo_mcp.core.adapters import labels as api

from ..http import call, query, read_json


async def create_task_labels(request: Request):
    return await call(request, api.create_task_labels, await read_json(request))


async def add_labels_to_task(request: Request):
    return await call(
        request,
        api.add_labels_to_task,
        request.path_params["task_id"],
        await read_json(request),
    )


async def remove_labels_from_task(request: Request):
    return await call(
        request,
        api.remove_labels_from_task,
        request.path_params["task_id"],
        await read_json(request),
    )


async def find_available_labels(request: Request):
    return await call(request, api.find_available_labels, query(request))


routes = [
    Route("/task-labels", create_task_labels, methods=["POST"]),
    Route("/task-labels/add-to-task/{task_id}", add_labels_to_task, methods=["POST"]),
    Route(
        "/task-labels/remove-from-task/{task_id}",
        remove_labels_from_task,
        methods=["POST"],
    ),
    Route("/project-labels/find-available", find_available_labels, methods=["GET"]),
]
