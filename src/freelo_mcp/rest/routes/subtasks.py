from starlette.requests import Request
from starlette.routing import Route

from freelo_mcp.core.adapters import subtasks as api

from ..http import call, query, read_json


async def get_subtasks(request: Request):
    return await call(
        request, api.get_subtasks, request.path_params["task_id"], query(request)
    )


async def create_subtask(request: Request):
    return await call(
        request,
        api.create_subtask,
        request.path_params["task_id"],
        await read_json(request),
    )


routes = [
    Route("/task/{task_id}/subtasks", get_subtasks, methods=["GET"]),
    Route("/task/{task_id}/subtasks", create_subtask, methods=["POST"]),
]
