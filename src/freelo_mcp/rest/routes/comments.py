from starlette.requests import Request
from starlette.routing import Route

from freelo_mcp.core.adapters import comments as api

from ..http import call, query, read_json


async def create_comment(request: Request):
    return await call(
        request,
        api.create_comment,
        request.path_params["task_id"],
        await read_json(request),
    )


async def update_comment(request: Request):
    return await call(
        request,
        api.update_comment,
        request.path_params["comment_id"],
        await read_json(request),
    )


async def get_all_comments(request: Request):
    return await call(request, api.get_all_comments, query(request))


async def get_task_comments(request: Request):
    return await call(
        request,
        api.get_task_comments,
        request.path_params["task_id"],
        query(request),
    )


routes = [
    Route("/task/{task_id}/comments", get_task_comments, methods=["GET"]),
    Route("/task/{task_id}/comments", create_comment, methods=["POST"]),
    Route("/comment/{comment_id}", update_comment, methods=["POST"]),
    Route("/all-comments", get_all_comments, methods=["GET"]),
]
