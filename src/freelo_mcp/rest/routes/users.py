from starlette.requests import Request
from starlette.routing import Route

from freelo_mcp.core.adapters import users as api

from ..http import call, query, read_json


async def get_users(request: Request):
    return await call(request, api.get_users, query(request))


async def get_project_manager_of(request: Request):
    return await call(request, api.get_project_manager_of, query(request))


async def manage_workers(request: Request):
    return await call(request, api.manage_workers, await read_json(request))


async def get_out_of_office(request: Request):
    return await call(request, api.get_out_of_office, request.path_params["user_id"])


async def set_out_of_office(request: Request):
    return await call(
        request,
        api.set_out_of_office,
        request.path_params["user_id"],
        await read_json(request),
    )


async def delete_out_of_office(request: Request):
    return await call(request, api.delete_out_of_office, request.path_params["user_id"])


routes = [
    Route("/users", get_users, methods=["GET"]),
    Route("/users/project-manager-of", get_project_manager_of, methods=["GET"]),
    Route("/users/manage-workers", manage_workers, methods=["POST"]),
    Route("/user/{user_id}/out-of-office", get_out_of_office, methods=["GET"]),
    Route("/user/{user_id}/out-of-office", set_out_of_office, methods=["POST"]),
    Route("/user/{user_id}/out-of-office", delete_out_of_office, methods=["DELETE"]),
]
