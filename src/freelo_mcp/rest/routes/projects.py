from starlette.requests import Request
from starlette.routing import Route

from freelo_mcp.core.adapters import projects as api

from ..http import call, query, read_json


async def create_project(request: Request):
    return await call(request, api.create_project, await read_json(request))


async def get_projects(request: Request):
    return await call(request, api.get_projects, query(request))


async def get_all_projects(request: Request):
    return await call(request, api.get_all_projects, query(request))


async def get_invited_projects(request: Request):
    return await call(request, api.get_invited_projects, query(request))


async def get_archived_projects(request: Request):
    return await call(request, api.get_archived_projects, query(request))


async def get_template_projects(request: Request):
    return await call(request, api.get_template_projects, query(request))


async def get_user_projects(request: Request):
    return await call(
        request, api.get_user_projects, request.path_params["user_id"], query(request)
    )


async def get_project(request: Request):
    return await call(request, api.get_project, request.path_params["project_id"])


async def delete_project(request: Request):
    return await call(request, api.delete_project, request.path_params["project_id"])


async def archive_project(request: Request):
    return await call(request, api.archive_project, request.path_params["project_id"])


async def activate_project(request: Request):
    return await call(request, api.activate_project, request.path_params["project_id"])


async def get_project_workers(request: Request):
    return await call(
        request,
        api.get_project_workers,
        request.path_params["project_id"],
        query(request),
    )


async def remove_workers_by_ids(request: Request):
    return await call(
        request,
        api.remove_workers_by_ids,
        request.path_params["project_id"],
        await read_json(request),
    )


async def remove_workers_by_emails(request: Request):
    return await call(
        request,
        api.remove_workers_by_emails,
        request.path_params["project_id"],
        await read_json(request),
    )


async def create_project_from_template(request: Request):
    return await call(
        request,
        api.create_project_from_template,
        request.path_params["template_id"],
        await read_json(request),
    )


routes = [
    Route("/projects", get_projects, methods=["GET"]),
    Route("/projects", create_project, methods=["POST"]),
    Route("/all-projects", get_all_projects, methods=["GET"]),
    Route("/invited-projects", get_invited_projects, methods=["GET"]),
    Route("/archived-projects", get_archived_projects, methods=["GET"]),
    Route("/template-projects", get_template_projects, methods=["GET"]),
    Route("/user/{user_id}/all-projects", get_user_projects, methods=["GET"]),
    Route(
        "/project/create-from-template/{template_id}",
        create_project_from_template,
        methods=["POST"],
    ),
    Route("/project/{project_id}", get_project, methods=["GET"]),
    Route("/project/{project_id}", delete_project, methods=["DELETE"]),
    Route("/project/{project_id}/archive", archive_project, methods=["POST"]),
    Route("/project/{project_id}/activate", activate_project, methods=["POST"]),
    Route("/project/{project_id}/workers", get_project_workers, methods=["GET"]),
    Route(
        "/project/{project_id}/remove-workers/by-ids",
        remove_workers_by_ids,
        methods=["POST"],
    ),
    Route(
        "/project/{project_id}/remove-workers/by-emails",
        remove_workers_by_emails,
        methods=["POST"],
    ),
]
