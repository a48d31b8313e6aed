from starlette.requests import Request
from starlette.routing import Route

from freelo_mcp.core.adapters import tasks as api

from ..http import call, query, read_json


def _task_id(request: Request):
    return request.path_params["task_id"]


async def create_task(request: Request):
    return await call(
        request,
        api.create_task,
        request.path_params["project_id"],
        request.path_params["tasklist_id"],
        await read_json(request),
    )


async def get_tasklist_tasks(request: Request):
    return await call(
        request,
        api.get_tasklist_tasks,
        request.path_params["project_id"],
        request.path_params["tasklist_id"],
        query(request),
    )


async def get_project_tasks(request: Request):
    return await call(
        request,
        api.get_project_tasks,
        request.path_params["project_id"],
        query(request),
    )


async def get_all_tasks(request: Request):
    return await call(request, api.get_all_tasks, query(request))


async def get_finished_tasks(request: Request):
    return await call(
        request,
        api.get_finished_tasks,
        request.path_params["tasklist_id"],
        query(request),
    )


async def get_task(request: Request):
    return await call(request, api.get_task, _task_id(request))


async def edit_task(request: Request):
    return await call(request, api.edit_task, _task_id(request), await read_json(request))


async def delete_task(request: Request):
    return await call(request, api.delete_task, _task_id(request))


async def activate_task(request: Request):
    return await call(request, api.activate_task, _task_id(request))


async def finish_task(request: Request):
    return await call(request, api.finish_task, _task_id(request))


async def move_task(request: Request):
    return await call(
        request, api.move_task, _task_id(request), request.path_params["tasklist_id"]
    )


async def get_task_description(request: Request):
    return await call(request, api.get_task_description, _task_id(request))


async def update_task_description(request: Request):
    return await call(
        request, api.update_task_description, _task_id(request), await read_json(request)
    )


async def create_task_reminder(request: Request):
    return await call(
        request, api.create_task_reminder, _task_id(request), await read_json(request)
    )


async def delete_task_reminder(request: Request):
    return await call(request, api.delete_task_reminder, _task_id(request))


async def get_public_link(request: Request):
    return await call(request, api.get_public_link, _task_id(request))


async def delete_public_link(request: Request):
    return await call(request, api.delete_public_link, _task_id(request))


async def create_task_from_template(request: Request):
    return await call(
        request,
        api.create_task_from_template,
        request.path_params["template_id"],
        await read_json(request),
    )


async def set_total_time_estimate(request: Request):
    return await call(
        request, api.set_total_time_estimate, _task_id(request), await read_json(request)
    )


async def delete_total_time_estimate(request: Request):
    return await call(request, api.delete_total_time_estimate, _task_id(request))


async def set_user_time_estimate(request: Request):
    return await call(
        request,
        api.set_user_time_estimate,
        _task_id(request),
        request.path_params["user_id"],
        await read_json(request),
    )


async def delete_user_time_estimate(request: Request):
    return await call(
        request,
        api.delete_user_time_estimate,
        _task_id(request),
        request.path_params["user_id"],
    )


routes = [
    Route(
        "/project/{project_id}/tasklist/{tasklist_id}/tasks",
        get_tasklist_tasks,
        methods=["GET"],
    ),
    Route(
        "/project/{project_id}/tasklist/{tasklist_id}/tasks",
        create_task,
        methods=["POST"],
    ),
    Route("/project/{project_id}/tasks", get_project_tasks, methods=["GET"]),
    Route("/all-tasks", get_all_tasks, methods=["GET"]),
    Route("/tasklist/{tasklist_id}/finished-tasks", get_finished_tasks, methods=["GET"]),
    Route(
        "/task/create-from-template/{template_id}",
        create_task_from_template,
        methods=["POST"],
    ),
    Route("/task/{task_id}", get_task, methods=["GET"]),
    Route("/task/{task_id}", edit_task, methods=["POST"]),
    Route("/task/{task_id}", delete_task, methods=["DELETE"]),
    Route("/task/{task_id}/activate", activate_task, methods=["POST"]),
    Route("/task/{task_id}/finish", finish_task, methods=["POST"]),
    Route("/task/{task_id}/move/{tasklist_id}", move_task, methods=["POST"]),
    Route("/task/{task_id}/description", get_task_description, methods=["GET"]),
    Route("/task/{task_id}/description", update_task_description, methods=["POST"]),
    Route("/task/{task_id}/reminder", create_task_reminder, methods=["POST"]),
    Route("/task/{task_id}/reminder", delete_task_reminder, methods=["DELETE"]),
    Route("/public-link/task/{task_id}", get_public_link, methods=["GET"]),
    Route("/public-link/task/{task_id}", delete_public_link, methods=["DELETE"]),
    Route(
        "/task/{task_id}/total-time-estimate",
        set_total_time_estimate,
        methods=["POST"],
    ),
    Route(
        "/task/{task_id}/total-time-estimate",
        delete_total_time_estimate,
        methods=["DELETE"],
    ),
    Route(
        "/task/{task_id}/users-time-estimates/{user_id}",
        set_user_time_estimate,
        methods=["POST"],
    ),
    Route(
        "/task/{task_id}/users-time-estimates/{user_id}",
        delete_user_time_estimate,
        methods=["DELETE"],
    ),
]
