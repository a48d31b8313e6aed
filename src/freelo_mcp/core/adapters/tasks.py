from __future__ import annotations

from ..client import FreeloClient, FreeloResponse
from . import Body, Params, segment, unwrap_collection, with_params

TOOL = "tasks"


def _task(task_id) -> str:
    return f"/task/{segment(task_id)}"


async def create_task(
    client: FreeloClient, project_id, tasklist_id, body: Body
) -> FreeloResponse:
    return await client.post(
        f"/project/{segment(project_id)}/tasklist/{segment(tasklist_id)}/tasks",
        json=body,
        tool=TOOL,
    )


async def get_tasklist_tasks(
    client: FreeloClient, project_id, tasklist_id, params: Params = None
) -> FreeloResponse:
    return await client.get(
        f"/project/{segment(project_id)}/tasklist/{segment(tasklist_id)}/tasks",
        params=params,
        tool=TOOL,
    )


async def get_project_tasks(
    client: FreeloClient, project_id, params: Params = None
) -> FreeloResponse:
    """Tasks of one project via /all-tasks; unwraps ``data.tasks`` when paginated."""
    resp = await client.get(
        "/all-tasks", params=with_params(params, projects_ids=[project_id]), tool=TOOL
    )
    return unwrap_collection(resp, "tasks")


async def get_all_tasks(client: FreeloClient, params: Params = None) -> FreeloResponse:
    """
    Paginated task search across projects.

    Filters are bracket-encoded, e.g. ``projects_ids[]=1``,
    ``due_date_range[date_from]=2024-01-01``.
    """
    return await client.get("/all-tasks", params=params, tool=TOOL)


async def get_finished_tasks(
    client: FreeloClient, tasklist_id, params: Params = None
) -> FreeloResponse:
    return await client.get(
        f"/tasklist/{segment(tasklist_id)}/finished-tasks", params=params, tool=TOOL
    )


async def get_task(client: FreeloClient, task_id) -> FreeloResponse:
    return await client.get(_task(task_id), tool=TOOL)


async def edit_task(client: FreeloClient, task_id, body: Body) -> FreeloResponse:
    return await client.post(_task(task_id), json=body, tool=TOOL)


async def delete_task(client: FreeloClient, task_id) -> FreeloResponse:
    return await client.delete(_task(task_id), tool=TOOL)


async def activate_task(client: FreeloClient, task_id) -> FreeloResponse:
    return await client.post(f"{_task(task_id)}/activate", tool=TOOL)


async def finish_task(client: FreeloClient, task_id) -> FreeloResponse:
    return await client.post(f"{_task(task_id)}/finish", tool=TOOL)


async def move_task(client: FreeloClient, task_id, tasklist_id) -> FreeloResponse:
    return await client.post(
        f"{_task(task_id)}/move/{segment(tasklist_id)}", tool=TOOL
    )


async def get_task_description(client: FreeloClient, task_id) -> FreeloResponse:
    return await client.get(f"{_task(task_id)}/description", tool=TOOL)


async def update_task_description(
    client: FreeloClient, task_id, body: Body
) -> FreeloResponse:
    return await client.post(f"{_task(task_id)}/description", json=body, tool=TOOL)


async def create_task_reminder(
    client: FreeloClient, task_id, body: Body
) -> FreeloResponse:
    return await client.post(f"{_task(task_id)}/reminder", json=body, tool=TOOL)


async def delete_task_reminder(client: FreeloClient, task_id) -> FreeloResponse:
    return await client.delete(f"{_task(task_id)}/reminder", tool=TOOL)


async def get_public_link(client: FreeloClient, task_id) -> FreeloResponse:
    return await client.get(f"/public-link/task/{segment(task_id)}", tool=TOOL)


async def delete_public_link(client: FreeloClient, task_id) -> FreeloResponse:
    return await client.delete(f"/public-link/task/{segment(task_id)}", tool=TOOL)


async def create_task_from_template(
    client: FreeloClient, template_id, body: Body
) -> FreeloResponse:
    return await client.post(
        f"/task/create-from-template/{segment(template_id)}", json=body, tool=TOOL
    )


async def set_total_time_estimate(
    client: FreeloClient, task_id, body: Body
) -> FreeloResponse:
    return await client.post(
        f"{_task(task_id)}/total-time-estimate", json=body, tool=TOOL
    )


async def delete_total_time_estimate(client: FreeloClient, task_id) -> FreeloResponse:
    return await client.delete(f"{_task(task_id)}/total-time-estimate", tool=TOOL)


async def set_user_time_estimate(
    client: FreeloClient, task_id, user_id, body: Body
) -> FreeloResponse:
    return await client.post(
        f"{_task(task_id)}/users-time-estimates/{segment(user_id)}",
        json=body,
        tool=TOOL,
    )


async def delete_user_time_estimate(
    client: FreeloClient, task_id, user_id
) -> FreeloResponse:
    return await client.delete(
        f"{_task(task_id)}/users-time-estimates/{segment(user_id)}", tool=TOOL
    )
