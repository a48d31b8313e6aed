from __future__ import annotations

from ..client import FreeloClient, FreeloResponse
from . import Body, Params, segment

TOOL = "labels"


async def create_task_labels(client: FreeloClient, body: Body) -> FreeloResponse:
    return await client.post("/task-labels", json=body, tool=TOOL)


async def add_labels_to_task(
    client: FreeloClient, task_id, body: Body
) -> FreeloResponse:
    return await client.post(
        f"/task-labels/add-to-task/{segment(task_id)}", json=body, tool=TOOL
    )


async def remove_labels_from_task(
    client: FreeloClient, task_id, body: Body
) -> FreeloResponse:
    return await client.post(
        f"/task-labels/remove-from-task/{segment(task_id)}", json=body, tool=TOOL
    )


async def find_available_labels(
    client: FreeloClient, params: Params = None
) -> FreeloResponse:
    return await client.get("/project-labels/find-available", params=params, tool=TOOL)
