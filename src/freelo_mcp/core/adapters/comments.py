from __future__ import annotations

from dataclasses import replace
from typing import Any, List

from ..client import FreeloClient, FreeloResponse
from ..errors import FreeloHTTPError
from . import Body, Params, segment, with_params
from .tasks import get_task

TOOL = "comments"


async def create_comment(client: FreeloClient, task_id, body: Body) -> FreeloResponse:
    return await client.post(f"/task/{segment(task_id)}/comments", json=body, tool=TOOL)


async def update_comment(
    client: FreeloClient, comment_id, body: Body
) -> FreeloResponse:
    return await client.post(f"/comment/{segment(comment_id)}", json=body, tool=TOOL)


async def get_all_comments(
    client: FreeloClient, params: Params = None
) -> FreeloResponse:
    return await client.get("/all-comments", params=params, tool=TOOL)


def _same_id(left: Any, right: Any) -> bool:
    return left is not None and str(left) == str(right)


async def get_task_comments(
    client: FreeloClient, task_id, params: Params = None
) -> FreeloResponse:
    """
    Comments of a single task.

    Freelo has no per-task listing, so this reads the task to learn its
    project, lists that project's task comments and keeps the ones that
    belong to ``task_id``. Returns a plain list.
    """
    task = await get_task(client, task_id)
    task_data = task.data if isinstance(task.data, dict) else {}
    if not task_data.get("id"):
        raise FreeloHTTPError(
            status_code=404,
            method="GET",
            url=f"/task/{task_id}",
            message="Task not found",
            response_json={"error": "Task not found"},
        )

    project = task_data.get("project") or {}
    overrides: dict = {"type": "task"}
    if isinstance(project, dict) and project.get("id"):
        overrides["projects_ids"] = [project["id"]]

    resp = await get_all_comments(client, with_params(params, **overrides))

    comments: List[Any] = []
    data = resp.data
    if isinstance(data, dict) and isinstance(data.get("data"), dict):
        for comment in data["data"].get("comments") or []:
            owner = comment.get("task") if isinstance(comment, dict) else None
            if isinstance(owner, dict) and _same_id(owner.get("id"), task_id):
                comments.append(comment)

    return replace(resp, status_code=200, data=comments)
