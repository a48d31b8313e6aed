from __future__ import annotations

from dataclasses import replace

from ..client import FreeloClient, FreeloResponse
from . import Body, Params, segment

TOOL = "subtasks"


def _as_list(data) -> list:
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for key in ("data", "subtasks"):
            value = data.get(key)
            if isinstance(value, list):
                return value
    return []


async def get_subtasks(
    client: FreeloClient, task_id, params: Params = None
) -> FreeloResponse:
    """Subtasks of a task, always as a list."""
    resp = await client.get(
        f"/task/{segment(task_id)}/subtasks", params=params, tool=TOOL
    )
    return replace(resp, data=_as_list(resp.data))


async def create_subtask(client: FreeloClient, task_id, body: Body) -> FreeloResponse:
    return await client.post(f"/task/{segment(task_id)}/subtasks", json=body, tool=TOOL)
