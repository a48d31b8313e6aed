from __future__ import annotations

from typing import Any

from freelo_mcp.core.adapters import subtasks as api
from freelo_mcp.core.client import FreeloClient
from freelo_mcp.models import TaskCreateInput


async def create_subtask(
    client: FreeloClient, task_id: str, subtask_data: TaskCreateInput
) -> Any:
    """Create a subtask under a task."""
    return (await api.create_subtask(client, task_id, subtask_data.payload())).data


async def get_subtasks(client: FreeloClient, task_id: str) -> Any:
    """List subtasks of a task."""
    return (await api.get_subtasks(client, task_id)).data
