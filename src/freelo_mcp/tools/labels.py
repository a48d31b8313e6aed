from __future__ import annotations

from typing import Any, List, Optional

from freelo_mcp.core.adapters import labels as api
from freelo_mcp.core.client import FreeloClient
from freelo_mcp.models import LabelInput


def _labels_body(label_uuids: List[str]) -> dict:
    return {"labels": [{"uuid": uuid} for uuid in label_uuids]}


async def create_task_labels(client: FreeloClient, label_data: LabelInput) -> Any:
    """Create a task label."""
    body = {"labels": [label_data.payload()]}
    return (await api.create_task_labels(client, body)).data


async def add_labels_to_task(
    client: FreeloClient, task_id: str, label_uuids: List[str]
) -> Any:
    """Attach existing labels (by uuid) to a task."""
    return (
        await api.add_labels_to_task(client, task_id, _labels_body(label_uuids))
    ).data


async def remove_labels_from_task(
    client: FreeloClient, task_id: str, label_uuids: List[str]
) -> Any:
    """Detach labels (by uuid) from a task."""
    return (
        await api.remove_labels_from_task(client, task_id, _labels_body(label_uuids))
    ).data


async def find_available_labels(
    client: FreeloClient, project_id: Optional[str] = None
) -> Any:
    """List labels available for tasks, optionally within one project."""
    params = {"project_id": project_id} if project_id else {}
    return (await api.find_available_labels(client, params)).data
