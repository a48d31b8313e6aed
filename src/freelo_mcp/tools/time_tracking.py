from __future__ import annotations

from typing import Any, Optional

from freelo_mcp.core.adapters import time_tracking as api
from freelo_mcp.core.client import FreeloClient
from freelo_mcp.models import TrackingEditInput


async def start_time_tracking(
    client: FreeloClient, task_id: Optional[str] = None
) -> Any:
    """Start time tracking, optionally on a task."""
    params = {"task_id": task_id} if task_id else {}
    return (await api.start(client, params)).data


async def stop_time_tracking(client: FreeloClient) -> Any:
    """Stop the running time tracking and create a work report."""
    return (await api.stop(client)).data


async def edit_time_tracking(
    client: FreeloClient, tracking_data: TrackingEditInput
) -> Any:
    """Change the task or description of the running time tracking."""
    return (await api.edit(client, body=tracking_data.payload())).data
