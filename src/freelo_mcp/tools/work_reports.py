from __future__ import annotations

from typing import Any, Optional

from freelo_mcp.core.adapters import work_reports as api
from freelo_mcp.core.client import FreeloClient
from freelo_mcp.models import (
    WorkReportFilters,
    WorkReportInput,
    WorkReportUpdateInput,
    dump,
)


async def get_work_reports(
    client: FreeloClient, filters: Optional[WorkReportFilters] = None
) -> Any:
    """List work reports filtered by projects, users, labels or date range."""
    return (await api.get_work_reports(client, dump(filters))).data


async def create_work_report(
    client: FreeloClient, task_id: str, report_data: WorkReportInput
) -> Any:
    """Log worked minutes on a task."""
    return (
        await api.create_work_report(client, task_id, report_data.payload())
    ).data


async def update_work_report(
    client: FreeloClient, work_report_id: str, report_data: WorkReportUpdateInput
) -> Any:
    """Update a work report."""
    return (
        await api.update_work_report(client, work_report_id, report_data.payload())
    ).data


async def delete_work_report(client: FreeloClient, work_report_id: str) -> Any:
    """Delete a work report."""
    return (await api.delete_work_report(client, work_report_id)).data
