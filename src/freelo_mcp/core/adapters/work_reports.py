from __future__ import annotations

from ..client import FreeloClient, FreeloResponse
from . import Body, Params, segment

TOOL = "work_reports"


async def get_work_reports(
    client: FreeloClient, params: Params = None
) -> FreeloResponse:
    return await client.get("/work-reports", params=params, tool=TOOL)


async def create_work_report(
    client: FreeloClient, task_id, body: Body
) -> FreeloResponse:
    return await client.post(
        f"/task/{segment(task_id)}/work-reports", json=body, tool=TOOL
    )


async def update_work_report(
    client: FreeloClient, work_report_id, body: Body
) -> FreeloResponse:
    return await client.post(
        f"/work-reports/{segment(work_report_id)}", json=body, tool=TOOL
    )


async def delete_work_report(client: FreeloClient, work_report_id) -> FreeloResponse:
    return await client.delete(f"/work-reports/{segment(work_report_id)}", tool=TOOL)
