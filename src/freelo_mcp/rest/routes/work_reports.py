from starlette.requests import Request
from starlette.routing import Route

from freelo_mcp.core.adapters import work_reports as api

from ..http import call, query, read_json


async def get_work_reports(request: Request):
    return await call(request, api.get_work_reports, query(request))


async def create_work_report(request: Request):
    return await call(
        request,
        api.create_work_report,
        request.path_params["task_id"],
        await read_json(request),
    )


async def update_work_report(request: Request):
    return await call(
        request,
        api.update_work_report,
        request.path_params["work_report_id"],
        await read_json(request),
    )


async def delete_work_report(request: Request):
    return await call(
        request, api.delete_work_report, request.path_params["work_report_id"]
    )


routes = [
    Route("/work-reports", get_work_reports, methods=["GET"]),
    Route("/task/{task_id}/work-reports", create_work_report, methods=["POST"]),
    Route("/work-reports/{work_report_id}", update_work_report, methods=["POST"]),
    Route("/work-reports/{work_report_id}", delete_work_report, methods=["DELETE"]),
]
