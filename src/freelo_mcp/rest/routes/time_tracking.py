from starlette.requests import Request
from starlette.routing import Route

from freelo_mcp.core.adapters import time_tracking as api

from ..http import call, query, read_json


async def start(request: Request):
    return await call(request, api.start, query(request))


async def stop(request: Request):
    return await call(request, api.stop)


async def edit(request: Request):
    return await call(request, api.edit, query(request), await read_json(request))


routes = [
    Route("/timetracking/start", start, methods=["POST"]),
    Route("/timetracking/stop", stop, methods=["POST"]),
    Route("/timetracking/edit", edit, methods=["POST"]),
]
