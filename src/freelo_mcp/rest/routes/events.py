from starlette.requests import Request
from starlette.routing import Route

from freelo_mcp.core.adapters import events as api

from ..http import call, query


async def get_events(request: Request):
    return await call(request, api.get_events, query(request))


routes = [
    Route("/events", get_events, methods=["GET"]),
    Route("/all-events", get_events, methods=["GET"]),
]
