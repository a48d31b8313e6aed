from starlette.requests import Request
from starlette.routing import Route

from freelo_mcp.core.adapters import states as api

from ..http import call


async def get_states(request: Request):
    return await call(request, api.get_states)


routes = [Route("/states", get_states, methods=["GET"])]
