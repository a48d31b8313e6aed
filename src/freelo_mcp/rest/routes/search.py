from starlette.requests import Request
from starlette.routing import Route

from freelo_mcp.core.adapters import search as api

from ..http import call, read_json


async def search(request: Request):
    body = await read_json(request)
    return await call(request, api.search, body if body is not None else {})


routes = [Route("/search", search, methods=["POST"])]
