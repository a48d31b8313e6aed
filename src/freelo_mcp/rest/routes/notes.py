from starlette.requests import Request
from starlette.routing import Route

from freelo_mcp.core.adapters import notes as api

from ..http import call, read_json


async def create_note(request: Request):
    return await call(
        request,
        api.create_note,
        request.path_params["project_id"],
        await read_json(request),
    )


async def get_note(request: Request):
    return await call(request, api.get_note, request.path_params["note_id"])


async def update_note(request: Request):
    return await call(
        request,
        api.update_note,
        request.path_params["note_id"],
        await read_json(request),
    )


async def delete_note(request: Request):
    return await call(request, api.delete_note, request.path_params["note_id"])


routes = [
    Route("/project/{project_id}/note", create_note, methods=["POST"]),
    Route("/note/{note_id}", get_note, methods=["GET"]),
    Route("/note/{note_id}", update_note, methods=["POST"]),
    Route("/note/{note_id}", delete_note, methods=["DELETE"]),
]
