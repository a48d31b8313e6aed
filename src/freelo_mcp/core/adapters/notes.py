from __future__ import annotations

from ..client import FreeloClient, FreeloResponse
from . import Body, segment

TOOL = "notes"


async def create_note(client: FreeloClient, project_id, body: Body) -> FreeloResponse:
    return await client.post(
        f"/project/{segment(project_id)}/note", json=body, tool=TOOL
    )


async def get_note(client: FreeloClient, note_id) -> FreeloResponse:
    return await client.get(f"/note/{segment(note_id)}", tool=TOOL)


async def update_note(client: FreeloClient, note_id, body: Body) -> FreeloResponse:
    return await client.post(f"/note/{segment(note_id)}", json=body, tool=TOOL)


async def delete_note(client: FreeloClient, note_id) -> FreeloResponse:
    return await client.delete(f"/note/{segment(note_id)}", tool=TOOL)
