from __future__ import annotations

from typing import Any

from freelo_mcp.core.adapters import notes as api
from freelo_mcp.core.client import FreeloClient
from freelo_mcp.models import NoteInput, NoteUpdateInput


async def create_note(
    client: FreeloClient, project_id: str, note_data: NoteInput
) -> Any:
    """Create a note in a project."""
    return (await api.create_note(client, project_id, note_data.payload())).data


async def get_note(client: FreeloClient, note_id: str) -> Any:
    """Get a note."""
    return (await api.get_note(client, note_id)).data


async def update_note(
    client: FreeloClient, note_id: str, note_data: NoteUpdateInput
) -> Any:
    """Update the title or content of a note."""
    return (await api.update_note(client, note_id, note_data.payload())).data


async def delete_note(client: FreeloClient, note_id: str) -> Any:
    """Delete a note."""
    return (await api.delete_note(client, note_id)).data
