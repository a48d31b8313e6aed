from __future__ import annotations

import base64
import binascii
import io
from typing import Any, Dict, Optional

from freelo_mcp.core.adapters import files as api
from freelo_mcp.core.client import FreeloClient
from freelo_mcp.core.errors import InvalidInputError
from freelo_mcp.models import FileFilters, dump


async def get_all_files(
    client: FreeloClient, filters: Optional[FileFilters] = None
) -> Any:
    """List documents, files, links and directories across projects."""
    return (await api.get_all_docs_and_files(client, dump(filters))).data


async def upload_file(client: FreeloClient, file_data: str, file_name: str) -> Any:
    """
    Upload a file given as base64 content.

    Returns the upstream upload record (contains the file uuid to attach
    to comments).
    """
    try:
        raw = base64.b64decode(file_data, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidInputError("file_data must be base64 encoded") from exc

    resp = await api.upload_file(
        client, io.BytesIO(raw), file_name, "application/octet-stream"
    )
    return resp.data


async def download_file(client: FreeloClient, file_uuid: str) -> Dict[str, Any]:
    """
    Download a file.

    Returns:
        {"filename": str, "contentType": str, "data": <base64 content>}
    """
    content = await api.download_file(client, file_uuid)
    return {
        "filename": content.filename,
        "contentType": content.content_type,
        "data": base64.b64encode(content.content).decode("ascii"),
    }
