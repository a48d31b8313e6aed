from __future__ import annotations

import re
from dataclasses import dataclass
from typing import IO, Optional

import httpx

from ..client import FreeloClient, FreeloResponse
from . import Params, read_all, segment

TOOL = "files"

_FILENAME_RE = re.compile(r"filename\*?=(?:UTF-8'')?\"?([^\";]+)\"?", re.IGNORECASE)


@dataclass(frozen=True)
class FileContent:
    filename: str
    content_type: str
    content: bytes


def filename_from_disposition(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    match = _FILENAME_RE.search(value)
    return match.group(1).strip() if match else None


async def get_all_docs_and_files(
    client: FreeloClient, params: Params = None
) -> FreeloResponse:
    return await client.get("/all-docs-and-files", params=params, tool=TOOL)


async def upload_file(
    client: FreeloClient,
    file: IO[bytes],
    filename: str,
    content_type: Optional[str] = None,
) -> FreeloResponse:
    """Upload one file as multipart field ``file``; upstream answers with its uuid."""
    return await client.upload(
        "/file/upload",
        file=file,
        filename=filename,
        content_type=content_type,
        tool=TOOL,
    )


async def open_file_download(client: FreeloClient, file_uuid) -> httpx.Response:
    """Streamed download; the caller consumes and closes the response."""
    return await client.stream("GET", f"/file/{segment(file_uuid)}", tool=TOOL)


async def download_file(client: FreeloClient, file_uuid) -> FileContent:
    resp, content = await read_all(client, f"/file/{segment(file_uuid)}", tool=TOOL)
    filename = filename_from_disposition(resp.headers.get("content-disposition"))
    return FileContent(
        filename=filename or str(file_uuid),
        content_type=resp.headers.get("content-type") or "application/octet-stream",
        content=content,
    )
