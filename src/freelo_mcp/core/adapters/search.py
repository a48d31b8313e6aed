from __future__ import annotations

from typing import Any, Mapping

from ..client import FreeloClient, FreeloResponse
from ..errors import InvalidInputError


async def search(client: FreeloClient, body: Mapping[str, Any]) -> FreeloResponse:
    """Full-text search across projects, tasks, comments and files.

    ``search_query`` is mandatory and checked before calling upstream.
    """
    query = body.get("search_query") if isinstance(body, Mapping) else None
    if not isinstance(query, str) or not query.strip():
        raise InvalidInputError("search_query is required")
    return await client.post("/search", json=dict(body), tool="search")
