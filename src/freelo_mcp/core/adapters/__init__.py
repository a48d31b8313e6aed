"""Resource adapters: one module per Freelo resource family.

Every adapter takes the client first, then path identifiers, then the
query mapping (``params``) and/or JSON body (``body``), and returns the
upstream ``FreeloResponse`` unchanged unless the endpoint needs reshaping.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Mapping, Optional
from urllib.parse import quote

from ..client import FreeloResponse

Params = Optional[Mapping[str, Any]]
Body = Any


def segment(value: Any) -> str:
    """Quote an identifier so it stays a single path segment."""
    return quote(str(value), safe="")


def with_params(params: Params, **overrides: Any) -> dict:
    merged = dict(params or {})
    merged.update(overrides)
    return merged


def unwrap_collection(resp: FreeloResponse, key: str) -> FreeloResponse:
    """Return ``data.<key>`` of a paginated envelope, or the response untouched."""
    data = resp.data
    if isinstance(data, dict):
        inner = data.get("data")
        if isinstance(inner, dict) and inner.get(key) is not None:
            return replace(resp, data=inner[key])
    return resp


async def read_all(client, path: str, *, tool: str):
    """Fetch a download endpoint fully; returns (upstream response, bytes)."""
    resp = await client.stream("GET", path, tool=tool)
    try:
        content = await resp.aread()
    finally:
        await resp.aclose()
    return resp, content


__all__ = ["Params", "Body", "segment", "with_params", "unwrap_collection", "read_all"]
