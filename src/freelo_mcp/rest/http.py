"""Request helpers shared by REST route modules."""

from __future__ import annotations

import json
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Tuple

import httpx
from starlette.background import BackgroundTask
from starlette.requests import Request
from starlette.responses import JSONResponse, Response, StreamingResponse

from freelo_mcp.core.client import FreeloClient, FreeloResponse, headers_subset
from freelo_mcp.core.config import EnvConfig, load_env_config
from freelo_mcp.core.context import seed_from_headers
from freelo_mcp.core.errors import (
    FreeloHTTPError,
    InvalidInputError,
    MissingCredentialsError,
)
from freelo_mcp.core.query import decode_query

from .errors import error_body


def _env(request: Request) -> EnvConfig:
    env = getattr(request.app.state, "env", None)
    return env if env is not None else load_env_config(use_dotenv=False)


def client_for(request: Request) -> FreeloClient:
    """
    Build an upstream client from the caller's own credentials.
    - Authorization must be HTTP Basic (email:api_key), else 401
    - User-Agent is mandatory, else 400
    """
    auth = request.headers.get("authorization") or ""
    if not auth.lower().startswith("basic "):
        raise MissingCredentialsError(
            "Authentication required. Use HTTP Basic Authentication."
        )
    if not request.headers.get("user-agent"):
        raise InvalidInputError("User-Agent header is required", error="Bad Request")

    ctx = seed_from_headers(request.headers, env=_env(request), allow_env_fallback=False)
    return ctx.client()


def query(request: Request) -> Dict[str, Any]:
    return decode_query(request.query_params.multi_items())


async def read_json(request: Request) -> Any:
    """Parsed JSON body, or None when the request carries no body."""
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise InvalidInputError("Malformed JSON body", error="Bad Request") from exc


def relay(resp: FreeloResponse) -> Response:
    if resp.data is None:
        return Response(status_code=resp.status_code)
    return JSONResponse(resp.data, status_code=resp.status_code)


async def call(
    request: Request,
    adapter: Callable[..., Awaitable[FreeloResponse]],
    *args: Any,
    **kwargs: Any,
) -> Response:
    """Run one adapter with a per-request client and relay its response."""
    async with client_for(request) as client:
        resp = await adapter(client, *args, **kwargs)
    return relay(resp)


DOWNLOAD_HEADERS = ("Content-Type", "Content-Disposition")


async def stream_download(
    request: Request,
    opener: Callable[..., Awaitable[httpx.Response]],
    *args: Any,
    not_found: Tuple[str, str],
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    """
    Pipe an upstream download to the caller without buffering it.
    - Upstream error statuses become ``not_found`` envelopes with the same status
    - Explicit ``headers`` win over the ones copied from upstream
    """
    client = client_for(request)
    try:
        upstream = await opener(client, *args)
    except FreeloHTTPError as exc:
        await client.aclose()
        return JSONResponse(error_body(*not_found), status_code=exc.status_code)
    except Exception:
        await client.aclose()
        raise

    async def close() -> None:
        try:
            await upstream.aclose()
        finally:
            await client.aclose()

    relayed = headers_subset(upstream.headers, *DOWNLOAD_HEADERS)
    relayed.update(headers or {})
    return StreamingResponse(
        upstream.aiter_bytes(),
        status_code=upstream.status_code,
        headers=relayed,
        background=BackgroundTask(close),
    )


__all__ = ["client_for", "query", "read_json", "relay", "call", "stream_download"]
