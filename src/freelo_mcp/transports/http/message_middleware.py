from __future__ import annotations

import json
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

PARSE_ERROR = -32700
INVALID_REQUEST = -32600


def _json_rpc_error(
    code: int, message: str, http_status: int = 400, request_id: str = ""
) -> Response:
    payload = {
        "jsonrpc": "2.0",
        "id": None,
        "error": {"code": code, "message": message},
    }
    if request_id:
        payload["request_id"] = request_id
    return Response(
        json.dumps(payload),
        status_code=http_status,
        media_type="application/json",
    )


def _is_message(obj) -> bool:
    """Request, notification, or a client's response to a server request."""
    if not isinstance(obj, dict):
        return False
    if "method" in obj:
        return isinstance(obj["method"], str)
    return "id" in obj and ("result" in obj or "error" in obj)


def is_valid_payload(data) -> bool:
    if isinstance(data, list):
        return bool(data) and all(_is_message(item) for item in data)
    return _is_message(data)


def _make_receive(body: bytes):
    done = False

    async def receive():
        nonlocal done
        if done:
            return {"type": "http.request", "body": b"", "more_body": False}
        done = True
        return {"type": "http.request", "body": body, "more_body": False}

    return receive


class MessageHandlingMiddleware(BaseHTTPMiddleware):
    """
    Screen POST bodies on the MCP endpoint before the session manager sees them.
    - Unparseable JSON -> JSON-RPC parse error (400)
    - Anything that is not a JSON-RPC message or batch -> invalid request (400)
    - Everything else, notifications included, is replayed downstream
    """

    def __init__(self, app, path: str = "/mcp"):
        super().__init__(app)
        self.path = path

    async def dispatch(self, request: Request, call_next: Callable):
        if request.method.upper() != "POST" or request.url.path.rstrip("/") != self.path:
            return await call_next(request)

        raw_body = await request.body()
        rid = getattr(request.state, "request_id", "")
        try:
            data = json.loads(raw_body) if raw_body else None
        except json.JSONDecodeError:
            return _json_rpc_error(
                PARSE_ERROR, "Parse error", http_status=400, request_id=rid
            )

        if not is_valid_payload(data):
            return _json_rpc_error(
                INVALID_REQUEST, "Invalid Request", http_status=400, request_id=rid
            )

        new_request = Request(request.scope, receive=_make_receive(raw_body))
        return await call_next(new_request)


__all__ = ["MessageHandlingMiddleware", "is_valid_payload"]
