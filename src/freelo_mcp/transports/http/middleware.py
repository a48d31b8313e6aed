from __future__ import annotations

import json
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from freelo_mcp.core.config import EnvConfig, load_env_config
from freelo_mcp.core.context import (
    AUTHORIZATION_HEADER,
    REQUEST_ID_HEADER,
    parse_basic_authorization,
)
from freelo_mcp.core.errors import InvalidCredentialsError, MissingCredentialsError


class CredentialsMiddleware(BaseHTTPMiddleware):
    """
    Reject MCP requests that could never reach Freelo.
    - A present Authorization header must be valid HTTP Basic
    - Without one, env credentials must be configured
    Credentials themselves are read again per tool call, never stored here.
    """

    def __init__(self, app, env: EnvConfig | None = None):
        super().__init__(app)
        self.env = env

    async def dispatch(self, request: Request, call_next: Callable):
        env = self.env or load_env_config(use_dotenv=False)
        auth_header = request.headers.get(AUTHORIZATION_HEADER)
        try:
            if auth_header:
                parse_basic_authorization(auth_header)
            elif not env.has_credentials:
                raise MissingCredentialsError(
                    "Authentication required. Use HTTP Basic Authentication."
                )
        except (MissingCredentialsError, InvalidCredentialsError) as exc:
            return self._error_response(
                status=401,
                code="Unauthorized",
                message=str(exc),
                request_id=getattr(request.state, "request_id", "")
                or request.headers.get(REQUEST_ID_HEADER)
                or "",
            )
        return await call_next(request)

    @staticmethod
    def _error_response(
        *, status: int, code: str, message: str, request_id: str
    ) -> Response:
        body = {
            "error": code,
            "message": message,
            "request_id": request_id,
        }
        return Response(
            json.dumps(body),
            status_code=status,
            media_type="application/json",
            headers={"WWW-Authenticate": 'Basic realm="freelo"'},
        )


__all__ = ["CredentialsMiddleware"]
