from __future__ import annotations

import logging

from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from freelo_mcp.core.errors import (
    FreeloClientError,
    FreeloHTTPError,
    FreeloParseError,
    FreeloUnavailableError,
    InvalidCredentialsError,
    InvalidInputError,
    MissingCredentialsError,
)
from freelo_mcp.core.observability import log_upstream_error

log = logging.getLogger("freelo_mcp.rest")


def error_body(error: str, message: str) -> dict:
    return {"error": error, "message": message}


async def upstream_http_error(request: Request, exc: FreeloHTTPError) -> Response:
    log_upstream_error(
        exc.status_code, log, method=request.method, path=request.url.path
    )
    if exc.response_json is not None:
        return JSONResponse(exc.response_json, status_code=exc.status_code)
    return Response(
        exc.response_text or "", status_code=exc.status_code, media_type="text/plain"
    )


async def upstream_unavailable(request: Request, exc: FreeloUnavailableError):
    log.warning("Freelo unreachable for %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        error_body("Service Unavailable", "No response received from Freelo API"),
        status_code=503,
    )


async def upstream_parse_error(request: Request, exc: FreeloParseError):
    return JSONResponse(error_body("Bad Gateway", str(exc)), status_code=502)


async def client_error(request: Request, exc: FreeloClientError):
    log.error("Upstream call failed for %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(error_body("Internal Server Error", str(exc)), status_code=500)


async def invalid_input(request: Request, exc: InvalidInputError):
    return JSONResponse(error_body(exc.error, exc.message), status_code=400)


async def unauthorized(request: Request, exc: Exception):
    return JSONResponse(error_body("Unauthorized", str(exc)), status_code=401)


EXCEPTION_HANDLERS = {
    FreeloHTTPError: upstream_http_error,
    FreeloUnavailableError: upstream_unavailable,
    FreeloParseError: upstream_parse_error,
    FreeloClientError: client_error,
    InvalidInputError: invalid_input,
    MissingCredentialsError: unauthorized,
    InvalidCredentialsError: unauthorized,
}

__all__ = ["EXCEPTION_HANDLERS", "error_body"]
