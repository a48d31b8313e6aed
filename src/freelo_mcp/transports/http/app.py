from __future__ import annotations

import logging
from typing import Mapping

from mcp.server.fastmcp import FastMCP
from mcp.server.lowlevel.server import request_ctx
from mcp.server.transport_security import TransportSecuritySettings
from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse
from starlette.routing import Route

from freelo_mcp.core.client import FreeloClient
from freelo_mcp.core.config import EnvConfig, load_env_config
from freelo_mcp.core.context import seed_from_headers
from freelo_mcp.rest import API_PREFIX, build_rest_app
from freelo_mcp.transports.http.config import HttpConfig
from freelo_mcp.transports.http.message_middleware import MessageHandlingMiddleware
from freelo_mcp.transports.http.middleware import CredentialsMiddleware
from freelo_mcp.transports.http.ops import (
    build_ops_app,
    compute_readiness_state,
    is_ops_path,
)
from freelo_mcp.transports.http.request_id_middleware import RequestIdMiddleware
from freelo_mcp.transports.server import build_fastmcp_server

log = logging.getLogger(__name__)

SSE_MOUNT_PATH = "/mcp-sse"


def _transport_security(cfg: HttpConfig) -> TransportSecuritySettings:
    # A wildcard origin list cannot be expressed to the SDK's origin check
    if not cfg.dns_rebinding_protection or "*" in cfg.allowed_origins:
        return TransportSecuritySettings(enable_dns_rebinding_protection=False)

    allowed_hosts = [cfg.host, f"{cfg.host}:{cfg.port}", "testserver"]
    for host in ("localhost", "127.0.0.1"):
        for candidate in (host, f"{host}:*"):
            if candidate not in allowed_hosts:
                allowed_hosts.append(candidate)

    return TransportSecuritySettings(
        enable_dns_rebinding_protection=True,
        allowed_hosts=allowed_hosts,
        allowed_origins=list(cfg.allowed_origins),
    )


def make_request_client_provider(env: EnvConfig):
    """
    Client provider for tool calls arriving over HTTP.

    Credentials are taken from the HTTP request that carried the call
    (Basic Authorization and User-Agent), falling back to env credentials.
    """

    def provider() -> FreeloClient:
        headers: Mapping[str, str] = {}
        try:
            request = request_ctx.get().request
        except LookupError:
            request = None
        if request is not None and getattr(request, "headers", None) is not None:
            headers = request.headers
        return seed_from_headers(headers, env=env).client()

    return provider


def build_fastmcp(cfg: HttpConfig | None = None, env: EnvConfig | None = None) -> FastMCP:
    """Create and configure a FastMCP instance with registered tools."""
    cfg = cfg or HttpConfig.from_env()
    env = env or load_env_config(use_dotenv=False)

    fastmcp = build_fastmcp_server(
        make_request_client_provider(env),
        json_response=cfg.json_response,
        stateless_http=cfg.stateless_http,
        streamable_http_path=cfg.path,
        host=cfg.host,
        port=cfg.port,
        transport_security=_transport_security(cfg),
    )

    log.info(
        "Built FastMCP (json_response=%s, stateless_http=%s, path=%s, host=%s, port=%s)",
        cfg.json_response,
        cfg.stateless_http,
        cfg.path,
        cfg.host,
        cfg.port,
    )
    return fastmcp


def _add_cors(app: Starlette, cfg: HttpConfig) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cfg.allowed_origins),
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=list(cfg.allowed_headers),
        expose_headers=list(cfg.exposed_headers),
    )


class Dispatcher:
    """
    ASGI wrapper routing ops endpoints and the REST facade away from the MCP app.
    Exposes router/state of the MCP app so lifespan_context keeps working.
    """

    def __init__(self, ops_app, rest_app, main_app):
        self.ops_app = ops_app
        self.rest_app = rest_app
        self.main_app = main_app
        self.router = main_app.router
        self.state = main_app.state

    async def __call__(self, scope, receive, send):
        path = scope.get("path", "")
        if scope.get("type") == "http":
            if is_ops_path(path):
                await self.ops_app(scope, receive, send)
                return
            if path == API_PREFIX or path.startswith(API_PREFIX + "/"):
                await self.rest_app(scope, receive, send)
                return
        await self.main_app(scope, receive, send)


def _build_sse_app(fastmcp: FastMCP, cfg: HttpConfig):
    if not cfg.enable_sse:

        async def sse_disabled(_request):
            return JSONResponse(
                {"error": "sse_disabled", "message": "SSE not enabled"},
                status_code=405,
            )

        return Starlette(routes=[Route("/{rest:path}", sse_disabled)])

    return fastmcp.sse_app(mount_path=SSE_MOUNT_PATH)


def build_http_app(cfg: HttpConfig | None = None, env: EnvConfig | None = None):
    """Return an ASGI app serving ops, the REST facade and MCP from one port."""
    cfg = cfg or HttpConfig.from_env()
    env = env or load_env_config(use_dotenv=False)

    fastmcp = build_fastmcp(cfg, env)
    main_app = fastmcp.streamable_http_app()
    main_app.mount(SSE_MOUNT_PATH, _build_sse_app(fastmcp, cfg), name="mcp-sse")
    # Added innermost first; runs CORS -> RequestId -> Credentials -> Message -> app
    main_app.add_middleware(MessageHandlingMiddleware, path=cfg.path)
    main_app.add_middleware(CredentialsMiddleware, env=env)
    main_app.add_middleware(RequestIdMiddleware)
    _add_cors(main_app, cfg)

    rest_app = build_rest_app(env)
    rest_app.add_middleware(RequestIdMiddleware, event="rest_request")
    _add_cors(rest_app, cfg)

    readiness_state = compute_readiness_state(env)
    main_app.state.readiness = readiness_state
    ops_app = build_ops_app(cfg, readiness_state)

    return Dispatcher(ops_app, rest_app, main_app)


__all__ = ["HttpConfig", "Dispatcher", "build_http_app", "build_fastmcp"]
