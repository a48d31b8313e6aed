from __future__ import annotations

from typing import Dict

from mcp.types import LATEST_PROTOCOL_VERSION
from starlette.applications import Starlette
from starlette.responses import JSONResponse

from freelo_mcp import __version__
from freelo_mcp.core.config import EnvConfig, load_env_config
from freelo_mcp.rest import API_PREFIX

from .config import HttpConfig

OPS_PATHS = {"/health", "/healthz", "/readyz"}
NO_STORE = {"Cache-Control": "no-store"}


def is_ops_path(path: str | None) -> bool:
    return bool(path) and path in OPS_PATHS


def compute_readiness_state(env: EnvConfig | None = None) -> Dict[str, bool]:
    cfg = env or load_env_config(use_dotenv=False)
    return {
        "config_loaded": True,
        "default_base_url_present": bool(cfg.base_url),
        "default_credentials_present": cfg.has_credentials,
    }


def build_readiness_status(readiness_state: Dict[str, bool]) -> Dict[str, object]:
    failed = [k for k, v in readiness_state.items() if not v]
    status = "ok" if not failed else "fail"
    return {
        "status": status,
        "checks": readiness_state,
        "failed": failed,
    }


def build_health_payload(cfg: HttpConfig) -> Dict[str, object]:
    endpoints = {"mcp": cfg.path, "rest": API_PREFIX, "health": "/health"}
    if cfg.enable_sse:
        endpoints["sse"] = "/mcp-sse"
    return {
        "status": "ok",
        "service": "freelo-mcp",
        "version": __version__,
        "transport": "http",
        "endpoints": endpoints,
        "features": {
            "sessionManagement": not cfg.stateless_http,
            "multiClient": True,
            "rest": True,
            "sse": cfg.enable_sse,
            "mcpProtocol": LATEST_PROTOCOL_VERSION,
        },
    }


def build_ops_app(cfg: HttpConfig, readiness_state: Dict[str, bool]) -> Starlette:
    async def health(_request):
        return JSONResponse(build_health_payload(cfg), headers=NO_STORE)

    async def healthz(_request):
        return JSONResponse({"status": "ok"}, headers=NO_STORE)

    async def readyz(_request):
        payload = build_readiness_status(readiness_state)
        status_code = 200 if payload["status"] == "ok" else 503
        return JSONResponse(payload, status_code=status_code, headers=NO_STORE)

    ops_app = Starlette()
    ops_app.add_route("/health", health, methods=["GET"])
    ops_app.add_route("/healthz", healthz, methods=["GET"])
    ops_app.add_route("/readyz", readyz, methods=["GET"])
    return ops_app


__all__ = [
    "OPS_PATHS",
    "is_ops_path",
    "compute_readiness_state",
    "build_readiness_status",
    "build_health_payload",
    "build_ops_app",
]
