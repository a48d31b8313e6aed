from __future__ import annotations

from typing import Optional

from starlette.applications import Starlette
from starlette.routing import Mount

from freelo_mcp.core.config import EnvConfig, load_env_config

from .errors import EXCEPTION_HANDLERS
from .routes import all_routes

API_PREFIX = "/api/v1"


def build_rest_app(env: Optional[EnvConfig] = None) -> Starlette:
    """
    Starlette app serving the Freelo pass-through routes under /api/v1.
    - Credentials come from each request; ``env`` only supplies base URL and timeout
    - Upstream failures are mapped by the exception handlers in ``errors``
    """
    app = Starlette(
        routes=[Mount(API_PREFIX, routes=all_routes())],
        exception_handlers=EXCEPTION_HANDLERS,
    )
    app.state.env = env or load_env_config(use_dotenv=False)
    return app


__all__ = ["API_PREFIX", "build_rest_app"]
