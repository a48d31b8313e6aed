from __future__ import annotations

import asyncio
import logging
import os
import sys

import uvicorn
from dotenv import load_dotenv

from freelo_mcp.core.logging import setup_logging

from .app import build_http_app
from .config import HttpConfig

log = logging.getLogger(__name__)


async def main() -> None:
    load_dotenv()
    setup_logging(os.getenv("LOG_LEVEL", "INFO"))
    cfg = HttpConfig.from_env()
    app = build_http_app(cfg)

    server = uvicorn.Server(
        uvicorn.Config(app, host=cfg.host, port=cfg.port, log_config=None)
    )
    log.info("Serving MCP on http://%s:%s%s", cfg.host, cfg.port, cfg.path)
    await server.serve()
    if not server.started:
        raise SystemExit(1)


def run() -> None:
    try:
        asyncio.run(main())
    except (OSError, ValueError) as exc:
        log.error("HTTP transport failed to start: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    run()
