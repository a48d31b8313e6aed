from __future__ import annotations

import asyncio
import logging
import os
import sys

from dotenv import load_dotenv

from freelo_mcp.core.context import seed_from_env
from freelo_mcp.core.errors import MissingCredentialsError
from freelo_mcp.core.logging import setup_logging
from freelo_mcp.transports.server import build_fastmcp_server

log = logging.getLogger(__name__)


async def main() -> None:
    load_dotenv()
    setup_logging(os.getenv("LOG_LEVEL", "INFO"))
    # One credential set per stdio session, seeded from env
    ctx = seed_from_env(use_dotenv=False)

    app = build_fastmcp_server(ctx.client)
    await app.run_stdio_async()


def run() -> None:
    try:
        asyncio.run(main())
    except MissingCredentialsError as exc:
        log.error("Cannot start stdio transport: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    run()
