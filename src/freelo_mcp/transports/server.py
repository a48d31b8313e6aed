from __future__ import annotations

import logging
from typing import Any

from mcp import types
from mcp.server.fastmcp import FastMCP
from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS, ErrorData
from pydantic import ValidationError

from freelo_mcp.core.registry import ClientProvider, register_discovered_tools

log = logging.getLogger(__name__)

SERVER_NAME = "freelo-mcp"
INSTRUCTIONS = (
    "Tools for the Freelo project-management API: projects, tasklists, tasks, "
    "comments, files, time tracking, work reports, invoices and more. "
    "Results are Freelo's JSON payloads, passed through unchanged."
)


def _invalid_params(message: str) -> McpError:
    return McpError(ErrorData(code=INVALID_PARAMS, message=message))


def install_strict_tool_calls(fastmcp: FastMCP) -> None:
    """
    Reject unknown tools and malformed arguments as JSON-RPC InvalidParams.
    Valid calls go to FastMCP's own handler; failures inside a tool still
    come back as ``isError`` results.
    """
    server = fastmcp._mcp_server
    delegate = server.request_handlers[types.CallToolRequest]

    async def strict_call_tool(req: types.CallToolRequest):
        name = req.params.name
        tool = fastmcp._tool_manager.get_tool(name)
        if tool is None:
            raise _invalid_params(f"Unknown tool: {name}")

        meta = tool.fn_metadata
        try:
            meta.arg_model.model_validate(meta.pre_parse_json(req.params.arguments or {}))
        except ValidationError as exc:
            raise _invalid_params(f"Invalid arguments for tool {name}: {exc}") from exc

        return await delegate(req)

    server.request_handlers[types.CallToolRequest] = strict_call_tool


def build_fastmcp_server(client_provider: ClientProvider, **settings: Any) -> FastMCP:
    """Create the FastMCP server shared by both transports and register every tool."""
    fastmcp = FastMCP(SERVER_NAME, instructions=INSTRUCTIONS, **settings)
    names = register_discovered_tools(fastmcp, client_provider)
    install_strict_tool_calls(fastmcp)
    log.info("Built FastMCP server %s with %d tools", SERVER_NAME, len(names))
    return fastmcp


__all__ = ["build_fastmcp_server", "install_strict_tool_calls", "SERVER_NAME"]
