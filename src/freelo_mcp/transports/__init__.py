"""MCP transport bindings (stdio and streamable HTTP)."""
