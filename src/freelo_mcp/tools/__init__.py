"""MCP tools, one module per Freelo resource family.

Every public coroutine whose first parameter is ``client`` is registered as
a tool by ``freelo_mcp.core.registry``; its docstring becomes the tool
description.
"""
