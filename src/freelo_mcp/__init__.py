"""freelo_mcp package exports."""

from .core import (
    Credentials,
    FreeloClient,
    FreeloClientError,
    FreeloHTTPError,
    FreeloParseError,
    FreeloResponse,
    FreeloUnavailableError,
    InvalidInputError,
    discover_tool_modules,
    register_discovered_tools,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Client
    "Credentials",
    "FreeloClient",
    "FreeloResponse",
    # Exceptions
    "FreeloClientError",
    "FreeloHTTPError",
    "FreeloUnavailableError",
    "FreeloParseError",
    "InvalidInputError",
    # Registry
    "discover_tool_modules",
    "register_discovered_tools",
]
