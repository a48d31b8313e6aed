"""Core domain surface for freelo-mcp (transport-agnostic)."""

from .client import (
    DEFAULT_BASE_URL,
    DEFAULT_USER_AGENT,
    Credentials,
    FreeloClient,
    FreeloResponse,
)
from .config import EnvConfig, create_client_from_env, load_env_config
from .context import (
    RequestContext,
    ensure_request_id,
    parse_basic_authorization,
    seed_from_env,
    seed_from_headers,
)
from .errors import (
    FreeloClientError,
    FreeloHTTPError,
    FreeloParseError,
    FreeloUnavailableError,
    InvalidCredentialsError,
    InvalidInputError,
    MissingCredentialsError,
    ToolExecutionError,
)
from .query import decode_query, encode_query
from .registry import (
    discover_tool_modules,
    iter_tool_functions,
    register_discovered_tools,
)

__all__ = [
    # Client
    "Credentials",
    "FreeloClient",
    "FreeloResponse",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    # Exceptions
    "FreeloClientError",
    "FreeloHTTPError",
    "FreeloUnavailableError",
    "FreeloParseError",
    "InvalidInputError",
    "MissingCredentialsError",
    "InvalidCredentialsError",
    "ToolExecutionError",
    # Query encoding
    "encode_query",
    "decode_query",
    # Config helpers
    "EnvConfig",
    "create_client_from_env",
    "load_env_config",
    # Registry helpers
    "discover_tool_modules",
    "iter_tool_functions",
    "register_discovered_tools",
    # Context
    "RequestContext",
    "ensure_request_id",
    "parse_basic_authorization",
    "seed_from_env",
    "seed_from_headers",
]
