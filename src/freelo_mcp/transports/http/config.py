from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Tuple


def _get_bool_env(name: str, default: bool) -> bool:
    """Parse a boolean environment variable with a safe default."""
    raw = os.getenv(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    if val in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if val in {"0", "false", "f", "no", "n", "off"}:
        return False
    return default


def _split_csv_env(name: str, default: str = "") -> List[str]:
    raw = os.getenv(name, default)
    return [part.strip() for part in raw.split(",") if part.strip()]


def _get_port_env(default: int) -> int:
    raw = os.getenv("FASTMCP_PORT") or os.getenv("PORT")
    if raw is None or raw.strip() == "":
        return default
    port = int(raw)
    if not 0 < port < 65536:
        raise ValueError("FASTMCP_PORT must be between 1 and 65535")
    return port


@dataclass(frozen=True)
class HttpConfig:
    """Configuration for the streamable HTTP transport runner."""

    host: str = "127.0.0.1"
    port: int = 3000
    path: str = "/mcp"
    json_response: bool = True
    stateless_http: bool = False
    enable_sse: bool = False
    allowed_origins: Tuple[str, ...] = ("*",)
    dns_rebinding_protection: bool = True
    exposed_headers: Tuple[str, ...] = ("Mcp-Session-Id", "X-Request-Id")
    allowed_headers: Tuple[str, ...] = (
        "Content-Type",
        "Accept",
        "Authorization",
        "Mcp-Session-Id",
        "MCP-Protocol-Version",
        "X-Request-Id",
        "User-Agent",
    )

    @classmethod
    def from_env(cls) -> "HttpConfig":
        path = os.getenv("FASTMCP_STREAMABLE_HTTP_PATH", cls.path).strip() or cls.path
        if not path.startswith("/"):
            raise ValueError("FASTMCP_STREAMABLE_HTTP_PATH must start with '/'")

        return cls(
            host=os.getenv("FASTMCP_HOST", cls.host),
            port=_get_port_env(cls.port),
            path=path,
            json_response=_get_bool_env("FASTMCP_JSON_RESPONSE", cls.json_response),
            stateless_http=_get_bool_env("FASTMCP_STATELESS_HTTP", cls.stateless_http),
            enable_sse=_get_bool_env("MCP_ENABLE_SSE", cls.enable_sse),
            allowed_origins=tuple(_split_csv_env("MCP_ALLOWED_ORIGINS", "*")),
            dns_rebinding_protection=_get_bool_env(
                "MCP_DNS_REBINDING_PROTECTION", cls.dns_rebinding_protection
            ),
        )


__all__ = ["HttpConfig"]
