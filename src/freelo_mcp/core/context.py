"""Per-request credential context.

Credentials travel with each request (REST call or MCP tool call) and are
never cached between requests. Stdio sessions seed a single context from
the environment.
"""

from __future__ import annotations

import base64
import binascii
import uuid
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .client import DEFAULT_USER_AGENT, Credentials, FreeloClient
from .config import EnvConfig, load_env_config
from .errors import InvalidCredentialsError, MissingCredentialsError

AUTHORIZATION_HEADER = "authorization"
REQUEST_ID_HEADER = "x-request-id"
USER_AGENT_HEADER = "user-agent"


@dataclass(frozen=True)
class RequestContext:
    credentials: Credentials
    base_url: str
    request_id: str
    timeout_seconds: float = 10.0

    def client(self) -> FreeloClient:
        return FreeloClient(
            credentials=self.credentials,
            base_url=self.base_url,
            timeout_seconds=self.timeout_seconds,
        )


def ensure_request_id(candidate: Optional[str] = None) -> str:
    return candidate or uuid.uuid4().hex


def parse_basic_authorization(value: Optional[str]) -> Tuple[str, str]:
    """Decode ``Basic base64(email:api_key)`` into (email, api_key)."""
    if not value or not value.lower().startswith("basic "):
        raise MissingCredentialsError(
            "Authentication required. Use HTTP Basic Authentication."
        )
    token = value[6:].strip()
    try:
        decoded = base64.b64decode(token, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise InvalidCredentialsError("Invalid credentials format") from exc

    email, sep, api_key = decoded.partition(":")
    if not sep or not email or not api_key:
        raise InvalidCredentialsError("Invalid credentials format")
    return email, api_key


def seed_from_env(*, use_dotenv: bool = False) -> RequestContext:
    cfg = load_env_config(use_dotenv=use_dotenv)
    return RequestContext(
        credentials=cfg.credentials(),
        base_url=cfg.base_url,
        request_id=ensure_request_id(None),
        timeout_seconds=cfg.timeout_seconds,
    )


def seed_from_headers(
    headers: Mapping[str, str],
    *,
    env: Optional[EnvConfig] = None,
    allow_env_fallback: bool = True,
) -> RequestContext:
    """
    Build a context from HTTP headers.
    - Authorization (Basic) wins; env credentials fill in when it is absent
    - A malformed Authorization header is never replaced by env credentials
    - User-Agent header overrides the configured one
    """
    cfg = env or load_env_config(use_dotenv=False)
    auth_header = headers.get(AUTHORIZATION_HEADER)

    if auth_header:
        email, api_key = parse_basic_authorization(auth_header)
    elif allow_env_fallback and cfg.has_credentials:
        email, api_key = cfg.email, cfg.api_key
    else:
        raise MissingCredentialsError(
            "Authentication required. Use HTTP Basic Authentication."
        )

    user_agent = headers.get(USER_AGENT_HEADER) or cfg.user_agent or DEFAULT_USER_AGENT
    return RequestContext(
        credentials=Credentials(email=email, api_key=api_key, user_agent=user_agent),
        base_url=cfg.base_url,
        request_id=ensure_request_id(headers.get(REQUEST_ID_HEADER)),
        timeout_seconds=cfg.timeout_seconds,
    )


__all__ = [
    "RequestContext",
    "ensure_request_id",
    "parse_basic_authorization",
    "seed_from_env",
    "seed_from_headers",
    "AUTHORIZATION_HEADER",
    "REQUEST_ID_HEADER",
    "USER_AGENT_HEADER",
]
