from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .client import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    Credentials,
    FreeloClient,
)
from .errors import MissingCredentialsError


@dataclass(frozen=True)
class EnvConfig:
    email: str
    api_key: str
    user_agent: str
    base_url: str
    timeout_seconds: float

    @property
    def has_credentials(self) -> bool:
        return bool(self.email and self.api_key)

    def credentials(self) -> Credentials:
        if not self.has_credentials:
            raise MissingCredentialsError(
                "Missing FREELO_EMAIL or FREELO_API_KEY in environment."
            )
        return Credentials(
            email=self.email, api_key=self.api_key, user_agent=self.user_agent
        )


def load_env_config(*, use_dotenv: bool = True) -> EnvConfig:
    """Load Freelo credentials and client settings from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    timeout_raw = os.getenv("FREELO_TIMEOUT_S", "").strip()
    return EnvConfig(
        email=os.getenv("FREELO_EMAIL", "").strip(),
        api_key=os.getenv("FREELO_API_KEY", "").strip(),
        user_agent=os.getenv("FREELO_USER_AGENT", "").strip() or DEFAULT_USER_AGENT,
        base_url=os.getenv("FREELO_API_BASE_URL", "").strip() or DEFAULT_BASE_URL,
        timeout_seconds=float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT_SECONDS,
    )


def create_client_from_env(**kwargs) -> FreeloClient:
    """Create a FreeloClient from environment variables."""
    cfg = load_env_config()
    kwargs.setdefault("base_url", cfg.base_url)
    kwargs.setdefault("timeout_seconds", cfg.timeout_seconds)
    return FreeloClient(credentials=cfg.credentials(), **kwargs)


__all__ = ["EnvConfig", "load_env_config", "create_client_from_env"]
