import base64
import uuid

import pytest
from freelo_mcp.core.client import DEFAULT_USER_AGENT
from freelo_mcp.core.config import (
    EnvConfig,
    create_client_from_env,
    load_env_config,
)
from freelo_mcp.core.context import (
    parse_basic_authorization,
    seed_from_env,
    seed_from_headers,
)
from freelo_mcp.core.errors import InvalidCredentialsError, MissingCredentialsError


def _basic(raw: str) -> str:
    return "Basic " + base64.b64encode(raw.encode()).decode()


def _env(email: str = "", api_key: str = "") -> EnvConfig:
    return EnvConfig(
        email=email,
        api_key=api_key,
        user_agent="env-agent/1.0",
        base_url="https://freelo.test/v1",
        timeout_seconds=5.0,
    )


def test_parse_basic_authorization_splits_on_first_colon():
    assert parse_basic_authorization(_basic("me@x.io:key:with:colons")) == (
        "me@x.io",
        "key:with:colons",
    )


@pytest.mark.parametrize("header", [None, "", "Bearer abc"])
def test_parse_basic_authorization_missing(header):
    with pytest.raises(MissingCredentialsError):
        parse_basic_authorization(header)


@pytest.mark.parametrize(
    "header",
    ["Basic !!!notbase64", _basic("no-colon"), _basic(":key"), _basic("me@x.io:")],
)
def test_parse_basic_authorization_malformed(header):
    with pytest.raises(InvalidCredentialsError):
        parse_basic_authorization(header)


def test_seed_from_env_missing(monkeypatch):
    monkeypatch.delenv("FREELO_EMAIL", raising=False)
    monkeypatch.delenv("FREELO_API_KEY", raising=False)
    with pytest.raises(MissingCredentialsError):
        seed_from_env()


def test_seed_from_env_reads_settings(monkeypatch):
    monkeypatch.setenv("FREELO_EMAIL", "env@x.io")
    monkeypatch.setenv("FREELO_API_KEY", "env-key")
    monkeypatch.setenv("FREELO_API_BASE_URL", "https://freelo.test/v1")
    monkeypatch.setenv("FREELO_TIMEOUT_S", "2.5")
    monkeypatch.delenv("FREELO_USER_AGENT", raising=False)

    ctx = seed_from_env()

    assert ctx.credentials.email == "env@x.io"
    assert ctx.credentials.user_agent == DEFAULT_USER_AGENT
    assert ctx.base_url == "https://freelo.test/v1"
    assert ctx.timeout_seconds == 2.5
    uuid.UUID(hex=ctx.request_id)


def test_load_env_config_defaults(monkeypatch):
    for name in ("FREELO_API_BASE_URL", "FREELO_TIMEOUT_S", "FREELO_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)

    cfg = load_env_config(use_dotenv=False)

    assert cfg.base_url == "https://api.freelo.io/v1"
    assert cfg.timeout_seconds == 10.0


def test_seed_from_headers_prefers_authorization():
    ctx = seed_from_headers(
        {
            "authorization": _basic("hdr@x.io:hdr-key"),
            "user-agent": "my-app/2.0",
            "x-request-id": "rid-1",
        },
        env=_env("env@x.io", "env-key"),
    )

    assert ctx.credentials.email == "hdr@x.io"
    assert ctx.credentials.api_key == "hdr-key"
    assert ctx.credentials.user_agent == "my-app/2.0"
    assert ctx.request_id == "rid-1"
    assert ctx.base_url == "https://freelo.test/v1"


def test_seed_from_headers_env_fallback():
    ctx = seed_from_headers({}, env=_env("env@x.io", "env-key"))

    assert ctx.credentials.email == "env@x.io"
    assert ctx.credentials.user_agent == "env-agent/1.0"


def test_seed_from_headers_without_fallback():
    with pytest.raises(MissingCredentialsError):
        seed_from_headers(
            {}, env=_env("env@x.io", "env-key"), allow_env_fallback=False
        )


def test_malformed_header_never_falls_back_to_env():
    with pytest.raises(InvalidCredentialsError):
        seed_from_headers(
            {"authorization": "Basic %%%"}, env=_env("env@x.io", "env-key")
        )


@pytest.mark.asyncio
async def test_context_builds_configured_client():
    ctx = seed_from_headers(
        {"authorization": _basic("hdr@x.io:hdr-key")}, env=_env()
    )
    async with ctx.client() as client:
        assert client.base_url == "https://freelo.test/v1"
        assert client.timeout_seconds == 5.0
        assert client.http.headers["User-Agent"] == "env-agent/1.0"


@pytest.mark.asyncio
async def test_create_client_from_env(monkeypatch):
    monkeypatch.setenv("FREELO_EMAIL", "env@x.io")
    monkeypatch.setenv("FREELO_API_KEY", "env-key")
    monkeypatch.setenv("FREELO_API_BASE_URL", "https://freelo.test/v1/")

    async with create_client_from_env() as client:
        assert client.base_url == "https://freelo.test/v1"
        assert client.credentials.email == "env@x.io"
