import inspect
import json
from types import ModuleType

import pytest
from mcp.server.fastmcp import FastMCP
from freelo_mcp.core.client import Credentials, FreeloClient
from freelo_mcp.core.errors import ToolExecutionError
from freelo_mcp.core.registry import (
    discover_tool_modules,
    register_discovered_tools,
)


def _make_module(name: str, code: str) -> ModuleType:
    module = ModuleType(name)
    exec(code, module.__dict__)
    return module


def _recording_app():
    app = FastMCP("test")
    registered = []

    def record_tool(name):
        def decorator(fn):
            registered.append((name, fn))
            return fn

        return decorator

    app.tool = record_tool  # type: ignore[attr-defined]
    return app, registered


def _client() -> FreeloClient:
    return FreeloClient(credentials=Credentials(email="a@b.c", api_key="k"))


@pytest.mark.asyncio
async def test_register_discovered_tools_registers_valid_tools_only():
    code = """
async def tool_fn(client, *, foo: int = 1):
    return (client.credentials.email, foo)

async def _private(client):
    return None

async def wrong_first(arg1, client):
    return None

def sync_func(client):
    return None
"""
    mod = _make_module("fake_mod", code)
    app, registered = _recording_app()

    client = _client()
    register_discovered_tools(app, client, modules=[mod])

    assert [n for n, _ in registered] == ["tool_fn"]

    sig = inspect.signature(registered[0][1])
    assert "client" not in sig.parameters

    result = await registered[0][1](foo=5)
    assert result == ("a@b.c", 5)
    # shared instances stay open for the next call
    assert not client.http.is_closed
    await client.aclose()


@pytest.mark.asyncio
async def test_provider_clients_are_closed_after_each_call():
    mod = _make_module("per_call", "async def ping(client): return client")
    app, registered = _recording_app()
    created = []

    def provider():
        created.append(_client())
        return created[-1]

    register_discovered_tools(app, provider, modules=[mod])
    first = await registered[0][1]()
    second = await registered[0][1]()

    assert first is not second
    assert all(c.http.is_closed for c in created)


@pytest.mark.asyncio
async def test_freelo_errors_carry_upstream_body():
    code = """
from freelo_mcp.core.errors import FreeloHTTPError, FreeloUnavailableError

async def failing(client, *, kind: str):
    if kind == "http":
        raise FreeloHTTPError(
            status_code=422,
            method="POST",
            url="/v1/projects",
            message="Invalid currency",
            response_json={"errors": ["Invalid currency"]},
        )
    raise FreeloUnavailableError("timed out")
"""
    mod = _make_module("failing_mod", code)
    app, registered = _recording_app()
    register_discovered_tools(app, _client(), modules=[mod])
    tool = registered[0][1]

    with pytest.raises(ToolExecutionError) as http_exc:
        await tool(kind="http")
    body = json.loads(str(http_exc.value))
    assert body == {
        "error": "Tool execution failed",
        "message": "422 POST /v1/projects: Invalid currency",
        "details": {"errors": ["Invalid currency"]},
    }
    assert http_exc.value.status_code == 422

    with pytest.raises(ToolExecutionError) as down_exc:
        await tool(kind="down")
    assert json.loads(str(down_exc.value))["details"] is None


def test_register_discovered_tools_duplicate_names_raise():
    mod1 = _make_module("mod1", "async def tool_fn(client): return None")
    mod2 = _make_module("mod2", "async def tool_fn(client): return None")

    with pytest.raises(ValueError):
        register_discovered_tools(FastMCP("test"), _client(), modules=[mod1, mod2])


def test_real_tool_catalogue_registers_without_duplicates():
    app = FastMCP("catalogue")
    names = register_discovered_tools(app, _client)

    assert len(names) == len(set(names))
    for expected in (
        "get_projects",
        "create_task",
        "get_all_states",
        "search_elasticsearch",
        "download_invoice_reports",
        "get_tasks_by_filter_name",
    ):
        assert expected in names


def test_discover_tool_modules_skips_import_failures(monkeypatch, caplog):
    import importlib
    import pkgutil

    class Info:
        def __init__(self, name):
            self.name = name

    def fake_iter_modules(path, prefix):
        return [Info(prefix + "good"), Info(prefix + "bad")]

    good_mod = _make_module(
        "freelo_mcp.tools.good", "async def tool_fn(client): return None"
    )
    real_import_module = importlib.import_module

    def fake_import_module(name, *args, **kwargs):
        if name == "freelo_mcp.tools.bad":
            raise ImportError("boom")
        if name == "freelo_mcp.tools.good":
            return good_mod
        return real_import_module(name, *args, **kwargs)

    monkeypatch.setattr(pkgutil, "iter_modules", fake_iter_modules)
    monkeypatch.setattr(importlib, "import_module", fake_import_module)

    with caplog.at_level("ERROR"):
        modules = discover_tool_modules()

    assert [m.__name__ for m in modules] == ["freelo_mcp.tools.good"]
    assert any("Failed importing tool module" in rec.message for rec in caplog.records)
