import logging
import sys

import httpx
import pytest
import respx
from freelo_mcp.core.client import Credentials, FreeloClient
from freelo_mcp.core.errors import FreeloHTTPError, FreeloUnavailableError
from freelo_mcp.core.logging import LogfmtFormatter, setup_logging
from freelo_mcp.core.observability import log_event, log_upstream_error
from freelo_mcp.transports.http.request_id_middleware import RequestIdMiddleware
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.responses import JSONResponse
from starlette.routing import Route
from starlette.testclient import TestClient

BASE = "https://api.freelo.io/v1"


def _app(handler, **kwargs):
    return Starlette(
        routes=[Route("/mcp", handler, methods=["POST"])],
        middleware=[Middleware(RequestIdMiddleware, **kwargs)],
    )


def test_request_id_logged_success(caplog):
    async def handler(request):
        return JSONResponse({"rid": request.state.request_id})

    app = _app(handler)
    with (
        TestClient(app) as client,
        caplog.at_level(logging.INFO, logger="freelo_mcp.observability"),
    ):
        resp = client.post("/mcp", json={"hello": "world"})

    assert resp.status_code == 200
    assert resp.json()["rid"] == resp.headers["X-Request-Id"]
    assert "X-Request-Duration-Ms" in resp.headers
    record = next(r for r in caplog.records if r.getMessage() == "http_request")
    assert record.request_id == resp.headers["X-Request-Id"]
    assert record.status == 200
    assert record.method == "POST"
    assert record.path == "/mcp"
    assert record.duration_ms >= 0


def test_incoming_correlation_id_is_reused(caplog):
    async def handler(request):
        return JSONResponse({})

    app = _app(handler, event="rest_request")
    with (
        TestClient(app) as client,
        caplog.at_level(logging.INFO, logger="freelo_mcp.observability"),
    ):
        resp = client.post("/mcp", headers={"X-Correlation-Id": "corr-1"})

    assert resp.headers["X-Request-Id"] == "corr-1"
    record = next(r for r in caplog.records if r.getMessage() == "rest_request")
    assert record.request_id == "corr-1"


def test_request_id_logged_on_exception(caplog):
    async def handler(request):
        raise ValueError("boom")

    app = _app(handler)
    with (
        TestClient(app, raise_server_exceptions=False) as client,
        caplog.at_level(logging.INFO, logger="freelo_mcp.observability"),
    ):
        resp = client.post("/mcp", json={})

    assert resp.status_code == 500
    record = next(r for r in caplog.records if r.getMessage() == "http_request")
    assert record.status == "exception"
    assert record.request_id
    assert record.path == "/mcp"


def test_log_event_drops_reserved_keys(caplog):
    with caplog.at_level(logging.INFO, logger="freelo_mcp.observability"):
        log_event("custom", name="clobber", status=201, tool="get_projects")

    record = next(r for r in caplog.records if r.getMessage() == "custom")
    assert record.name == "freelo_mcp.observability"
    assert record.status == 201
    assert record.tool == "get_projects"


def test_logfmt_formatter_renders_extras():
    record = logging.LogRecord(
        "freelo_mcp.rest", logging.WARNING, __file__, 1, "upstream_error", None, None
    )
    record.status = 404
    record.path = "/v1/task/1"
    record.tool = "needs quoting"

    line = LogfmtFormatter().format(record)

    assert line.startswith("level=warning logger=freelo_mcp.rest event=upstream_error")
    assert "status=404" in line
    assert "path=/v1/task/1" in line
    assert 'tool="needs quoting"' in line


def _client() -> FreeloClient:
    return FreeloClient(credentials=Credentials(email="a@b.c", api_key="k"))


@pytest.mark.asyncio
@respx.mock
async def test_client_logs_each_call(caplog):
    caplog.set_level(logging.DEBUG, logger="freelo_mcp.client")
    route = respx.get(f"{BASE}/projects").mock(
        return_value=httpx.Response(200, json=[])
    )
    async with _client() as client:
        await client.get("/projects", tool="get_projects")

    assert route.called
    record = next(r for r in caplog.records if r.getMessage() == "op.request")
    assert record.tool == "get_projects"
    assert record.method == "GET"
    assert record.status == 200
    assert record.path == "/v1/projects"
    assert record.duration_ms >= 0


@pytest.mark.asyncio
@respx.mock
async def test_client_logs_upstream_errors_before_raising(caplog):
    caplog.set_level(logging.DEBUG, logger="freelo_mcp.client")
    respx.get(f"{BASE}/task/9").mock(return_value=httpx.Response(404, json={}))

    async with _client() as client:
        with pytest.raises(FreeloHTTPError):
            await client.get("/task/9", tool="get_task")

    record = next(r for r in caplog.records if r.getMessage() == "op.request")
    assert record.status == 404


@pytest.mark.asyncio
@respx.mock
async def test_client_unavailable_is_not_logged_as_call(caplog):
    caplog.set_level(logging.DEBUG, logger="freelo_mcp.client")
    respx.get(f"{BASE}/users").mock(side_effect=httpx.ConnectTimeout("boom"))

    async with _client() as client:
        with pytest.raises(FreeloUnavailableError):
            await client.get("/users", tool="get_users")

    assert not [r for r in caplog.records if r.getMessage() == "op.request"]


def test_setup_logging_installs_single_stderr_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging("debug")
        setup_logging("debug")

        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stderr
        assert isinstance(root.handlers[0].formatter, LogfmtFormatter)
        assert root.level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)


def test_log_upstream_error_is_a_warning(caplog):
    with caplog.at_level(logging.INFO, logger="freelo_mcp.observability"):
        log_upstream_error(404, method="GET", path="/api/v1/task/9")

    record = next(r for r in caplog.records if r.getMessage() == "upstream_error")
    assert record.levelno == logging.WARNING
    assert record.upstream_status == 404
    assert record.path == "/api/v1/task/9"
