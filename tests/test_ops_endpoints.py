from freelo_mcp import __version__
from freelo_mcp.transports.http.app import build_http_app
from freelo_mcp.transports.http.config import HttpConfig
from starlette.testclient import TestClient


def _clear_env(monkeypatch):
    for name in ("FREELO_EMAIL", "FREELO_API_KEY", "FREELO_API_BASE_URL"):
        monkeypatch.delenv(name, raising=False)


def _set_env(monkeypatch):
    monkeypatch.setenv("FREELO_EMAIL", "ops@example.com")
    monkeypatch.setenv("FREELO_API_KEY", "k")


def _client(cfg: HttpConfig | None = None) -> TestClient:
    return TestClient(build_http_app(cfg=cfg or HttpConfig()))


def test_healthz_ok_without_env(monkeypatch):
    _clear_env(monkeypatch)

    resp = _client().get("/healthz")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    assert resp.headers["Cache-Control"] == "no-store"


def test_health_describes_service(monkeypatch):
    _clear_env(monkeypatch)

    body = _client().get("/health").json()

    assert body["status"] == "ok"
    assert body["service"] == "freelo-mcp"
    assert body["version"] == __version__
    assert body["transport"] == "http"
    assert body["endpoints"] == {"mcp": "/mcp", "rest": "/api/v1", "health": "/health"}
    assert body["features"]["sessionManagement"] is True
    assert body["features"]["sse"] is False
    assert body["features"]["mcpProtocol"]


def test_health_lists_sse_endpoint_when_enabled(monkeypatch):
    _clear_env(monkeypatch)

    body = _client(HttpConfig(enable_sse=True, stateless_http=True)).get("/health").json()

    assert body["endpoints"]["sse"] == "/mcp-sse"
    assert body["features"]["sse"] is True
    assert body["features"]["sessionManagement"] is False


def test_readyz_ok_with_env_credentials(monkeypatch):
    _clear_env(monkeypatch)
    _set_env(monkeypatch)

    resp = _client().get("/readyz")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["failed"] == []
    assert body["checks"]["default_base_url_present"] is True
    assert body["checks"]["default_credentials_present"] is True


def test_readyz_missing_credentials(monkeypatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("FREELO_EMAIL", "ops@example.com")

    resp = _client().get("/readyz")
    assert resp.status_code == 503
    body = resp.json()
    assert body["status"] == "fail"
    assert body["failed"] == ["default_credentials_present"]


def test_ops_skip_credentials_and_message_checks(monkeypatch):
    _clear_env(monkeypatch)

    resp = _client().get("/healthz", headers={"Accept": "text/plain"})
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_sse_disabled_by_default(monkeypatch):
    _set_env(monkeypatch)

    resp = _client().get("/mcp-sse/sse")
    assert resp.status_code == 405
    assert resp.json()["error"] == "sse_disabled"
