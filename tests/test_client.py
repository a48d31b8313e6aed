import base64
import io

import httpx
import pytest
import respx
from httpx import Response
from freelo_mcp.core.client import Credentials, FreeloClient
from freelo_mcp.core.errors import (
    FreeloHTTPError,
    FreeloParseError,
    FreeloUnavailableError,
    MissingCredentialsError,
)

BASE = "https://api.freelo.io/v1"


def _client(**kwargs) -> FreeloClient:
    creds = Credentials(email="user@example.com", api_key="secret", user_agent="tests/1.0")
    return FreeloClient(credentials=creds, **kwargs)


@pytest.mark.asyncio
async def test_get_request_success():
    async with respx.mock:
        route = respx.get(f"{BASE}/projects").mock(
            return_value=Response(200, json=[{"id": 1, "name": "Alpha"}])
        )

        async with _client() as client:
            resp = await client.get("/projects")

        assert resp.status_code == 200
        assert resp.data == [{"id": 1, "name": "Alpha"}]
        assert route.called


@pytest.mark.asyncio
async def test_auth_header_is_basic_email_and_key():
    async with respx.mock:
        route = respx.get(f"{BASE}/projects").mock(return_value=Response(200, json=[]))

        async with _client() as client:
            await client.get("/projects")

        sent = route.calls[0].request.headers
        expected = "Basic " + base64.b64encode(b"user@example.com:secret").decode()
        assert sent.get("Authorization") == expected
        assert sent.get("User-Agent") == "tests/1.0"
        assert sent.get("Accept") == "application/json"


@pytest.mark.asyncio
async def test_query_arrays_use_bracket_keys():
    async with respx.mock:
        route = respx.get(f"{BASE}/all-tasks").mock(return_value=Response(200, json={}))

        async with _client() as client:
            await client.get(
                "/all-tasks",
                params={
                    "projects_ids": [1, 2],
                    "due_date_range": {"date_from": "2024-01-01"},
                    "no_due_date": True,
                    "p": None,
                },
            )

        params = route.calls[0].request.url.params
        assert params.get_list("projects_ids[]") == ["1", "2"]
        assert params["due_date_range[date_from]"] == "2024-01-01"
        assert params["no_due_date"] == "true"
        assert "p" not in params


@pytest.mark.asyncio
async def test_404_raises_typed_error_with_body():
    async with respx.mock:
        respx.get(f"{BASE}/project/999").mock(
            return_value=Response(404, json={"errors": ["Project not found"]})
        )

        async with _client() as client:
            with pytest.raises(FreeloHTTPError) as exc:
                await client.get("/project/999")

    assert exc.value.status_code == 404
    assert exc.value.body == {"errors": ["Project not found"]}
    assert "Project not found" in str(exc.value)


@pytest.mark.asyncio
async def test_non_json_error_keeps_text_body():
    async with respx.mock:
        respx.post(f"{BASE}/projects").mock(return_value=Response(500, text="oops"))

        async with _client() as client:
            with pytest.raises(FreeloHTTPError) as exc:
                await client.post("/projects", json={"name": "x"})

    assert exc.value.status_code == 500
    assert exc.value.body == "oops"


@pytest.mark.asyncio
async def test_connect_error_raises_unavailable():
    async with respx.mock:
        respx.get(f"{BASE}/projects").mock(side_effect=httpx.ConnectError("boom"))

        async with _client(timeout_seconds=0.1) as client:
            with pytest.raises(FreeloUnavailableError):
                await client.get("/projects")


@pytest.mark.asyncio
async def test_empty_response_returns_none():
    async with respx.mock:
        respx.post(f"{BASE}/project/1/archive").mock(return_value=Response(204))

        async with _client() as client:
            resp = await client.post("/project/1/archive")

    assert resp.status_code == 204
    assert resp.data is None


@pytest.mark.asyncio
async def test_non_json_response_raises_parse_error():
    async with respx.mock:
        respx.get(f"{BASE}/projects").mock(
            return_value=Response(200, text="<html>Not JSON</html>")
        )

        async with _client() as client:
            with pytest.raises(FreeloParseError) as exc:
                await client.get("/projects")

    assert "Expected JSON" in str(exc.value)


@pytest.mark.asyncio
async def test_base_url_override():
    async with respx.mock:
        route = respx.get("http://mock.local/api/states").mock(
            return_value=Response(200, json={"states": []})
        )

        async with _client(base_url="http://mock.local/api/") as client:
            resp = await client.get("/states")

    assert route.called
    assert resp.data == {"states": []}


@pytest.mark.asyncio
async def test_upload_sends_multipart():
    async with respx.mock:
        route = respx.post(f"{BASE}/file/upload").mock(
            return_value=Response(200, json={"uuid": "abc"})
        )

        async with _client() as client:
            resp = await client.upload(
                "/file/upload", file=io.BytesIO(b"hello"), filename="hello.txt"
            )

    assert resp.data == {"uuid": "abc"}
    req = route.calls[0].request
    assert "multipart/form-data" in req.headers["Content-Type"]
    body = req.read()
    assert b'name="file"; filename="hello.txt"' in body
    assert b"hello" in body


@pytest.mark.asyncio
async def test_stream_returns_open_response():
    async with respx.mock:
        respx.get(f"{BASE}/file/abc").mock(
            return_value=Response(
                200,
                content=b"binary-data",
                headers={"Content-Type": "application/pdf"},
            )
        )

        async with _client() as client:
            resp = await client.stream("GET", "/file/abc")
            try:
                chunks = [chunk async for chunk in resp.aiter_bytes()]
            finally:
                await resp.aclose()

    assert b"".join(chunks) == b"binary-data"
    assert resp.headers["content-type"] == "application/pdf"


@pytest.mark.asyncio
async def test_stream_error_status_raises():
    async with respx.mock:
        respx.get(f"{BASE}/file/missing").mock(
            return_value=Response(404, json={"error": "File not found"})
        )

        async with _client() as client:
            with pytest.raises(FreeloHTTPError) as exc:
                await client.stream("GET", "/file/missing")

    assert exc.value.status_code == 404
    assert exc.value.message == "File not found"


def test_missing_credentials_rejected():
    with pytest.raises(MissingCredentialsError):
        FreeloClient(credentials=Credentials(email="", api_key="x"))


def test_credentials_repr_hides_key():
    creds = Credentials(email="a@b.c", api_key="top-secret")
    assert "top-secret" not in repr(creds)
