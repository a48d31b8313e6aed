import logging
import mimetypes
import time
from dataclasses import dataclass, field
from typing import IO, Any, Dict, Mapping, Optional

import httpx

from .errors import (
    FreeloClientError,
    FreeloHTTPError,
    FreeloParseError,
    FreeloUnavailableError,
    MissingCredentialsError,
)
from .query import encode_query

DEFAULT_BASE_URL = "https://api.freelo.io/v1"
DEFAULT_USER_AGENT = "freelo-mcp/1.0.0"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class Credentials:
    email: str
    api_key: str
    user_agent: str = DEFAULT_USER_AGENT

    def __repr__(self) -> str:
        return f"Credentials(email={self.email!r}, user_agent={self.user_agent!r})"


@dataclass(frozen=True)
class FreeloResponse:
    status_code: int
    data: Any
    headers: Mapping[str, str] = field(default_factory=dict)


class FreeloClient:
    """
    Thin async HTTP client for the Freelo REST API.
    - Basic auth (email:api_key) and User-Agent on every call
    - Bracket-style query encoding for array and range filters
    - Returns upstream payloads unchanged; adapters own any reshaping
    """

    def __init__(
        self,
        *,
        credentials: Credentials,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        base_url = (base_url or "").rstrip("/")
        if not base_url:
            raise ValueError("base_url must be provided.")
        if not credentials.email or not credentials.api_key:
            raise MissingCredentialsError("Freelo email and API key must be provided.")

        self.base_url = base_url
        self.credentials = credentials
        self.timeout_seconds = timeout_seconds
        self.log = logger or logging.getLogger("freelo_mcp.client")

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            base_url=self.base_url,
            auth=httpx.BasicAuth(credentials.email, credentials.api_key),
            headers={
                "Accept": "application/json",
                "User-Agent": credentials.user_agent or DEFAULT_USER_AGENT,
            },
            timeout=timeout_seconds,
        )

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "FreeloClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
        tool: Optional[str] = None,
    ) -> FreeloResponse:
        """
        Issue one upstream call.
        - Raises FreeloHTTPError on non-2xx responses (status and body preserved)
        - Raises FreeloUnavailableError when no response arrives
        - Raises FreeloParseError if a non-empty body isn't valid JSON
        """
        method = method.upper()
        start = time.perf_counter()
        try:
            resp = await self.http.request(
                method, path, params=encode_query(params), json=json
            )
        except httpx.TransportError as exc:
            raise FreeloUnavailableError(
                f"No response from Freelo for {method} {path}: {exc}"
            ) from exc
        except httpx.HTTPError as exc:
            raise FreeloClientError(
                f"HTTPX error calling {method} {path}: {exc}"
            ) from exc

        self._log_call("op.request", resp, method=method, start=start, tool=tool)

        if resp.status_code < 200 or resp.status_code >= 300:
            raise self._to_http_error(resp, method=method)

        return FreeloResponse(
            status_code=resp.status_code,
            data=self._safe_json(resp),
            headers=dict(resp.headers),
        )

    async def get(
        self,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        tool: Optional[str] = None,
    ) -> FreeloResponse:
        return await self.request("GET", path, params=params, tool=tool)

    async def post(
        self,
        path: str,
        *,
        json: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        tool: Optional[str] = None,
    ) -> FreeloResponse:
        return await self.request("POST", path, params=params, json=json, tool=tool)

    async def delete(
        self,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        tool: Optional[str] = None,
    ) -> FreeloResponse:
        return await self.request("DELETE", path, params=params, tool=tool)

    async def upload(
        self,
        path: str,
        *,
        file: IO[bytes],
        filename: str,
        content_type: Optional[str] = None,
        field_name: str = "file",
        tool: Optional[str] = None,
    ) -> FreeloResponse:
        """
        Upload a file using multipart/form-data.
        - Streams from the given file object.
        - Returns parsed JSON if present; None on empty body.
        """
        ctype = (
            content_type
            or mimetypes.guess_type(filename)[0]
            or "application/octet-stream"
        )

        start = time.perf_counter()
        try:
            resp = await self.http.post(
                path, files={field_name: (filename, file, ctype)}
            )
        except httpx.TransportError as exc:
            raise FreeloUnavailableError(
                f"No response from Freelo for POST {path}: {exc}"
            ) from exc
        except httpx.HTTPError as exc:
            raise FreeloClientError(f"HTTPX error calling POST {path}: {exc}") from exc

        self._log_call("op.upload", resp, method="POST", start=start, tool=tool)

        if resp.status_code < 200 or resp.status_code >= 300:
            raise self._to_http_error(resp, method="POST")

        return FreeloResponse(
            status_code=resp.status_code,
            data=self._safe_json(resp),
            headers=dict(resp.headers),
        )

    async def stream(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        tool: Optional[str] = None,
    ) -> httpx.Response:
        """
        Open a streamed upstream response. The caller must close it
        (``await resp.aclose()``) once the body has been consumed.
        """
        method = method.upper()
        start = time.perf_counter()
        request = self.http.build_request(method, path, params=encode_query(params))
        try:
            resp = await self.http.send(request, stream=True)
        except httpx.TransportError as exc:
            raise FreeloUnavailableError(
                f"No response from Freelo for {method} {path}: {exc}"
            ) from exc
        except httpx.HTTPError as exc:
            raise FreeloClientError(
                f"HTTPX error calling {method} {path}: {exc}"
            ) from exc

        self._log_call("op.stream", resp, method=method, start=start, tool=tool)

        if resp.status_code < 200 or resp.status_code >= 300:
            try:
                await resp.aread()
            finally:
                await resp.aclose()
            raise self._to_http_error(resp, method=method)
        return resp

    def _log_call(
        self,
        event: str,
        resp: httpx.Response,
        *,
        method: str,
        start: float,
        tool: Optional[str],
    ) -> None:
        self.log.debug(
            event,
            extra={
                "tool": tool,
                "method": method,
                "path": resp.request.url.path,
                "status": resp.status_code,
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )

    def _safe_json(self, resp: httpx.Response) -> Any:
        # 204 No Content and friends
        if not resp.content:
            return None

        try:
            return resp.json()
        except ValueError as exc:
            snippet = (resp.text or "")[:500]
            raise FreeloParseError(
                f"Expected JSON from {resp.request.method} "
                f"{resp.request.url}, got non-JSON body snippet: "
                f"{snippet!r}"
            ) from exc

    def _to_http_error(self, resp: httpx.Response, *, method: str) -> FreeloHTTPError:
        response_json: Any = None
        response_text: Optional[str] = None
        message = resp.reason_phrase or "request failed"

        try:
            response_json = resp.json()
        except ValueError:
            response_text = resp.text

        if isinstance(response_json, dict):
            errors = response_json.get("errors")
            if isinstance(errors, list) and errors:
                message = "; ".join(str(e) for e in errors)
            else:
                message = str(
                    response_json.get("message") or response_json.get("error") or message
                )

        return FreeloHTTPError(
            status_code=resp.status_code,
            method=method,
            url=str(resp.request.url),
            message=message,
            response_json=response_json,
            response_text=response_text,
        )


def headers_subset(headers: Mapping[str, str], *names: str) -> Dict[str, str]:
    """Pick response headers worth relaying (case-insensitive)."""
    lowered = {k.lower(): v for k, v in headers.items()}
    return {name: lowered[name.lower()] for name in names if name.lower() in lowered}


__all__ = [
    "Credentials",
    "FreeloClient",
    "FreeloResponse",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "DEFAULT_TIMEOUT_SECONDS",
    "headers_subset",
]
