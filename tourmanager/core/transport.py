"""HTTP transport for the Tour Manager API.

Wraps a single :class:`httpx.AsyncClient`: authentication, default headers,
query string encoding, request logging/metrics/tracing and the mapping of
error statuses onto :mod:`tourmanager.core.exceptions`.
"""

import platform
import time
from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any, Awaitable, Callable, List, Optional, Tuple, Union
from urllib.parse import unquote

import httpx

from .config import Settings
from .exceptions import MalformedResponseError, NotFoundError, ValidationError
from .observability import get_logger, metrics_collector, tracer

logger = get_logger(__name__)

USER_AGENT = f"RezKit/Tours (python/runtime:{platform.python_version()})"

XSRF_COOKIE = "XSRF-TOKEN"
XSRF_HEADER = "X-XSRF-TOKEN"

#: Async callable returning the API key to use for a request.
CredentialProvider = Callable[[httpx.Request], Awaitable[str]]
Credentials = Union[str, CredentialProvider]


class BearerAuth(httpx.Auth):
    """Bearer token auth from a static key or a per-request credential provider."""

    def __init__(self, credentials: Credentials):
        self.credentials = credentials

    async def async_auth_flow(self, request: httpx.Request):
        if isinstance(self.credentials, str):
            token = self.credentials
        else:
            token = await self.credentials(request)
        request.headers["Authorization"] = f"Bearer {token}"
        yield request


class SessionAuth(httpx.Auth):
    """Interactive session auth: echo the XSRF cookie back as a header."""

    def __init__(self, cookies: httpx.Cookies):
        self.cookies = cookies

    async def async_auth_flow(self, request: httpx.Request):
        token = self.cookies.get(XSRF_COOKIE)
        if token:
            request.headers[XSRF_HEADER] = unquote(token)
        yield request


QueryPairs = List[Tuple[str, str]]


def encode_query(params: Mapping, prefix: Optional[str] = None) -> QueryPairs:
    """
    Encode query parameters the way the API expects them.

    ``None`` values are omitted, booleans become ``1``/``0``, sequences are
    repeated as ``key[]`` and nested mappings become ``key[sub]``.

    Args:
        params: Parameter mapping
        prefix: Enclosing key for nested mappings

    Returns:
        Ordered list of (key, value) pairs
    """
    pairs: QueryPairs = []
    for key, value in params.items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        pairs.extend(_encode_value(name, value))
    return pairs


def _encode_value(name: str, value: Any) -> QueryPairs:
    if value is None:
        return []
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return [(name, "1" if value else "0")]
    if isinstance(value, (datetime, date)):
        return [(name, value.isoformat())]
    if isinstance(value, Mapping):
        return encode_query(value, name)
    if isinstance(value, (list, tuple, set, frozenset)):
        return [pair for item in value for pair in _encode_value(f"{name}[]", item)]
    return [(name, str(value))]


class Transport:
    """Authenticated JSON transport shared by every service of a client."""

    def __init__(
        self,
        config: Settings,
        credentials: Optional[Credentials] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **client_kwargs: Any,
    ):
        """
        Initialize the transport.

        Args:
            config: Client settings (base URL, timeout, default API key)
            credentials: API key or credential provider; overrides ``config.api_key``
            transport: Optional httpx transport (e.g. ``httpx.ASGITransport`` in tests)
            client_kwargs: Extra keyword arguments for :class:`httpx.AsyncClient`
        """
        if credentials is None:
            credentials = config.api_key

        headers = {"Accept": "application/json", "User-Agent": USER_AGENT}
        headers.update(client_kwargs.pop("headers", {}))

        self._client = httpx.AsyncClient(
            base_url=config.api_url,
            headers=headers,
            timeout=config.timeout,
            transport=transport,
            **client_kwargs,
        )

        if credentials:
            self._client.auth = BearerAuth(credentials)
        else:
            self._client.auth = SessionAuth(self._client.cookies)

    @property
    def http(self) -> httpx.AsyncClient:
        """The underlying httpx client."""
        return self._client

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping] = None,
        json: Any = None,
        expect_body: bool = True,
    ) -> Any:
        """
        Send a request and decode the JSON response.

        Args:
            method: HTTP method
            path: Path relative to the API base URL
            params: Query parameters, see :func:`encode_query`
            json: JSON request body
            expect_body: Whether an empty response body is a protocol error

        Returns:
            Decoded JSON body, or None for an allowed empty body

        Raises:
            ValidationError: On HTTP 422
            NotFoundError: On HTTP 404
            MalformedResponseError: If a required body is missing or not JSON
            httpx.HTTPStatusError: On any other failure status
            httpx.TransportError: On network failure
        """
        url = "/" + path.lstrip("/")
        query = encode_query(params) if params else None
        log = logger.with_context(method=method, path=url)

        with tracer.start_as_current_span(f"tourmanager {method}") as span:
            span.set_attribute("http.request.method", method)
            span.set_attribute("url.path", url)

            start = time.perf_counter()
            try:
                response = await self._client.request(method, url, params=query, json=json)
            except httpx.TransportError as e:
                log.error("Tour Manager request failed", error=str(e))
                raise
            duration = time.perf_counter() - start

            span.set_attribute("http.response.status_code", response.status_code)
            metrics_collector.record_request(method, url, response.status_code, duration)
            log.debug(
                "Tour Manager request completed",
                status_code=response.status_code,
                duration_ms=round(duration * 1000, 2),
            )

            self._raise_for_status(response, log)
            return self._decode(response, expect_body, log)

    async def get(self, path: str, params: Optional[Mapping] = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None, expect_body: bool = True) -> Any:
        return await self.request("POST", path, json=json, expect_body=expect_body)

    async def put(self, path: str, json: Any = None, expect_body: bool = True) -> Any:
        return await self.request("PUT", path, json=json, expect_body=expect_body)

    async def patch(self, path: str, json: Any = None) -> Any:
        return await self.request("PATCH", path, json=json)

    async def delete(
        self, path: str, params: Optional[Mapping] = None, expect_body: bool = False
    ) -> Any:
        return await self.request("DELETE", path, params=params, expect_body=expect_body)

    def _raise_for_status(self, response: httpx.Response, log) -> None:
        if response.is_success:
            return

        body = _json_or_none(response)

        if response.status_code == 422:
            error = ValidationError.from_body(body)
            log.warning("Tour Manager rejected request data", errors=error.errors)
            raise error

        if response.status_code == 404:
            message = body.get("message") if isinstance(body, dict) else None
            log.warning("Tour Manager resource not found")
            raise NotFoundError(message, uri=response.request.url.path)

        log.error("Tour Manager request returned an error status", status_code=response.status_code)
        response.raise_for_status()

    def _decode(self, response: httpx.Response, expect_body: bool, log) -> Any:
        if not response.content:
            if expect_body:
                log.error("Tour Manager returned an empty body")
                raise MalformedResponseError(
                    "Expected a JSON response body but the response was empty",
                    uri=response.request.url.path,
                )
            return None

        try:
            return response.json()
        except ValueError as e:
            log.error("Tour Manager returned a non-JSON body", error=str(e))
            raise MalformedResponseError(
                f"Response body is not valid JSON: {e}",
                uri=response.request.url.path,
                body=response.text,
            ) from e

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "Transport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None
