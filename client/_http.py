"""Internal HTTP handling for the WitsShell client.

Wraps httpx with error mapping and optional retry with exponential backoff.
This is an internal module and should not be imported directly by users.
"""

import asyncio
import time
from typing import Any, Literal

import httpx

from client.exceptions import (
    APIError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
)

HttpMethod = Literal["GET", "POST", "DELETE"]

# Status codes that trigger automatic retry (when retry is enabled)
RETRYABLE_STATUS_CODES = {502, 503, 504}

DEFAULT_RETRY_BACKOFF_BASE = 0.5  # seconds
DEFAULT_RETRY_BACKOFF_MAX = 30.0  # seconds

_STATUS_ERRORS: dict[int, type[ValidationError] | type[NotFoundError]] = {
    422: ValidationError,
    404: NotFoundError,
}


def _describe_validation(errors: list[dict[str, Any]]) -> str:
    parts = []
    for err in errors:
        field = (err.get("loc") or ["unknown"])[-1]
        parts.append(f"{field}: {err.get('msg', 'invalid')}")
    return "; ".join(parts)


def _parse_error_response(response: httpx.Response) -> tuple[str, str | None, dict | None]:
    """Extract (message, error_type, details) from an error response.

    Understands FastAPI's {"detail": ...} bodies (string or validation list)
    and the {"error": ..., "detail": ...} bodies of the app's own handlers.
    Falls back to the raw text.
    """
    try:
        body = response.json()
    except ValueError:
        return response.text.strip() or f"HTTP {response.status_code} error", None, None

    if not isinstance(body, dict):
        return str(body), None, None

    detail = body.get("detail")
    kind = body.get("error") or body.get("type")
    if isinstance(detail, list):
        return _describe_validation(detail), "validation_error", {"errors": detail}
    if isinstance(detail, str):
        return detail, kind, body
    if "error" in body:
        return str(body["error"]), body.get("type"), body
    return str(body), None, None


def _raise_for_status(response: httpx.Response) -> None:
    """Raise the client exception matching an error status code.

    Raises:
        ValidationError: For HTTP 422.
        NotFoundError: For HTTP 404.
        ServerError: For HTTP 5xx.
        APIError: For any other 4xx.
    """
    if response.is_success:
        return

    message, error_type, details = _parse_error_response(response)
    try:
        raw = response.json()
    except ValueError:
        raw = response.text

    status = response.status_code
    fixed = _STATUS_ERRORS.get(status)
    if fixed is not None:
        raise fixed(message, details=details, response_body=raw)
    if status >= 500:
        raise ServerError(message, status_code=status, details=details, response_body=raw)
    raise APIError(
        message, status_code=status, error_type=error_type, details=details, response_body=raw
    )


def _calculate_backoff(attempt: int, base: float = DEFAULT_RETRY_BACKOFF_BASE) -> float:
    """Return base * 2**attempt seconds, capped at DEFAULT_RETRY_BACKOFF_MAX."""
    return min(base * (2 ** attempt), DEFAULT_RETRY_BACKOFF_MAX)


class _HTTPSettings:
    """Connection settings and retry decisions shared by both clients.

    Attributes:
        base_url: The base URL for all API requests, without trailing slash.
        timeout: Request timeout in seconds.
        retry_enabled: Whether to retry on transient failures.
        max_retries: Maximum number of retry attempts.
    """

    def __init__(
        self, base_url: str, timeout: float, retry_enabled: bool, max_retries: int
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_enabled = retry_enabled
        self.max_retries = max_retries

    @property
    def _attempts(self) -> int:
        return self.max_retries + 1 if self.retry_enabled else 1

    @staticmethod
    def _prepare_params(params: dict[str, Any] | None) -> dict[str, Any] | None:
        if not params:
            return params
        return {key: value for key, value in params.items() if value is not None}

    def _transport_failure(
        self, error: httpx.TransportError, path: str
    ) -> ConnectionError | TimeoutError:
        url = f"{self.base_url}{path}"
        if isinstance(error, httpx.TimeoutException):
            return TimeoutError(f"Request to {url} timed out", timeout=self.timeout, url=url)
        return ConnectionError(f"Failed to connect to {url}", url=url, cause=error)

    def _retry_delay(self, attempt: int, response: httpx.Response | None) -> float | None:
        """Seconds to wait before the next attempt, or None to stop retrying.

        A None response means the transport failed.
        """
        if attempt >= self._attempts - 1:
            return None
        if response is not None and response.status_code not in RETRYABLE_STATUS_CODES:
            return None
        return _calculate_backoff(attempt)

    @staticmethod
    def _body(response: httpx.Response) -> Any:
        _raise_for_status(response)
        return response.json() if response.content else None


class HTTPClient(_HTTPSettings):
    """Synchronous HTTP client for the WitsShell API."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(base_url, timeout, retry_enabled, max_retries)
        self._client = httpx.Client(base_url=self.base_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Make a request and return the parsed JSON body (None if empty).

        Raises:
            ConnectionError: If the connection fails.
            TimeoutError: If the request times out.
            APIError: If the server returns an error response.
        """
        params = self._prepare_params(params)
        attempt = 0
        while True:
            try:
                response = self._client.request(method, path, params=params, json=json)
            except httpx.TransportError as e:
                delay = self._retry_delay(attempt, None)
                if delay is None:
                    raise self._transport_failure(e, path) from e
            else:
                delay = self._retry_delay(attempt, response)
                if delay is None:
                    return self._body(response)
            time.sleep(delay)
            attempt += 1

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return self.request("POST", path, params=params, json=json)

    def delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("DELETE", path, params=params)


class AsyncHTTPClient(_HTTPSettings):
    """Asynchronous HTTP client for the WitsShell API.

    Same behaviour as HTTPClient, built on httpx.AsyncClient.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(base_url, timeout, retry_enabled, max_retries)
        self._client = httpx.AsyncClient(
            base_url=self.base_url, timeout=timeout, transport=transport
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def request(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Async counterpart of HTTPClient.request."""
        params = self._prepare_params(params)
        attempt = 0
        while True:
            try:
                response = await self._client.request(method, path, params=params, json=json)
            except httpx.TransportError as e:
                delay = self._retry_delay(attempt, None)
                if delay is None:
                    raise self._transport_failure(e, path) from e
            else:
                delay = self._retry_delay(attempt, response)
                if delay is None:
                    return self._body(response)
            await asyncio.sleep(delay)
            attempt += 1

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await self.request("POST", path, params=params, json=json)

    async def delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("DELETE", path, params=params)
