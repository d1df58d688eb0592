"""Shared plumbing for the sub-clients.

Each sub-client covers one router and sets _BASE_PATH to its prefix; the
request helpers take paths relative to that prefix.

This is an internal module and should not be imported directly by users.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from client._http import AsyncHTTPClient, HTTPClient


class _RouterPaths:
    _BASE_PATH = ""

    def _path(self, suffix: str) -> str:
        return f"{self._BASE_PATH}{suffix}"


class BaseClient(_RouterPaths):
    """Base class for synchronous sub-clients.

    Attributes:
        _http: The shared HTTP client.
    """

    def __init__(self, http_client: "HTTPClient") -> None:
        self._http = http_client

    def _get(self, suffix: str, params: dict[str, Any] | None = None) -> Any:
        return self._http.get(self._path(suffix), params=params)

    def _post(self, suffix: str, json: dict[str, Any] | None = None) -> Any:
        return self._http.post(self._path(suffix), json=json, params=None)

    def _delete(self, suffix: str) -> Any:
        return self._http.delete(self._path(suffix), params=None)


class AsyncBaseClient(_RouterPaths):
    """Base class for asynchronous sub-clients."""

    def __init__(self, http_client: "AsyncHTTPClient") -> None:
        self._http = http_client

    async def _get(self, suffix: str, params: dict[str, Any] | None = None) -> Any:
        return await self._http.get(self._path(suffix), params=params)

    async def _post(self, suffix: str, json: dict[str, Any] | None = None) -> Any:
        return await self._http.post(self._path(suffix), json=json, params=None)

    async def _delete(self, suffix: str) -> Any:
        return await self._http.delete(self._path(suffix), params=None)
