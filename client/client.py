"""Main WitsShell client classes.

- WitsShellClient: Synchronous client for the WitsShell REST API
- AsyncWitsShellClient: Asynchronous client for the WitsShell REST API

Both provide namespaced access through sub-client properties
(client.shell, client.filesystem, client.environment).

Example:
    Synchronous usage::

        from client import WitsShellClient

        with WitsShellClient(base_url="http://localhost:8000") as client:
            client.shell.execute("mkdir notes & cd notes & touch todo")
            print(client.shell.execute("ls").results[0].output)

    Asynchronous usage::

        from client import AsyncWitsShellClient

        async with AsyncWitsShellClient() as client:
            response = await client.shell.execute("pwd")
"""

from functools import cached_property
from typing import Any

from client._environment import AsyncEnvironmentClient, EnvironmentClient
from client._filesystem import AsyncFilesystemClient, FilesystemClient
from client._http import AsyncHTTPClient, HTTPClient
from client._shell import AsyncShellClient, ShellClient
from client.models import HealthResponse


class WitsShellClient:
    """Synchronous client for the WitsShell REST API.

    Args:
        base_url: The base URL of the server (default: http://localhost:8000).
        timeout: Request timeout in seconds (default: 30.0).
        retry_enabled: Retry connection errors, timeouts and HTTP
            502/503/504 with exponential backoff (default: False).
        max_retries: Maximum retry attempts when retry is enabled.
        transport: Custom httpx transport (e.g., for testing).

    Sub-clients are built on first access and reused afterwards.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: Any = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._http = HTTPClient(base_url, timeout, retry_enabled, max_retries, transport)

    def __enter__(self) -> "WitsShellClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._http.close()

    @cached_property
    def shell(self) -> ShellClient:
        """Shell endpoints (/shell/*): execute, history, state, reset."""
        return ShellClient(self._http)

    @cached_property
    def filesystem(self) -> FilesystemClient:
        """Read-only filesystem endpoints (/filesystem/*)."""
        return FilesystemClient(self._http)

    @cached_property
    def environment(self) -> EnvironmentClient:
        """Environment variable endpoints (/environment/*)."""
        return EnvironmentClient(self._http)

    def health(self) -> HealthResponse:
        """Check server health.

        Raises:
            ConnectionError: If the server is unreachable.
        """
        return HealthResponse(**self._http.get("/health"))


class AsyncWitsShellClient:
    """Asynchronous client for the WitsShell REST API.

    Takes the same arguments as WitsShellClient.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: Any = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._http = AsyncHTTPClient(base_url, timeout, retry_enabled, max_retries, transport)

    async def __aenter__(self) -> "AsyncWitsShellClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._http.close()

    @cached_property
    def shell(self) -> AsyncShellClient:
        return AsyncShellClient(self._http)

    @cached_property
    def filesystem(self) -> AsyncFilesystemClient:
        return AsyncFilesystemClient(self._http)

    @cached_property
    def environment(self) -> AsyncEnvironmentClient:
        return AsyncEnvironmentClient(self._http)

    async def health(self) -> HealthResponse:
        return HealthResponse(**(await self._http.get("/health")))
