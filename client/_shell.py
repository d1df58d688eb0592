"""Shell sub-client for the WitsShell API.

This module provides ShellClient and AsyncShellClient for the shell
endpoints (/shell/*).

This is an internal module. Import from `client` instead.
"""

from client._base import AsyncBaseClient, BaseClient
from client.models import (
    ClearHistoryResponse,
    CommandListResponse,
    ExecuteResponse,
    HistoryResponse,
    ResetResponse,
    ResolveResponse,
    SessionSnapshotResponse,
    SessionStateResponse,
)


class ShellClient(BaseClient):
    """Synchronous client for shell endpoints (/shell/*).

    Example:
        with WitsShellClient() as client:
            response = client.shell.execute("mkdir docs & cd docs & pwd")
            for result in response.results:
                print(result.command, "->", result.output)
    """

    _BASE_PATH = "/shell"

    def execute(self, line: str) -> ExecuteResponse:
        """Run a command line.

        Failed sub-commands come back as results with is_error set; they do
        not raise.

        Args:
            line: The raw command line.

        Returns:
            One result per sub-command plus the new current directory.

        Raises:
            APIError: If the request fails.
        """
        data = self._post("/execute", json={"line": line})
        return ExecuteResponse(**data)

    def history(self) -> HistoryResponse:
        data = self._get("/history")
        return HistoryResponse(**data)

    def clear_history(self) -> ClearHistoryResponse:
        data = self._delete("/history")
        return ClearHistoryResponse(**data)

    def state(self) -> SessionStateResponse:
        """Get the current directory, search path and history size."""
        data = self._get("/state")
        return SessionStateResponse(**data)

    def snapshot(self) -> SessionSnapshotResponse:
        """Export every node, variable and setting of the session."""
        data = self._get("/snapshot")
        return SessionSnapshotResponse(**data)

    def reset(self) -> ResetResponse:
        """Restore the session to its seeded state."""
        data = self._post("/reset")
        return ResetResponse(**data)

    def commands(self) -> CommandListResponse:
        data = self._get("/commands")
        return CommandListResponse(**data)

    def resolve(self, command: str) -> ResolveResponse:
        """Report how a command name resolves.

        Raises:
            NotFoundError: If it is neither a builtin nor on the search path.
        """
        data = self._get(f"/resolve/{command}")
        return ResolveResponse(**data)


class AsyncShellClient(AsyncBaseClient):
    """Asynchronous client for shell endpoints (/shell/*)."""

    _BASE_PATH = "/shell"

    async def execute(self, line: str) -> ExecuteResponse:
        data = await self._post("/execute", json={"line": line})
        return ExecuteResponse(**data)

    async def history(self) -> HistoryResponse:
        data = await self._get("/history")
        return HistoryResponse(**data)

    async def clear_history(self) -> ClearHistoryResponse:
        data = await self._delete("/history")
        return ClearHistoryResponse(**data)

    async def state(self) -> SessionStateResponse:
        data = await self._get("/state")
        return SessionStateResponse(**data)

    async def snapshot(self) -> SessionSnapshotResponse:
        data = await self._get("/snapshot")
        return SessionSnapshotResponse(**data)

    async def reset(self) -> ResetResponse:
        data = await self._post("/reset")
        return ResetResponse(**data)

    async def commands(self) -> CommandListResponse:
        data = await self._get("/commands")
        return CommandListResponse(**data)

    async def resolve(self, command: str) -> ResolveResponse:
        data = await self._get(f"/resolve/{command}")
        return ResolveResponse(**data)
