"""Environment sub-client for the WitsShell API.

This module provides EnvironmentClient and AsyncEnvironmentClient for the
environment variable endpoints (/environment/*).

This is an internal module. Import from `client` instead.
"""

from client._base import AsyncBaseClient, BaseClient
from client.models import VariableResponse, VariablesResponse


class EnvironmentClient(BaseClient):
    """Synchronous client for environment endpoints (/environment/*).

    Example:
        with WitsShellClient() as client:
            print(client.environment.get("HOME").value)
    """

    _BASE_PATH = "/environment"

    def list(self) -> VariablesResponse:
        """Get every variable plus the current search path."""
        data = self._get("/variables")
        return VariablesResponse(**data)

    def get(self, name: str) -> VariableResponse:
        """Get one variable.

        Raises:
            NotFoundError: If the variable is unset.
        """
        data = self._get(f"/variables/{name}")
        return VariableResponse(**data)


class AsyncEnvironmentClient(AsyncBaseClient):
    """Asynchronous client for environment endpoints (/environment/*)."""

    _BASE_PATH = "/environment"

    async def list(self) -> VariablesResponse:
        data = await self._get("/variables")
        return VariablesResponse(**data)

    async def get(self, name: str) -> VariableResponse:
        data = await self._get(f"/variables/{name}")
        return VariableResponse(**data)
