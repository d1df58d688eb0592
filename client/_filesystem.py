"""Filesystem sub-client for the WitsShell API.

This module provides FilesystemClient and AsyncFilesystemClient for the
read-only filesystem endpoints (/filesystem/*).

This is an internal module. Import from `client` instead.
"""

from client._base import AsyncBaseClient, BaseClient
from client.models import DirectoryListingResponse, NodeResponse, ValidationResponse


class FilesystemClient(BaseClient):
    """Synchronous client for filesystem endpoints (/filesystem/*).

    Example:
        with WitsShellClient() as client:
            listing = client.filesystem.list("/home/user")
            for entry in listing.entries:
                print(entry.name, entry.node_type)
    """

    _BASE_PATH = "/filesystem"

    def get_node(self, path: str) -> NodeResponse:
        """Get the node at path.

        Raises:
            NotFoundError: If nothing exists at path.
        """
        data = self._get("/nodes", params={"path": path})
        return NodeResponse(**data)

    def list(self, path: str | None = None) -> DirectoryListingResponse:
        """List a directory (the current directory when path is None).

        Raises:
            NotFoundError: If nothing exists at path.
            APIError: If path is a file (HTTP 400).
        """
        data = self._get("/list", params={"path": path})
        return DirectoryListingResponse(**data)

    def validate(self) -> ValidationResponse:
        data = self._get("/validate")
        return ValidationResponse(**data)


class AsyncFilesystemClient(AsyncBaseClient):
    """Asynchronous client for filesystem endpoints (/filesystem/*)."""

    _BASE_PATH = "/filesystem"

    async def get_node(self, path: str) -> NodeResponse:
        data = await self._get("/nodes", params={"path": path})
        return NodeResponse(**data)

    async def list(self, path: str | None = None) -> DirectoryListingResponse:
        data = await self._get("/list", params={"path": path})
        return DirectoryListingResponse(**data)

    async def validate(self) -> ValidationResponse:
        data = await self._get("/validate")
        return ValidationResponse(**data)
