"""WitsShell API Client Library.

A typed Python client for the WitsShell REST API, in synchronous and
asynchronous flavours.

Example:
    Synchronous usage::

        from client import WitsShellClient

        with WitsShellClient(base_url="http://localhost:8000") as client:
            response = client.shell.execute('echo "hello world" & pwd')
            for result in response.results:
                print(result.output)

    Asynchronous usage::

        from client import AsyncWitsShellClient

        async with AsyncWitsShellClient() as client:
            await client.shell.execute("mkdir projects")

Exports:
    WitsShellClient: Synchronous client.
    AsyncWitsShellClient: Asynchronous client.

    Exceptions:
        WitsShellClientError: Base exception for all client errors.
        ConnectionError: Failed to connect to the server.
        TimeoutError: Request timed out.
        APIError: Server returned an error response.
        ValidationError: Request validation failed (HTTP 422).
        NotFoundError: Resource not found (HTTP 404).
        ServerError: Server-side error (HTTP 5xx).
"""

from client._environment import AsyncEnvironmentClient, EnvironmentClient
from client._filesystem import AsyncFilesystemClient, FilesystemClient
from client._shell import AsyncShellClient, ShellClient
from client.exceptions import (
    APIError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
    WitsShellClientError,
)
from client.models import (
    ClearHistoryResponse,
    CommandListResponse,
    CommandResultResponse,
    DirectoryEntry,
    DirectoryListingResponse,
    ExecuteResponse,
    HealthResponse,
    HistoryEntryResponse,
    HistoryResponse,
    NodeResponse,
    ResetResponse,
    ResolveResponse,
    SessionSnapshotResponse,
    SessionStateResponse,
    ValidationResponse,
    VariableResponse,
    VariablesResponse,
)
from client.client import AsyncWitsShellClient, WitsShellClient

__all__ = [
    # Main clients
    "WitsShellClient",
    "AsyncWitsShellClient",
    # Sub-clients
    "ShellClient",
    "AsyncShellClient",
    "FilesystemClient",
    "AsyncFilesystemClient",
    "EnvironmentClient",
    "AsyncEnvironmentClient",
    # Exceptions
    "WitsShellClientError",
    "ConnectionError",
    "TimeoutError",
    "APIError",
    "ValidationError",
    "NotFoundError",
    "ServerError",
    # Response models
    "ClearHistoryResponse",
    "CommandListResponse",
    "CommandResultResponse",
    "DirectoryEntry",
    "DirectoryListingResponse",
    "ExecuteResponse",
    "HealthResponse",
    "HistoryEntryResponse",
    "HistoryResponse",
    "NodeResponse",
    "ResetResponse",
    "ResolveResponse",
    "SessionSnapshotResponse",
    "SessionStateResponse",
    "ValidationResponse",
    "VariableResponse",
    "VariablesResponse",
]
