"""Shared request and response models for API endpoints.

These models are used by the route handlers and re-exported by the client
library, so both sides of the wire agree on one set of shapes.
"""

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field


# Shell models


class ExecuteRequest(BaseModel):
    """Request body for running a command line.

    Attributes:
        line: The raw command line, possibly holding several "&"-separated
            sub-commands.
    """

    line: str = Field(description="Raw command line")


class CommandResultResponse(BaseModel):
    """Outcome of one sub-command.

    Attributes:
        command: Sub-command text as submitted.
        output: Text produced by the command.
        is_error: Whether the command failed.
        suppress_record: True for clear; the front end should drop its
            displayed records instead of adding one.
    """

    command: str
    output: str
    is_error: bool
    suppress_record: bool = False


class ExecuteResponse(BaseModel):
    """Response for POST /shell/execute.

    Attributes:
        results: One entry per sub-command, in submission order.
        history_cleared: Whether any sub-command erased history.
        current_directory: Current directory after the line ran.
    """

    results: list[CommandResultResponse]
    history_cleared: bool = False
    current_directory: str


class HistoryEntryResponse(BaseModel):
    """A recorded sub-command.

    Attributes:
        command: Sub-command text.
        output: Text it produced.
        is_error: Whether it failed.
        timestamp: When it was recorded.
    """

    command: str
    output: str
    is_error: bool
    timestamp: datetime


class HistoryResponse(BaseModel):
    """Response for GET /shell/history."""

    entries: list[HistoryEntryResponse]
    count: int


class ClearHistoryResponse(BaseModel):
    """Response for DELETE /shell/history.

    Attributes:
        cleared: Number of entries removed.
    """

    cleared: int


class SessionStateResponse(BaseModel):
    """Response for GET /shell/state.

    Attributes:
        session_id: Identifier of the session.
        current_directory: Current directory.
        search_path: Directories consulted for non-builtin commands.
        history_count: Number of recorded entries.
        filesystem_summary: Brief summary such as "4 directories, 1 file".
    """

    session_id: str
    current_directory: str
    search_path: list[str]
    history_count: int
    filesystem_summary: str


class SessionSnapshotResponse(BaseModel):
    """Response for GET /shell/snapshot.

    Attributes:
        session_id: Identifier of the session.
        current_directory: Current directory.
        search_path: Directories consulted for non-builtin commands.
        environment: Every variable, in store order.
        filesystem: Every node keyed by path, sorted by path.
        history_count: Number of recorded entries.
    """

    session_id: str
    current_directory: str
    search_path: list[str]
    environment: dict[str, str]
    filesystem: dict[str, dict[str, Any]]
    history_count: int


class ResetResponse(BaseModel):
    """Response for POST /shell/reset."""

    status: str
    message: str
    current_directory: str


class CommandListResponse(BaseModel):
    """Response for GET /shell/commands."""

    builtins: list[str]
    count: int


class ResolveResponse(BaseModel):
    """Response for GET /shell/resolve/{command}.

    Attributes:
        kind: "builtin" or "external".
        name: The command name.
        path: Filesystem path of an external command.
    """

    kind: Literal["builtin", "external"]
    name: str
    path: Optional[str] = None


# Filesystem models


class NodeResponse(BaseModel):
    """A single filesystem node.

    Attributes:
        path: Normalized absolute path.
        node_type: "directory" or "file".
        children: Child names (directories only).
        content: File content (files only).
    """

    path: str
    node_type: Literal["directory", "file"]
    children: Optional[list[str]] = None
    content: Optional[str] = None


class DirectoryEntry(BaseModel):
    """One child in a directory listing."""

    name: str
    node_type: Literal["directory", "file"]


class DirectoryListingResponse(BaseModel):
    """Response for GET /filesystem/list."""

    path: str
    entries: list[DirectoryEntry]
    count: int


class ValidationResponse(BaseModel):
    """Result of a consistency check.

    Attributes:
        valid: Whether no problems were found.
        errors: Problems found (empty if valid).
        checked_at: When the check ran.
    """

    valid: bool
    errors: list[str] = Field(default_factory=list)
    checked_at: datetime


# Environment models


class VariableResponse(BaseModel):
    """A single environment variable."""

    name: str
    value: str


class VariablesResponse(BaseModel):
    """Response for GET /environment/variables.

    Attributes:
        variables: Name to value, in store order.
        count: Number of variables.
        search_path: Current search path (PATH is its colon-join).
    """

    variables: dict[str, str]
    count: int
    search_path: list[str]


class ErrorResponse(BaseModel):
    """Shape of error bodies returned by the exception handlers."""

    error: str
    detail: str
