"""Client response models for the WitsShell API client.

Re-exports the wire models from the API layer and defines the few
client-only models for endpoints that don't have one there.
"""

from pydantic import BaseModel, Field

# Re-export common models from API layer for client convenience
from api.models import (
    ClearHistoryResponse,
    CommandListResponse,
    CommandResultResponse,
    DirectoryEntry,
    DirectoryListingResponse,
    ErrorResponse,
    ExecuteResponse,
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

__all__ = [
    # Re-exported from api.models
    "ClearHistoryResponse",
    "CommandListResponse",
    "CommandResultResponse",
    "DirectoryEntry",
    "DirectoryListingResponse",
    "ErrorResponse",
    "ExecuteResponse",
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
    # Client-specific models
    "HealthResponse",
]


class HealthResponse(BaseModel):
    """Response model for GET /health."""

    status: str = Field(..., description="Health status (e.g. 'healthy')")
