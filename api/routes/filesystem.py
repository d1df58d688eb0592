"""Read-only virtual filesystem endpoints.

These let a front end inspect the tree (for example to draw a file browser)
without going through ls and cat.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, Query

from api.dependencies import ShellSessionDep
from api.exceptions import PathNotFoundError
from api.models import (
    DirectoryEntry,
    DirectoryListingResponse,
    NodeResponse,
    ValidationResponse,
)
from models.filesystem import DirectoryNode, normalize_path

router = APIRouter(
    prefix="/filesystem",
    tags=["filesystem"],
)


@router.get("/nodes", response_model=NodeResponse)
async def get_node(
    session: ShellSessionDep,
    path: str = Query(description="Absolute path of the node"),
):
    """Get a single node.

    Raises:
        PathNotFoundError: If nothing exists at path.
    """
    normalized = normalize_path(path)
    node = session.filesystem.get_node(normalized)
    if node is None:
        raise PathNotFoundError(normalized)

    if isinstance(node, DirectoryNode):
        return NodeResponse(
            path=normalized, node_type=node.node_type, children=list(node.children)
        )
    return NodeResponse(path=normalized, node_type=node.node_type, content=node.content)


@router.get("/list", response_model=DirectoryListingResponse)
async def list_directory(
    session: ShellSessionDep,
    path: str | None = Query(
        default=None, description="Directory to list (defaults to the current directory)"
    ),
):
    """List a directory's immediate children.

    Raises:
        PathNotFoundError: If nothing exists at path.
        HTTPException: 400 if path is a file.
    """
    normalized = normalize_path(path) if path else session.current_directory
    if not session.filesystem.exists(normalized):
        raise PathNotFoundError(normalized)
    if not session.filesystem.is_directory(normalized):
        raise HTTPException(
            status_code=400,
            detail=f"Path '{normalized}' is not a directory",
        )

    entries = [
        DirectoryEntry(name=name, node_type="directory" if is_dir else "file")
        for name, is_dir in session.filesystem.list_directory(normalized)
    ]
    return DirectoryListingResponse(path=normalized, entries=entries, count=len(entries))


@router.get("/validate", response_model=ValidationResponse)
async def validate_session(session: ShellSessionDep):
    """Check filesystem and environment consistency."""
    errors = session.validate()
    return ValidationResponse(
        valid=not errors,
        errors=errors,
        checked_at=datetime.now(timezone.utc),
    )
