"""Shell command endpoints.

These endpoints are the contract with a terminal front end: submit a line,
get back one result per sub-command, and read or clear the recorded history.
"""

from fastapi import APIRouter

from api.dependencies import ShellSessionDep
from api.exceptions import CommandNotFoundError
from api.models import (
    ClearHistoryResponse,
    CommandListResponse,
    CommandResultResponse,
    ExecuteRequest,
    ExecuteResponse,
    HistoryEntryResponse,
    HistoryResponse,
    ResetResponse,
    ResolveResponse,
    SessionSnapshotResponse,
    SessionStateResponse,
)
from models.resolver import BuiltinKind, resolve

router = APIRouter(
    prefix="/shell",
    tags=["shell"],
)


@router.post("/execute", response_model=ExecuteResponse)
async def execute_line(request: ExecuteRequest, session: ShellSessionDep):
    """Run a command line.

    The line is split on "&" and each sub-command runs in order. Failed
    sub-commands are ordinary results with is_error set; this endpoint only
    returns an error status when the request itself is malformed.

    Args:
        request: The line to run.
        session: The ShellSession instance (injected by FastAPI).

    Returns:
        The results, whether history was cleared, and the new current
        directory.
    """
    results = session.execute(request.line)

    return ExecuteResponse(
        results=[
            CommandResultResponse(**result.model_dump()) for result in results
        ],
        history_cleared=any(result.suppress_record for result in results),
        current_directory=session.current_directory,
    )


@router.get("/history", response_model=HistoryResponse)
async def get_history(session: ShellSessionDep):
    """Get every recorded sub-command, oldest first."""
    entries = [
        HistoryEntryResponse(**entry.model_dump())
        for entry in session.get_history()
    ]
    return HistoryResponse(entries=entries, count=len(entries))


@router.delete("/history", response_model=ClearHistoryResponse)
async def clear_history(session: ShellSessionDep):
    """Erase the recorded history (same effect as the clear builtin)."""
    return ClearHistoryResponse(cleared=session.clear_history())


@router.get("/state", response_model=SessionStateResponse)
async def get_session_state(session: ShellSessionDep):
    """Get the current directory, search path and history size."""
    return SessionStateResponse(
        session_id=session.session_id,
        current_directory=session.current_directory,
        search_path=list(session.search_path),
        history_count=len(session.history),
        filesystem_summary=session.filesystem.summary,
    )


@router.get("/snapshot", response_model=SessionSnapshotResponse)
async def get_session_snapshot(session: ShellSessionDep):
    """Export the full session state: every node, variable and setting."""
    return SessionSnapshotResponse(**session.get_snapshot())


@router.post("/reset", response_model=ResetResponse)
async def reset_session(session: ShellSessionDep):
    """Restore the seeded filesystem, environment and search path.

    History is erased and the current directory returns to home.
    """
    session.reset()
    return ResetResponse(
        status="reset",
        message="Session restored to its initial state",
        current_directory=session.current_directory,
    )


@router.get("/commands", response_model=CommandListResponse)
async def list_commands():
    """List the builtin command names."""
    names = [kind.value for kind in BuiltinKind]
    return CommandListResponse(builtins=names, count=len(names))


@router.get("/resolve/{command}", response_model=ResolveResponse)
async def resolve_command(command: str, session: ShellSessionDep):
    """Report how a command name would resolve.

    Raises:
        CommandNotFoundError: If it is neither a builtin nor on the search path.
    """
    executable = resolve(command, session.search_path, session.filesystem)
    if executable is None:
        raise CommandNotFoundError(
            command=command, search_path=list(session.search_path)
        )

    return ResolveResponse(
        kind=executable.kind.value,
        name=executable.name,
        path=executable.path,
    )
