"""Dependency injection providers for the FastAPI application.

This module defines dependencies that can be injected into route handlers,
providing access to the shared ShellSession.
"""

from typing import Annotated

from fastapi import Depends

from models.session import ShellConfig, ShellSession


# Global state
# One shell session per server process, created when the app starts
_shell_session: ShellSession | None = None


def get_shell_session() -> ShellSession:
    """Get the shared ShellSession instance.

    This function is a FastAPI dependency. Add it to a route handler's
    parameters and FastAPI injects the session.

    Returns:
        The shared ShellSession instance.

    Raises:
        RuntimeError: If the session hasn't been initialized yet.

    Example:
        @router.get("/some-endpoint")
        async def my_handler(session: Annotated[ShellSession, Depends(get_shell_session)]):
            return {"cwd": session.current_directory}
    """
    if _shell_session is None:
        raise RuntimeError(
            "ShellSession not initialized. Call initialize_shell_session() first."
        )

    return _shell_session


def initialize_shell_session(config: ShellConfig | None = None) -> ShellSession:
    """Initialize the shared ShellSession instance.

    This should be called once when the FastAPI app starts up.

    Args:
        config: Seed values; read from WITSSHELL_* environment variables
            when omitted.

    Returns:
        The newly created ShellSession.
    """
    global _shell_session

    _shell_session = ShellSession.create(config or ShellConfig.from_env())
    return _shell_session


def shutdown_shell_session() -> None:
    """Drop the shared ShellSession when the app shuts down.

    Session state is never persisted; it ends with the process.
    """
    global _shell_session
    _shell_session = None


# Type alias for dependency injection
ShellSessionDep = Annotated[ShellSession, Depends(get_shell_session)]
