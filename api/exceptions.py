"""Exception handlers for the WitsShell FastAPI application.

This module defines custom exceptions raised by route handlers and the
handlers that convert them into consistent JSON responses.

Command failures are not exceptions at this level: a failed sub-command is
an ordinary result with is_error set. These handlers only cover requests
that cannot be served at all.
"""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

logger = logging.getLogger(__name__)


# Custom Exception Classes


class PathNotFoundError(Exception):
    """Raised when a requested filesystem path doesn't exist.

    Args:
        path: The normalized path that was requested.
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Path '{path}' not found")


class VariableNotFoundError(Exception):
    """Raised when a requested environment variable is unset.

    Args:
        name: The variable name.
        available_variables: Names that are set.
    """

    def __init__(self, name: str, available_variables: list[str]):
        self.name = name
        self.available_variables = available_variables
        super().__init__(f"Variable '{name}' not set")


class CommandNotFoundError(Exception):
    """Raised when a command name resolves to neither a builtin nor a file.

    Args:
        command: The command name.
        search_path: The search path that was consulted.
    """

    def __init__(self, command: str, search_path: list[str]):
        self.command = command
        self.search_path = search_path
        super().__init__(f"Command '{command}' not found")



# Exception Handlers


def _error_response(status_code: int, error: str, detail: str, **extra: Any) -> JSONResponse:
    """Build the {"error", "detail", ...} body every handler returns."""
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "detail": detail, **extra},
    )


async def path_not_found_handler(request: Request, exc: PathNotFoundError):
    """Return a 404 naming the missing path."""
    return _error_response(
        status.HTTP_404_NOT_FOUND,
        "Path Not Found",
        f"The path '{exc.path}' does not exist",
        requested_path=exc.path,
    )


async def variable_not_found_handler(request: Request, exc: VariableNotFoundError):
    """Return a 404 listing the variables that are set."""
    return _error_response(
        status.HTTP_404_NOT_FOUND,
        "Variable Not Found",
        f"The variable '{exc.name}' is not set",
        requested_variable=exc.name,
        available_variables=exc.available_variables,
    )


async def command_not_found_handler(request: Request, exc: CommandNotFoundError):
    """Return a 404 with the search path that was consulted."""
    return _error_response(
        status.HTTP_404_NOT_FOUND,
        "Command Not Found",
        f"The command '{exc.command}' is not a builtin and is not on the search path",
        requested_command=exc.command,
        search_path=exc.search_path,
    )


async def validation_exception_handler(request: Request, exc: ValidationError):
    """Return a 422 for pydantic errors raised while building a model.

    Request bodies are validated by FastAPI itself; this covers models
    constructed inside route handlers, such as ShellConfig.
    """
    return _error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Validation Error",
        "The request data failed validation",
        validation_errors=exc.errors(include_url=False, include_context=False),
    )


async def value_error_handler(request: Request, exc: ValueError):
    return _error_response(
        status.HTTP_400_BAD_REQUEST, "Invalid Value", str(exc), type="ValueError"
    )


async def runtime_error_handler(request: Request, exc: RuntimeError):
    """Return a 500 for RuntimeError, e.g. a request served with no session."""
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Runtime Error", str(exc), type="RuntimeError"
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """Catch-all: log the traceback, hide it from the client."""
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=exc)

    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
        "An unexpected error occurred",
        type=type(exc).__name__,
    )
