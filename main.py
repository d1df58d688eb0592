"""Main entry point for the WitsShell FastAPI application.

This module creates and configures the FastAPI app instance that serves a
simulated shell over an in-memory filesystem to terminal front ends.

To run the development server:
    uv run uvicorn main:app --reload

Configuration is read from the environment (a .env file is loaded first):
    WITSSHELL_HOME       home directory (default /home/user)
    WITSSHELL_USER       value of USER (default user)
    WITSSHELL_PATH       colon-separated search path (default /bin)
    WITSSHELL_LOG_LEVEL  logging level (default INFO)
"""

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from pydantic import ValidationError

from api.dependencies import initialize_shell_session, shutdown_shell_session
from api.exceptions import (
    CommandNotFoundError,
    PathNotFoundError,
    VariableNotFoundError,
    command_not_found_handler,
    generic_exception_handler,
    path_not_found_handler,
    runtime_error_handler,
    validation_exception_handler,
    value_error_handler,
    variable_not_found_handler,
)
from api.routes import environment as environment_routes
from api.routes import filesystem as filesystem_routes
from api.routes import shell as shell_routes

load_dotenv()

logging.basicConfig(level=os.environ.get("WITSSHELL_LOG_LEVEL", "INFO").upper())
logger = logging.getLogger("witsshell")

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events.

    Creates the shared ShellSession at startup and drops it at shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to FastAPI to handle requests.
    """
    session = initialize_shell_session()
    logger.info(
        f"WitsShell session {session.session_id} started in {session.current_directory}"
    )

    yield

    shutdown_shell_session()
    logger.info("WitsShell session closed")


app = FastAPI(
    title="WitsShell",
    description="Simulated POSIX-like shell over an in-memory filesystem",
    version=VERSION,
    lifespan=lifespan,
)

# Specific exceptions before general ones
_EXCEPTION_HANDLERS = (
    (PathNotFoundError, path_not_found_handler),
    (VariableNotFoundError, variable_not_found_handler),
    (CommandNotFoundError, command_not_found_handler),
    (ValidationError, validation_exception_handler),
    (ValueError, value_error_handler),
    (RuntimeError, runtime_error_handler),
    (Exception, generic_exception_handler),
)
for exc_class, handler in _EXCEPTION_HANDLERS:
    app.add_exception_handler(exc_class, handler)

for router_module in (shell_routes, filesystem_routes, environment_routes):
    app.include_router(router_module.router)


@app.get("/")
async def root():
    """Root endpoint - returns a welcome message."""
    return {
        "message": "Welcome to the WitsShell API",
        "version": VERSION,
        "docs_url": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy"}
