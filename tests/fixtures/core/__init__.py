"""Core infrastructure fixtures."""

from tests.fixtures.core.sessions import (
    DEFAULT_CONFIG,
    create_environment_store,
    create_filesystem,
    create_shell_config,
    create_shell_session,
)

__all__ = [
    "DEFAULT_CONFIG",
    "create_environment_store",
    "create_filesystem",
    "create_shell_config",
    "create_shell_session",
]
