"""Command resolution: builtin first, then the search path."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from models.filesystem import VirtualFileSystem, normalize_path


class BuiltinKind(str, Enum):
    """The closed set of builtin commands."""

    CD = "cd"
    PATH = "path"
    EXIT = "exit"
    LS = "ls"
    PWD = "pwd"
    ECHO = "echo"
    ENV = "env"
    MKDIR = "mkdir"
    TOUCH = "touch"
    CAT = "cat"
    CLEAR = "clear"


BUILTIN_NAMES: frozenset[str] = frozenset(kind.value for kind in BuiltinKind)


class ExecutableKind(str, Enum):
    """How a command name resolved."""

    BUILTIN = "builtin"
    EXTERNAL = "external"


class ExecutableRef(BaseModel):
    """Result of resolving a command name.

    Args:
        kind: Whether the command is a builtin or a search-path entry.
        name: The command name as typed.
        path: Filesystem path of the entry (None for builtins).
    """

    kind: ExecutableKind
    name: str
    path: Optional[str] = Field(default=None, description="Resolved filesystem path")


def resolve(
    command: str,
    search_path: list[str],
    filesystem: VirtualFileSystem,
    builtins: frozenset[str] = BUILTIN_NAMES,
) -> Optional[ExecutableRef]:
    """Resolve a command name.

    Builtins always win and are never shadowed by filesystem entries.
    Otherwise each search directory is tried in order and the first
    "<directory>/<command>" that exists as any node is returned.

    Args:
        command: The command name.
        search_path: Ordered directories to search (may be empty).
        filesystem: The filesystem to look in.
        builtins: Names that resolve as builtins.

    Returns:
        An ExecutableRef, or None if nothing matches.
    """
    if command in builtins:
        return ExecutableRef(kind=ExecutableKind.BUILTIN, name=command)

    if not command:
        return None

    # Exact arena lookup: "." or ".." must not resolve to the directory itself
    for directory in search_path:
        candidate = f"{normalize_path(directory).rstrip('/')}/{command}"
        if candidate in filesystem.nodes:
            return ExecutableRef(
                kind=ExecutableKind.EXTERNAL, name=command, path=candidate
            )

    return None
