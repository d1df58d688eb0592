"""WitsShell core models package.

This package contains the interpreter core: the virtual filesystem,
environment store, tokenizer, command resolver, builtin commands,
dispatcher and the session object that owns all shared state.
"""

from models.errors import (
    GENERIC_ERROR_MESSAGE,
    ArgumentError,
    PathError,
    ResolutionError,
    ShellError,
)
from models.filesystem import (
    DirectoryNode,
    FileNode,
    FileSystemNode,
    VirtualFileSystem,
    normalize_path,
    resolve_path,
)
from models.environment import EnvironmentStore
from models.tokenizer import tokenize
from models.resolver import (
    BUILTIN_NAMES,
    BuiltinKind,
    ExecutableKind,
    ExecutableRef,
    resolve,
)
from models.result import CommandResult, HistoryEntry
from models.dispatcher import Dispatcher
from models.session import ShellConfig, ShellSession

__all__ = [
    "GENERIC_ERROR_MESSAGE",
    "ShellError",
    "ArgumentError",
    "PathError",
    "ResolutionError",
    "DirectoryNode",
    "FileNode",
    "FileSystemNode",
    "VirtualFileSystem",
    "normalize_path",
    "resolve_path",
    "EnvironmentStore",
    "tokenize",
    "BUILTIN_NAMES",
    "BuiltinKind",
    "ExecutableKind",
    "ExecutableRef",
    "resolve",
    "CommandResult",
    "HistoryEntry",
    "Dispatcher",
    "ShellConfig",
    "ShellSession",
]
