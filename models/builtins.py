"""Built-in shell commands.

Each handler takes the session and the argument tokens (command name
excluded) and returns a CommandResult. Handlers signal failure by raising a
ShellError subclass; the Dispatcher converts it to the generic failure
result, so error output never varies with the cause.
"""

from typing import TYPE_CHECKING, Callable, Optional

from models.errors import ArgumentError, PathError
from models.filesystem import resolve_path
from models.resolver import BuiltinKind
from models.result import CommandResult

if TYPE_CHECKING:
    from models.session import ShellSession

BuiltinHandler = Callable[["ShellSession", list[str]], CommandResult]

EXIT_MESSAGE = "Goodbye! (exit not available in this session)"
LS_SEPARATOR = "  "

BUILTINS: dict[BuiltinKind, BuiltinHandler] = {}


def builtin(kind: BuiltinKind) -> Callable[[BuiltinHandler], BuiltinHandler]:
    """Register the decorated function as the handler for kind."""

    def decorator(func: BuiltinHandler) -> BuiltinHandler:
        BUILTINS[kind] = func
        return func

    return decorator


def _require_operand(name: str, args: list[str]) -> str:
    if not args:
        raise ArgumentError(f"{name}: missing operand")
    return args[0]


@builtin(BuiltinKind.CD)
def cmd_cd(session: "ShellSession", args: list[str]) -> CommandResult:
    """
    Change the current directory

    Usage: cd DIR

    DIR may be "~", "~/sub", relative to the current directory, or absolute.
    """
    target = _require_operand("cd", args)

    home = session.environment.get("HOME")
    if target == "~":
        target = home
    elif target.startswith("~/"):
        target = home + target[1:]

    path = resolve_path(target, session.current_directory)
    if not session.filesystem.is_directory(path):
        raise PathError(path, "not a directory")

    session.current_directory = path
    return CommandResult.success()


@builtin(BuiltinKind.PATH)
def cmd_path(session: "ShellSession", args: list[str]) -> CommandResult:
    """
    Replace the search path

    Usage: path [DIR...]

    With no DIR the search path becomes empty and only builtins resolve.
    """
    session.set_search_path(args)
    return CommandResult.success()


@builtin(BuiltinKind.LS)
def cmd_ls(session: "ShellSession", args: list[str]) -> CommandResult:
    """List the current directory; directories get a trailing "/"."""
    entries = session.filesystem.list_directory(session.current_directory)
    names = [f"{name}/" if is_dir else name for name, is_dir in entries]
    return CommandResult.success(LS_SEPARATOR.join(names))


@builtin(BuiltinKind.PWD)
def cmd_pwd(session: "ShellSession", args: list[str]) -> CommandResult:
    return CommandResult.success(session.current_directory)


@builtin(BuiltinKind.ECHO)
def cmd_echo(session: "ShellSession", args: list[str]) -> CommandResult:
    """Echo arguments, joined by single spaces"""
    # $VAR tokens were already substituted by the tokenizer
    return CommandResult.success(" ".join(args))


@builtin(BuiltinKind.ENV)
def cmd_env(session: "ShellSession", args: list[str]) -> CommandResult:
    """Display all environment variables, one KEY=VALUE per line"""
    lines = [f"{key}={value}" for key, value in session.environment.items()]
    return CommandResult.success("\n".join(lines))


@builtin(BuiltinKind.MKDIR)
def cmd_mkdir(session: "ShellSession", args: list[str]) -> CommandResult:
    """
    Create directory

    Usage: mkdir NAME

    Fails if NAME exists or its parent is not an existing directory.
    """
    name = _require_operand("mkdir", args)
    session.filesystem.create_directory(resolve_path(name, session.current_directory))
    return CommandResult.success()


@builtin(BuiltinKind.TOUCH)
def cmd_touch(session: "ShellSession", args: list[str]) -> CommandResult:
    """
    Create an empty file

    Usage: touch NAME

    An existing file is silently emptied.
    """
    name = _require_operand("touch", args)
    # Nodes need a directory parent and directories are never overwritten
    session.filesystem.create_file(resolve_path(name, session.current_directory))
    return CommandResult.success()


@builtin(BuiltinKind.CAT)
def cmd_cat(session: "ShellSession", args: list[str]) -> CommandResult:
    """
    Print file content

    Usage: cat NAME
    """
    name = _require_operand("cat", args)
    content = session.filesystem.read_file(resolve_path(name, session.current_directory))
    return CommandResult.success(content)


@builtin(BuiltinKind.CLEAR)
def cmd_clear(session: "ShellSession", args: list[str]) -> CommandResult:
    return CommandResult(suppress_record=True)


@builtin(BuiltinKind.EXIT)
def cmd_exit(session: "ShellSession", args: list[str]) -> CommandResult:
    """Report a graceful exit; the session keeps running."""
    if args:
        raise ArgumentError("exit: takes no arguments")
    return CommandResult.success(EXIT_MESSAGE)


def get_builtin(command: str) -> Optional[BuiltinHandler]:
    """Get the handler for a builtin command name, or None"""
    try:
        return BUILTINS[BuiltinKind(command)]
    except ValueError:
        return None
