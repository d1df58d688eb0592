"""Exception taxonomy for the shell core.

Builtin handlers raise these; the Dispatcher catches ShellError and turns it
into a failed CommandResult. None of them ever reach the caller of
ShellSession.execute().
"""

# Literal text shown for every failed sub-command
GENERIC_ERROR_MESSAGE = "An error has occurred"


class ShellError(Exception):
    """Base class for all errors raised while running a sub-command.

    Args:
        message: Diagnostic description (logged, never shown to the user).
    """

    def __init__(self, message: str = GENERIC_ERROR_MESSAGE):
        self.message = message
        super().__init__(message)


class ArgumentError(ShellError):
    """Wrong number of arguments for a builtin."""


class PathError(ShellError):
    """Target path is missing, has the wrong node type, or has no parent.

    Args:
        path: The normalized path that failed.
        message: Diagnostic description.
    """

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class ResolutionError(ShellError):
    """Command matches no builtin and nothing on the search path.

    Args:
        command: The command name that failed to resolve.
    """

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"{command}: command not found")
