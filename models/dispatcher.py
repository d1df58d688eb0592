"""Command dispatcher.

Splits a submitted line into "&"-separated sub-commands and runs them in
order. The "&" separator is purely textual: sub-commands run one after
another and each sees the previous one's effects.
"""

import logging
from typing import TYPE_CHECKING, Optional

from models.builtins import get_builtin
from models.errors import ResolutionError, ShellError
from models.resolver import resolve
from models.result import CommandResult
from models.tokenizer import tokenize

if TYPE_CHECKING:
    from models.session import ShellSession

logger = logging.getLogger(__name__)

COMMAND_SEPARATOR = "&"
COMMENT_PREFIX = "#"


def split_commands(line: str) -> list[str]:
    """Split a line into trimmed, non-empty sub-commands.

    Blank lines and lines whose first non-space character is "#" yield
    no sub-commands.
    """
    trimmed = line.strip()
    if not trimmed or trimmed.startswith(COMMENT_PREFIX):
        return []

    pieces = (piece.strip() for piece in trimmed.split(COMMAND_SEPARATOR))
    return [piece for piece in pieces if piece]


class Dispatcher:
    """Routes sub-commands to builtin handlers or the search-path fallback.

    Args:
        session: The session whose state the commands read and mutate.
    """

    def __init__(self, session: "ShellSession"):
        self.session = session

    def execute(self, line: str) -> list[CommandResult]:
        """Run every sub-command of line in order.

        Args:
            line: The raw submitted line.

        Returns:
            One CommandResult per sub-command that produced tokens, in
            submission order.
        """
        results = []
        for command_text in split_commands(line):
            result = self.run(command_text)
            if result is not None:
                results.append(result)
        return results

    def run(self, command_text: str) -> Optional[CommandResult]:
        """Tokenize and run one sub-command.

        Returns:
            The result, or None if the sub-command has no tokens.
        """
        tokens = tokenize(command_text, self.session.environment)
        if not tokens:
            return None

        command, args = tokens[0], tokens[1:]
        try:
            result = self._dispatch(command, args)
        except ShellError as e:
            logger.debug(f"Command {command_text!r} failed: {e.message}")
            result = CommandResult.failure()

        result.command = command_text
        return result

    def _dispatch(self, command: str, args: list[str]) -> CommandResult:
        handler = get_builtin(command)
        if handler is not None:
            return handler(self.session, args)

        executable = resolve(
            command, self.session.search_path, self.session.filesystem
        )
        if executable is None:
            raise ResolutionError(command)

        # Simulated run: nothing is actually started
        return CommandResult.success(f"Executed: {' '.join([command, *args])}")
