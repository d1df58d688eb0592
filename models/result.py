"""Per-command result and history records."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from models.errors import GENERIC_ERROR_MESSAGE


class CommandResult(BaseModel):
    """Outcome of one sub-command.

    Created fresh for each sub-command and consumed immediately by the
    session, which either records it in history or, when suppress_record
    is set, discards history instead (the clear builtin).

    Args:
        command: The sub-command text as submitted.
        output: Text produced by the command (may be empty).
        is_error: Whether the command failed.
        suppress_record: Don't record this result; erase history instead.
    """

    command: str = Field(default="", description="Sub-command text as submitted")
    output: str = Field(default="", description="Text produced by the command")
    is_error: bool = Field(default=False, description="Whether the command failed")
    suppress_record: bool = Field(
        default=False, description="Erase history instead of recording this result"
    )

    @classmethod
    def success(cls, output: str = "") -> "CommandResult":
        return cls(output=output)

    @classmethod
    def failure(cls) -> "CommandResult":
        """A failed result; the text never varies with the cause."""
        return cls(output=GENERIC_ERROR_MESSAGE, is_error=True)


class HistoryEntry(BaseModel):
    """A recorded sub-command, as shown by a terminal front end.

    Args:
        command: The sub-command text.
        output: Text it produced.
        is_error: Whether it failed.
        timestamp: When it was recorded (UTC).
    """

    command: str
    output: str
    is_error: bool = False
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_result(cls, result: CommandResult) -> "HistoryEntry":
        return cls(
            command=result.command,
            output=result.output,
            is_error=result.is_error,
        )
