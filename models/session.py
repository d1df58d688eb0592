"""Shell session - owner of all shared interpreter state.

A ShellSession holds the virtual filesystem, the environment store, the
search path and the current directory, plus the recorded command history.
The Dispatcher and builtin handlers receive the session explicitly; there
are no hidden globals in the core. One session per user session.
"""

import logging
import os
import threading
import uuid
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from models.dispatcher import Dispatcher
from models.environment import PATH_SEPARATOR, EnvironmentStore
from models.filesystem import VirtualFileSystem, normalize_path
from models.result import CommandResult, HistoryEntry

logger = logging.getLogger(__name__)

DEFAULT_HOME = "/home/user"
DEFAULT_USER = "user"
DEFAULT_SEARCH_PATH = ["/bin"]
SEED_DIRECTORIES = ["/bin"]


class ShellConfig(BaseModel):
    """Seed values for a new or reset session.

    Args:
        home: Home directory; created at startup and used as the initial
            current directory and HOME.
        user: Value of USER.
        search_path: Initial search path; PATH is derived from it.
    """

    home: str = Field(default=DEFAULT_HOME, description="Home directory")
    user: str = Field(default=DEFAULT_USER, description="Value of USER")
    search_path: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SEARCH_PATH),
        description="Initial search path",
    )

    @field_validator("home")
    @classmethod
    def validate_home(cls, v: str) -> str:
        """Require an absolute home path and normalize it."""
        if not v.startswith("/"):
            raise ValueError(f"home must be an absolute path, got '{v}'")
        return normalize_path(v)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ShellConfig":
        """Build a config from WITSSHELL_* variables.

        Reads WITSSHELL_HOME, WITSSHELL_USER and WITSSHELL_PATH
        (colon-separated; an empty value means an empty search path).
        Unset variables keep their defaults.

        Args:
            environ: Mapping to read from (defaults to os.environ).

        Returns:
            The resulting ShellConfig.
        """
        environ = os.environ if environ is None else environ
        data: dict[str, Any] = {}

        if "WITSSHELL_HOME" in environ:
            data["home"] = environ["WITSSHELL_HOME"]
        if "WITSSHELL_USER" in environ:
            data["user"] = environ["WITSSHELL_USER"]
        if "WITSSHELL_PATH" in environ:
            raw_path = environ["WITSSHELL_PATH"]
            data["search_path"] = (
                [entry for entry in raw_path.split(PATH_SEPARATOR) if entry]
                if raw_path
                else []
            )

        return cls(**data)


class ShellSession(BaseModel):
    """Interpreter state for one shell session.

    All calls to execute(), reset() and clear_history() are serialized by an
    internal lock, so a session can sit behind concurrent callers such as a
    threaded web server.

    Attributes:
        config: Seed values used at creation and by reset().
        filesystem: The virtual filesystem.
        environment: Environment variables.
        search_path: Directories consulted for non-builtin commands.
        current_directory: Always an existing directory in filesystem.
        history: Recorded sub-commands, oldest first.
        session_id: Unique identifier for this session.

    Example:
        >>> session = ShellSession.create()
        >>> [r.output for r in session.execute("mkdir docs & cd docs & pwd")]
        ['', '', '/home/user/docs']
    """

    config: ShellConfig = Field(default_factory=ShellConfig)
    filesystem: VirtualFileSystem
    environment: EnvironmentStore
    search_path: list[str]
    current_directory: str
    history: list[HistoryEntry] = Field(default_factory=list)
    session_id: str = Field(default_factory=lambda: str(uuid.uuid4()))

    def __init__(self, **data):
        """Initialize with private attributes."""
        super().__init__(**data)
        self._operation_lock = threading.Lock()

    @classmethod
    def create(cls, config: Optional[ShellConfig] = None) -> "ShellSession":
        """Create a freshly seeded session.

        The filesystem holds the home directory, /bin and every search
        path directory; the current directory is home.

        Args:
            config: Seed values (defaults to ShellConfig()).

        Returns:
            The new ShellSession.
        """
        config = config or ShellConfig()
        return cls(config=config, **cls._seed_state(config))

    @staticmethod
    def _seed_state(config: ShellConfig) -> dict[str, Any]:
        search_path = list(config.search_path)
        directories = [config.home, *SEED_DIRECTORIES, *search_path]
        return {
            "filesystem": VirtualFileSystem.seeded(directories),
            "environment": EnvironmentStore.seeded(
                home=config.home, user=config.user, search_path=search_path
            ),
            "search_path": search_path,
            "current_directory": config.home,
        }

    # ===== Command Execution =====

    def execute(self, line: str) -> list[CommandResult]:
        """Run a submitted line and record its results.

        Each result is appended to history unless it has suppress_record
        set, in which case history is erased at that point.

        Args:
            line: The raw command line.

        Returns:
            One CommandResult per sub-command, including suppressed ones.
        """
        with self._operation_lock:
            results = Dispatcher(self).execute(line)

            for result in results:
                if result.suppress_record:
                    self.history.clear()
                else:
                    self.history.append(HistoryEntry.from_result(result))

        if results:
            failed = sum(1 for result in results if result.is_error)
            logger.info(
                f"Session {self.session_id} executed {line.strip()!r}: "
                f"{len(results)} command(s), {failed} failed"
            )
        return results

    def set_search_path(self, directories: list[str]) -> None:
        """Replace the search path and keep PATH in sync."""
        self.search_path = list(directories)
        self.environment.sync_search_path(self.search_path)

    # ===== History =====

    def get_history(self) -> list[HistoryEntry]:
        return list(self.history)

    def clear_history(self) -> int:
        """Erase history.

        Returns:
            The number of entries removed.
        """
        with self._operation_lock:
            removed = len(self.history)
            self.history.clear()
        return removed

    # ===== Lifecycle =====

    def reset(self) -> None:
        """Restore the seeded state from config and erase history."""
        with self._operation_lock:
            state = self._seed_state(self.config)
            self.filesystem = state["filesystem"]
            self.environment = state["environment"]
            self.search_path = state["search_path"]
            self.current_directory = state["current_directory"]
            self.history = []

        logger.info(f"Session {self.session_id} reset")

    # ===== Inspection =====

    def get_snapshot(self) -> dict[str, Any]:
        """Return a JSON-serializable snapshot of the session state."""
        return {
            "session_id": self.session_id,
            "current_directory": self.current_directory,
            "search_path": list(self.search_path),
            "environment": self.environment.get_snapshot(),
            "filesystem": self.filesystem.get_snapshot(),
            "history_count": len(self.history),
        }

    def validate(self) -> list[str]:
        """Check session consistency.

        Returns:
            List of problems found (empty if valid).
        """
        errors = [f"filesystem: {e}" for e in self.filesystem.validate_state()]
        errors.extend(
            f"environment: {e}"
            for e in self.environment.validate_state(self.search_path)
        )
        if not self.filesystem.is_directory(self.current_directory):
            errors.append(
                f"current directory {self.current_directory} is not a directory"
            )
        return errors
