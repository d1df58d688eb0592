"""Environment variable store."""

from typing import Any

from pydantic import BaseModel, Field

PATH_SEPARATOR = ":"
REQUIRED_VARIABLES = ("HOME", "USER", "PATH")


class EnvironmentStore(BaseModel):
    """Mapping of variable name to value.

    Supplies values for $VAR substitution and the output of the env builtin.
    Iteration order is insertion order. PATH is kept as the colon-join of the
    session's search path; use sync_search_path() rather than writing it
    directly.

    Args:
        variables: Variable name to string value.

    Example:
        >>> env = EnvironmentStore.seeded(home="/home/user", user="user", search_path=["/bin"])
        >>> env.get("HOME")
        '/home/user'
        >>> env.get("UNSET")
        ''
    """

    variables: dict[str, str] = Field(
        default_factory=dict, description="Variable name to value"
    )

    @classmethod
    def seeded(cls, home: str, user: str, search_path: list[str]) -> "EnvironmentStore":
        """Create a store holding HOME, USER and PATH."""
        return cls(
            variables={
                "HOME": home,
                "USER": user,
                "PATH": PATH_SEPARATOR.join(search_path),
            }
        )

    def get(self, name: str) -> str:
        """Return the value of name, or the empty string if it is unset."""
        return self.variables.get(name, "")

    def set(self, name: str, value: str) -> None:
        if not name:
            raise ValueError("Variable name must not be empty")
        self.variables[name] = value

    def has(self, name: str) -> bool:
        return name in self.variables

    def items(self) -> list[tuple[str, str]]:
        return list(self.variables.items())

    def sync_search_path(self, search_path: list[str]) -> None:
        """Rewrite PATH from the search path list ("" when empty)."""
        self.variables["PATH"] = PATH_SEPARATOR.join(search_path)

    def get_snapshot(self) -> dict[str, Any]:
        return dict(self.variables)

    def validate_state(self, search_path: list[str]) -> list[str]:
        """Check required variables and PATH consistency.

        Args:
            search_path: The session's current search path.

        Returns:
            List of problems found (empty if valid).
        """
        errors = [
            f"required variable {name} is missing"
            for name in REQUIRED_VARIABLES
            if name not in self.variables
        ]
        expected = PATH_SEPARATOR.join(search_path)
        if "PATH" in self.variables and self.variables["PATH"] != expected:
            errors.append(
                f"PATH '{self.variables['PATH']}' does not match search path '{expected}'"
            )
        return errors
