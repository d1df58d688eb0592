"""Exception hierarchy for the WitsShell API client.

Exception Hierarchy:
    WitsShellClientError (base)
    ├── ConnectionError - Network/connection failures
    ├── TimeoutError - Request timeout
    └── APIError - Server returned an error response
        ├── ValidationError (HTTP 422)
        ├── NotFoundError (HTTP 404)
        └── ServerError (HTTP 5xx)

A command that fails inside the shell is NOT an exception: it comes back as
a result with is_error set. These exceptions only signal that a request
could not be served.

Example:
    try:
        client.filesystem.get_node("/missing")
    except NotFoundError as e:
        print(f"No such path: {e.response_body['requested_path']}")
"""

from typing import Any


class WitsShellClientError(Exception):
    """Base exception for all client errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def _extras(self) -> list[str]:
        return []

    def __str__(self) -> str:
        extras = self._extras()
        if not extras:
            return self.message
        return f"{self.message} ({', '.join(extras)})"


class ConnectionError(WitsShellClientError):
    """The server could not be reached.

    Attributes:
        url: The URL that failed to connect.
        cause: The underlying httpx exception.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.url = url
        self.cause = cause
        super().__init__(message)

    def _extras(self) -> list[str]:
        return [f"url: {self.url}"] if self.url else []


class TimeoutError(WitsShellClientError):
    """The request did not complete within the client timeout.

    Attributes:
        timeout: The timeout value in seconds.
        url: The URL that timed out.
    """

    def __init__(
        self,
        message: str,
        timeout: float | None = None,
        url: str | None = None,
    ) -> None:
        self.timeout = timeout
        self.url = url
        super().__init__(message)

    def _extras(self) -> list[str]:
        extras = []
        if self.timeout is not None:
            extras.append(f"timeout: {self.timeout}s")
        if self.url:
            extras.append(f"url: {self.url}")
        return extras


class APIError(WitsShellClientError):
    """The server answered with an error status.

    Attributes:
        status_code: HTTP status code.
        error_type: The "error" (or "type") field of the body, if any.
        details: Parsed error body, if any.
        response_body: Raw response body for debugging.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        error_type: str | None = None,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.error_type = error_type
        self.details = details
        self.response_body = response_body
        super().__init__(message)

    def __str__(self) -> str:
        prefix = f"[HTTP {self.status_code}]"
        if self.error_type:
            prefix = f"{prefix} [{self.error_type}]"
        return f"{prefix} {self.message}"


class _FixedStatusError(APIError):
    """APIError whose status code and error type come from the subclass."""

    STATUS_CODE: int = 400
    ERROR_TYPE: str | None = None

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message,
            status_code=self.STATUS_CODE,
            error_type=self.ERROR_TYPE,
            details=details,
            response_body=response_body,
        )


class ValidationError(_FixedStatusError):
    """The request body or parameters were rejected (HTTP 422)."""

    STATUS_CODE = 422
    ERROR_TYPE = "validation_error"


class NotFoundError(_FixedStatusError):
    """Unknown path, unset variable or unresolvable command (HTTP 404)."""

    STATUS_CODE = 404
    ERROR_TYPE = "not_found"


class ServerError(APIError):
    """Server-side error (HTTP 5xx). 502/503/504 are retried when enabled."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message,
            status_code=status_code,
            error_type="server_error",
            details=details,
            response_body=response_body,
        )
