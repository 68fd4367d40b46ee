"""
Domain-specific errors for the confessions bounded context.

Per-request errors share one base class tagged with an ErrorKind.
The interface layer maps each kind to exactly one HTTP response.
No framework imports allowed.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Category of a per-request failure."""

    STORAGE = "storage"
    NOT_FOUND = "not_found"


class ConfessionBoardError(Exception):
    """Base error for all per-request failures.

    Attributes:
        kind: Category used to pick the HTTP response.
        message: Human-readable description of the failure.
        cause: The underlying exception, if any.
    """

    kind: ErrorKind

    def __init__(
        self, kind: ErrorKind, message: str, cause: Optional[BaseException] = None
    ) -> None:
        self.kind = kind
        self.message = message
        self.cause = cause
        super().__init__(self.message)


class StorageError(ConfessionBoardError):
    """Raised when the persistence layer fails (connection, query, constraint)."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(ErrorKind.STORAGE, str(cause), cause=cause)


class AssetNotFoundError(ConfessionBoardError):
    """Raised when a requested static asset does not exist under the asset root."""

    def __init__(self, path: str) -> None:
        super().__init__(ErrorKind.NOT_FOUND, f"No such file: {path}")
        self.path = path


class StartupConfigError(Exception):
    """Raised when required environment configuration is missing or invalid.

    Fatal: the process must abort before serving any request.
    Deliberately not a ConfessionBoardError.
    """

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__("; ".join(problems))
