"""Error kinds reported by the service layer and the database failures it translates."""

from __future__ import annotations

from enum import Enum, auto


class Error(Enum):
    """Kinds of failure a delegate can report."""

    NOT_FOUND = auto()
    INVALID_FORMAT = auto()
    DUPLICATE = auto()
    UNPROCESSABLE_ENTITY = auto()
    UNKNOWN_ERROR = auto()


class ServiceError(Exception):
    """Raised by delegates; carries the kind of failure in ``error``."""

    def __init__(self, error: Error) -> None:
        super().__init__(error.name)
        self.error = error


class UniqueViolation(Exception):
    """A repository rejected a write because a unique constraint was violated."""

    def __init__(self, message: str, sqlstate: str) -> None:
        super().__init__(message)
        self.sqlstate = sqlstate


class DataException(Exception):
    """A repository rejected a value, for example a malformed identifier."""

    def __init__(self, message: str, sqlstate: str) -> None:
        super().__init__(message)
        self.sqlstate = sqlstate