"""Exception types raised by the client and scalar converters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple


@dataclass(frozen=True)
class DriverErrorDetail:
    """Structured error reported by the database server or driver."""

    code: int
    message: str

    def __str__(self) -> str:
        return f"({self.code}) {self.message}"


class QueryError(RuntimeError):
    """Raised when executing a statement fails.

    Attributes:
        query: SQL text that was attempted.
        values: Parameters bound to the statement.
        detail: Driver error code and message, or `None` when the failure did
            not come from the driver (the original exception is `__cause__`).
    """

    def __init__(
        self,
        query: str,
        values: Sequence[Any],
        detail: Optional[DriverErrorDetail],
        cause: BaseException,
    ):
        self.query = query
        self.values: Tuple[Any, ...] = tuple(values)
        self.detail = detail
        self.cause = cause
        reason = str(detail) if detail is not None else f"{type(cause).__name__}: {cause}"
        super().__init__(f"{reason} [query={query!r} values={list(self.values)!r}]")


class ParseError(ValueError):
    """Raised when a textual column value cannot be converted."""


def driver_error_detail(exc: BaseException) -> Optional[DriverErrorDetail]:
    """Extract the driver error code and message from a DB-API exception.

    MySQLdb and PyMySQL carry `(errno, msg)` in `args`, mysql-connector exposes
    `errno`/`msg` attributes, and sqlite3 exposes `sqlite_errorcode`.
    """

    if isinstance(exc, OSError):
        return None

    errno = getattr(exc, "errno", None)
    if isinstance(errno, int):
        return DriverErrorDetail(errno, str(getattr(exc, "msg", None) or exc))

    args = getattr(exc, "args", ())
    if len(args) >= 2 and isinstance(args[0], int) and not isinstance(args[0], bool):
        return DriverErrorDetail(args[0], str(args[1]))

    sqlite_code = getattr(exc, "sqlite_errorcode", None)
    if isinstance(sqlite_code, int):
        return DriverErrorDetail(sqlite_code, str(exc))

    return None


def wrap_driver_error(exc: BaseException, query: str, values: Sequence[Any]) -> QueryError:
    """Build the `QueryError` raised for a failed statement."""

    return QueryError(query, values, driver_error_detail(exc), exc)
