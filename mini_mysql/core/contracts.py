"""Core port contracts used by adapters and the client."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Any, Optional, Protocol

from .types import MaybeRow, QueryParams, Rows


class DialectPort(Protocol):
    """Dialect behavior required by query compilation."""

    name: str
    paramstyle: str
    quote_char: str

    def q(self, ident: str, *, ignore_dot: bool = False) -> str: ...

    def placeholder(self) -> str: ...

    def get_lastrowid(self, cursor: Any) -> Optional[int]: ...


@dataclass(frozen=True)
class ExecResult:
    """Summary of an executed statement."""

    rowcount: int
    lastrowid: Optional[int] = None


class DatabasePort(Protocol):
    """Database adapter behavior required by the client."""

    dialect: DialectPort

    def cursor(self, sql: str, params: QueryParams = None) -> AbstractContextManager[Any]: ...

    def execute(self, sql: str, params: QueryParams = None) -> ExecResult: ...

    def fetchone(self, sql: str, params: QueryParams = None) -> MaybeRow: ...

    def fetchall(self, sql: str, params: QueryParams = None) -> Rows: ...
