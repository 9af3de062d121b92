"""DB-API adapter implementation for the core database port."""

from __future__ import annotations

import contextlib
import logging
from typing import Any, Iterator, Mapping, Optional, Sequence

from ...core.contracts import ExecResult
from ...core.errors import QueryError, wrap_driver_error
from ...core.types import MaybeRow, QueryParams, RowMapping, Rows
from .dialects import Dialect

logger = logging.getLogger(__name__)


class Database:
    """Thin DB-API wrapper that normalizes execution, errors, and row mapping.

    One `Database` owns one driver connection. It adds no locking: concurrent
    use is only as safe as the underlying driver connection.
    """

    def __init__(self, conn: Any, dialect: Dialect, *, debug: bool = False):
        """Create database adapter.

        Args:
            conn: DB-API connection object.
            dialect: Concrete SQL dialect instance.
            debug: Log every statement and its bound values at INFO level
                before executing it.
        """

        self.conn: Any | None = conn
        self.dialect = dialect
        self.debug = debug
        self._closed = False

    def _require_open_connection(self) -> Any:
        if self._closed or self.conn is None:
            raise RuntimeError("connection is closed")
        return self.conn

    @contextlib.contextmanager
    def cursor(self, sql: str, params: QueryParams = None) -> Iterator[Any]:
        """Execute SQL and yield the raw cursor, closing it on every exit path.

        `params=None` sends the statement to the driver untouched; any list,
        even an empty one, is passed through for interpolation.

        Raises:
            QueryError: If the driver rejects the statement.
        """

        conn = self._require_open_connection()
        values = list(params or ())
        self._log_statement(sql, values)
        cur = conn.cursor()
        try:
            try:
                if params is None:
                    cur.execute(sql)
                else:
                    cur.execute(sql, values)
            except Exception as exc:
                raise self._wrap(exc, sql, values) from exc
            yield cur
        finally:
            _close_cursor(cur)

    def execute(self, sql: str, params: QueryParams = None) -> ExecResult:
        """Execute a statement and return its affected-rows / insert-id summary."""

        with self.cursor(sql, params) as cur:
            return ExecResult(
                rowcount=getattr(cur, "rowcount", -1),
                lastrowid=self.dialect.get_lastrowid(cur),
            )

    def fetchone(self, sql: str, params: QueryParams = None) -> MaybeRow:
        """Execute query and return one normalized row mapping."""

        with self.cursor(sql, params) as cur:
            try:
                row = cur.fetchone()
            except Exception as exc:
                raise self._wrap(exc, sql, list(params or ())) from exc
            if row is None:
                return None
            return self._row_to_mapping(cur, row)

    def fetchall(self, sql: str, params: QueryParams = None) -> Rows:
        """Execute query and return all rows as normalized text mappings."""

        with self.cursor(sql, params) as cur:
            try:
                rows = cur.fetchall()
            except Exception as exc:
                raise self._wrap(exc, sql, list(params or ())) from exc
            return [self._row_to_mapping(cur, r) for r in rows]

    def _row_to_mapping(self, cursor: Any, row: Any) -> RowMapping:
        """Normalize row object to a mapping of column name to text.

        Supports mapping rows directly and tuple/list rows via
        `cursor.description`. SQL `NULL` stays `None`.
        """

        if isinstance(row, Mapping):
            return {str(k): _to_text(v) for k, v in row.items()}

        if isinstance(row, (tuple, list)):
            desc = getattr(cursor, "description", None)
            if not desc:
                raise TypeError(
                    "Cursor has no description; cannot map tuple rows to dict."
                )
            cols = [d[0] for d in desc]
            return {col: _to_text(v) for col, v in zip(cols, row)}

        # sqlite3.Row and similar expose keys() without being a Mapping.
        keys = getattr(row, "keys", None)
        if callable(keys):
            return {str(k): _to_text(row[k]) for k in keys()}

        raise TypeError(f"Unsupported row type: {type(row)}")

    def _log_statement(self, sql: str, values: Sequence[Any]) -> None:
        if self.debug:
            logger.info("%s %r", sql, values)

    def _wrap(self, exc: Exception, sql: str, values: Sequence[Any]) -> QueryError:
        error = wrap_driver_error(exc, sql, values)
        logger.error("Query failed: %s", error)
        return error

    def close(self) -> None:
        """Close underlying connection. Safe to call more than once."""

        if self._closed:
            return
        conn = self.conn
        self._closed = True
        self.conn = None
        close = getattr(conn, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> Database:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()


def _to_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def _close_cursor(cur: Any) -> None:
    close = getattr(cur, "close", None)
    if callable(close):
        close()
