"""Table-level query helpers built on the query builder and a database port."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any, Optional

from .contracts import DatabasePort, DialectPort, ExecResult
from .options import OptionsInput, QueryOptions, coerce_options
from .query_builder import (
    build_delete,
    build_insert,
    build_insert_row,
    build_select,
    build_update,
)
from .types import MaybeRow, QueryParams, Rows, ValueMap


class Client:
    """Build and run SELECT/INSERT/UPDATE/DELETE statements from plain maps.

    Condition maps translate each entry by value: `None` to `IS NULL`, a list or
    tuple to `IN(...)`, a dict to its JSON text, anything else to `= ?`.

    Example:
        >>> client = Client(db)
        >>> rows = client.select(
        ...     "products",
        ...     {"user_id": 42},
        ...     {"order": "created_at DESC", "limit": 30},
        ... )
    """

    def __init__(self, db: DatabasePort):
        self.db = db

    @property
    def dialect(self) -> DialectPort:
        return self.db.dialect

    def select(
        self,
        table: str,
        where: Optional[ValueMap] = None,
        options: OptionsInput = None,
    ) -> Rows:
        """Return matching rows with every column value as text.

        Args:
            table: Table to read from.
            where: Condition map for the `WHERE` clause.
            options: `column`, `columns`, `order`, `limit`, and `offset`.
                `offset` is ignored without `limit`.

        Returns:
            Row mappings of column name to text (`None` for SQL `NULL`).
        """

        statement = build_select(table, where, options, self.dialect)
        return self.db.fetchall(statement.sql, statement.params)

    def first(
        self,
        table: str,
        where: Optional[ValueMap] = None,
        options: OptionsInput = None,
    ) -> MaybeRow:
        """Same as `select` with `limit` forced to 1; returns the row or `None`."""

        rows = self.select(table, where, _limit_one(options))
        if len(rows) == 1:
            return rows[0]
        return None

    def insert(self, table: str, data: ValueMap) -> ExecResult:
        """Insert one row using explicit column and placeholder lists."""

        statement = build_insert(table, data, self.dialect)
        return self.db.execute(statement.sql, statement.params)

    def insert_row(self, table: str, data: ValueMap) -> ExecResult:
        """Insert one row using the MySQL `INSERT ... SET` form."""

        statement = build_insert_row(table, data, self.dialect)
        return self.db.execute(statement.sql, statement.params)

    def update(
        self,
        table: str,
        data: ValueMap,
        where: Optional[ValueMap] = None,
        options: OptionsInput = None,
    ) -> ExecResult:
        """Update rows matching `where`; `order` and `limit` are honored."""

        statement = build_update(table, data, where, options, self.dialect)
        return self.db.execute(statement.sql, statement.params)

    def update_first(
        self,
        table: str,
        data: ValueMap,
        where: Optional[ValueMap] = None,
        options: OptionsInput = None,
    ) -> ExecResult:
        return self.update(table, data, where, _limit_one(options))

    def delete(
        self,
        table: str,
        where: Optional[ValueMap] = None,
        options: OptionsInput = None,
    ) -> ExecResult:
        """Delete rows matching `where`; `order` and `limit` are honored."""

        statement = build_delete(table, where, options, self.dialect)
        return self.db.execute(statement.sql, statement.params)

    def delete_first(
        self,
        table: str,
        where: Optional[ValueMap] = None,
        options: OptionsInput = None,
    ) -> ExecResult:
        return self.delete(table, where, _limit_one(options))

    def exec_query(self, sql: str, params: QueryParams = None) -> AbstractContextManager[Any]:
        """Run a hand-written query and yield the raw DB-API cursor.

        Useful when the caller wants driver-level type conversion. The cursor is
        closed when the `with` block exits.
        """

        return self.db.cursor(sql, params)

    def exec(self, sql: str, params: QueryParams = None) -> ExecResult:
        """Run a hand-written statement and return its execution summary."""

        return self.db.execute(sql, params)


def _limit_one(options: OptionsInput) -> QueryOptions:
    return coerce_options(options).with_limit_one()
