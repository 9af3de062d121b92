"""SQL fragment builders for filtering, assignments, sorting, and paging.

This module centralizes SQL string compilation from condition maps, data maps,
and `QueryOptions`. It keeps `Client` focused on execution while making SQL
generation reusable and testable without a connection.

Every compiled fragment carries its bound parameters, and the number of
placeholders in `sql` always equals `len(params)`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple

from .contracts import DialectPort
from .options import OptionsInput, QueryOptions, coerce_options
from .types import PositionalParams, ValueMap
from .values import InList, Null, SqlValue, bind_value, sql_value


@dataclass(frozen=True)
class CompiledFragment:
    """Represents a compiled SQL fragment with its bound parameters."""

    sql: str
    params: PositionalParams = field(default_factory=list)


def escape_id(identifier: str, *, ignore_dot: bool = False, quote_char: str = "`") -> str:
    """Escape a SQL identifier (table or column name) for use in a query.

    The identifier is split on `.` and each part is quoted on its own, so
    qualified names keep their meaning. Embedded quote characters are doubled.

    Args:
        identifier: Table or column name.
        ignore_dot: Quote the whole identifier as one unit, for names that
            legitimately contain a dot.
        quote_char: Identifier quote character of the target dialect.

    Returns:
        The quoted identifier.

    Example:
        >>> escape_id("INFORMATION_SCHEMA.COLUMNS")
        '`INFORMATION_SCHEMA`.`COLUMNS`'
        >>> escape_id("some.weird.column", ignore_dot=True)
        '`some.weird.column`'
    """

    if ignore_dot:
        return _quote(identifier, quote_char)
    return ".".join(_quote(part, quote_char) for part in identifier.split("."))


def compile_where(where: Optional[ValueMap], dialect: DialectPort) -> CompiledFragment:
    """Compile a condition map into a SQL `WHERE` fragment.

    Entries are combined using `AND` in the mapping's iteration order.

    Args:
        where: Column name to value mapping, or `None`.
        dialect: SQL dialect used for identifier quoting and placeholders.

    Returns:
        A compiled SQL fragment and parameters. Empty fragment if no condition.
    """

    if not where:
        return CompiledFragment("")

    clauses: List[str] = []
    params: PositionalParams = []
    for col, raw in where.items():
        clause, fragment_params = _compile_condition(col, sql_value(raw), dialect)
        clauses.append(clause)
        params.extend(fragment_params)

    return CompiledFragment(f" WHERE {' AND '.join(clauses)}", params)


def compile_set(data: ValueMap, dialect: DialectPort) -> CompiledFragment:
    """Compile a data map into comma-joined `SET` assignments.

    Columns are emitted in lexicographic order so the same data map always
    produces the same statement. `None` values become `= NULL` without a
    placeholder.

    Raises:
        ValueError: If `data` is empty.
    """

    _require_data(data)
    assignments: List[str] = []
    params: PositionalParams = []
    for col in sorted(data):
        value = sql_value(data[col])
        if isinstance(value, Null):
            assignments.append(f"{dialect.q(col)} = NULL")
            continue
        assignments.append(f"{dialect.q(col)} = {dialect.placeholder()}")
        params.append(bind_value(value))
    return CompiledFragment(", ".join(assignments), params)


def compile_columns(options: QueryOptions, dialect: DialectPort) -> str:
    """Compile the output column list (`column` wins over `columns`)."""

    if options.column:
        return dialect.q(options.column)
    if options.columns:
        return ", ".join(dialect.q(col) for col in options.columns)
    return "*"


def compile_order_by(options: QueryOptions) -> str:
    """Compile `ORDER BY` clause. The expression is trusted and not escaped."""

    if not options.order:
        return ""
    return f" ORDER BY {options.order}"


def compile_limit(options: QueryOptions, *, with_offset: bool) -> str:
    """Compile `LIMIT` clause.

    Args:
        options: Query options; `offset` is only honored together with `limit`.
        with_offset: Render `LIMIT <offset>, <limit>` (SELECT). MySQL does not
            accept an offset for UPDATE/DELETE, which get plain `LIMIT <limit>`.

    Returns:
        SQL `LIMIT` fragment or an empty string.
    """

    if options.limit is None:
        return ""
    if with_offset:
        offset = options.offset or 0
        return f" LIMIT {offset}, {options.limit}"
    return f" LIMIT {options.limit}"


def build_select(
    table: str,
    where: Optional[ValueMap],
    options: OptionsInput,
    dialect: DialectPort,
) -> CompiledFragment:
    """Build `SELECT <columns> FROM <table><where><order><limit>;`."""

    opts = coerce_options(options)
    where_fragment = compile_where(where, dialect)
    sql = (
        f"SELECT {compile_columns(opts, dialect)} FROM {dialect.q(table)}"
        f"{where_fragment.sql}{compile_order_by(opts)}"
        f"{compile_limit(opts, with_offset=True)};"
    )
    return CompiledFragment(sql, where_fragment.params)


def build_insert(table: str, data: ValueMap, dialect: DialectPort) -> CompiledFragment:
    """Build `INSERT INTO <table>(<cols>) VALUES(<placeholders>);`."""

    _require_data(data)
    columns = sorted(data)
    params = [_insert_value(sql_value(data[col])) for col in columns]
    column_sql = ", ".join(dialect.q(col) for col in columns)
    placeholders = ", ".join(dialect.placeholder() for _ in columns)
    sql = f"INSERT INTO {dialect.q(table)}({column_sql}) VALUES({placeholders});"
    return CompiledFragment(sql, params)


def build_insert_row(table: str, data: ValueMap, dialect: DialectPort) -> CompiledFragment:
    """Build `INSERT INTO <table> SET <assignments>;`.

    The table name is rendered as given, so callers may pass an already
    qualified or quoted name.
    """

    assignments = compile_set(data, dialect)
    return CompiledFragment(f"INSERT INTO {table} SET {assignments.sql};", assignments.params)


def build_update(
    table: str,
    data: ValueMap,
    where: Optional[ValueMap],
    options: OptionsInput,
    dialect: DialectPort,
) -> CompiledFragment:
    """Build `UPDATE`; parameters are the SET values followed by WHERE values."""

    opts = coerce_options(options)
    assignments = compile_set(data, dialect)
    where_fragment = compile_where(where, dialect)
    sql = (
        f"UPDATE {dialect.q(table)} SET {assignments.sql}"
        f"{where_fragment.sql}{compile_order_by(opts)}"
        f"{compile_limit(opts, with_offset=False)};"
    )
    return CompiledFragment(sql, assignments.params + where_fragment.params)


def build_delete(
    table: str,
    where: Optional[ValueMap],
    options: OptionsInput,
    dialect: DialectPort,
) -> CompiledFragment:
    """Build `DELETE FROM <table><where><order><limit>;`."""

    opts = coerce_options(options)
    where_fragment = compile_where(where, dialect)
    sql = (
        f"DELETE FROM {dialect.q(table)}{where_fragment.sql}"
        f"{compile_order_by(opts)}{compile_limit(opts, with_offset=False)};"
    )
    return CompiledFragment(sql, where_fragment.params)


def _compile_condition(
    col: str,
    value: SqlValue,
    dialect: DialectPort,
) -> Tuple[str, PositionalParams]:
    """Compile one condition map entry into SQL and parameters."""

    col_sql = dialect.q(col)

    if isinstance(value, Null):
        return f"{col_sql} IS NULL", []

    if isinstance(value, InList):
        if not value.items:
            return "1=0", []
        placeholders = ", ".join(dialect.placeholder() for _ in value.items)
        return f"{col_sql} IN({placeholders})", list(value.items)

    return f"{col_sql} = {dialect.placeholder()}", [bind_value(value)]


def _insert_value(value: SqlValue) -> Any:
    if isinstance(value, Null):
        return None
    return bind_value(value)


def _require_data(data: Mapping[str, Any]) -> None:
    if not data:
        raise ValueError("Data map must contain at least one column.")


def _quote(part: str, quote_char: str) -> str:
    return f"{quote_char}{part.replace(quote_char, quote_char * 2)}{quote_char}"
