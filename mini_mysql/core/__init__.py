"""Public core API for query building, execution, and value conversion."""

from .client import Client
from .contracts import DatabasePort, DialectPort, ExecResult
from .converters import parse_datetime, parse_uint32
from .errors import DriverErrorDetail, ParseError, QueryError
from .options import OptionsInput, QueryOptions, coerce_options
from .query_builder import (
    CompiledFragment,
    build_delete,
    build_insert,
    build_insert_row,
    build_select,
    build_update,
    compile_columns,
    compile_limit,
    compile_order_by,
    compile_set,
    compile_where,
    escape_id,
)
from .values import NULL, InList, Null, Scalar, SqlValue, Structured, sql_value

__all__ = [
    "Client",
    "CompiledFragment",
    "DatabasePort",
    "DialectPort",
    "DriverErrorDetail",
    "ExecResult",
    "InList",
    "NULL",
    "Null",
    "OptionsInput",
    "ParseError",
    "QueryError",
    "QueryOptions",
    "Scalar",
    "SqlValue",
    "Structured",
    "build_delete",
    "build_insert",
    "build_insert_row",
    "build_select",
    "build_update",
    "coerce_options",
    "compile_columns",
    "compile_limit",
    "compile_order_by",
    "compile_set",
    "compile_where",
    "escape_id",
    "parse_datetime",
    "parse_uint32",
    "sql_value",
]
