"""mini_mysql: parameterized SQL from plain maps over a single MySQL connection."""

from .config import Config
from .connection import connect, open_client
from .core import (
    NULL,
    Client,
    DriverErrorDetail,
    ExecResult,
    InList,
    Null,
    ParseError,
    QueryError,
    QueryOptions,
    Scalar,
    Structured,
    escape_id,
    parse_datetime,
    parse_uint32,
)
from .ports import Database, Dialect, MySQLDialect

__all__ = [
    "Client",
    "Config",
    "Database",
    "Dialect",
    "DriverErrorDetail",
    "ExecResult",
    "InList",
    "MySQLDialect",
    "NULL",
    "Null",
    "ParseError",
    "QueryError",
    "QueryOptions",
    "Scalar",
    "Structured",
    "connect",
    "escape_id",
    "open_client",
    "parse_datetime",
    "parse_uint32",
]
