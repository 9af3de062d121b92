"""Public port exports for concrete adapter implementations."""

from .db_api import Database, Dialect, MySQLDialect

__all__ = [
    "Database",
    "Dialect",
    "MySQLDialect",
]
