"""DB-API adapter and dialect exports."""

from .database import Database
from .dialects import Dialect, MySQLDialect

__all__ = [
    "Database",
    "Dialect",
    "MySQLDialect",
]
