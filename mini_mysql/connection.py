"""Open a PyMySQL connection and wrap it in a `Database` adapter."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

import pymysql
import pymysql.converters

from .config import Config
from .core.client import Client
from .ports.db_api.database import Database
from .ports.db_api.dialects import MySQLDialect

logger = logging.getLogger(__name__)


def text_conversions() -> dict[Any, Any]:
    """Converter table that keeps parameter encoders but no result decoders.

    PyMySQL then returns every column as the text the server sent.
    """

    return dict(pymysql.converters.encoders)


def connect(
    config: Optional[Config] = None,
    *,
    debug: bool = False,
    connect_fn: Callable[..., Any] = pymysql.connect,
) -> Database:
    """Open and ping a connection described by `config`.

    Args:
        config: Connection settings. Defaults to `Config()`.
        debug: Log every statement with its values before execution.
        connect_fn: DB-API `connect` callable; must accept PyMySQL arguments.

    Returns:
        A `Database` using `MySQLDialect` (`%s` placeholders).

    Raises:
        pymysql.err.MySQLError: If the server cannot be reached.
    """

    cfg = config or Config()
    logger.info("Connecting to MySQL at %s, database %r", cfg.target(), cfg.name)
    conn = connect_fn(**cfg.connect_kwargs(), conv=text_conversions())
    try:
        conn.ping(reconnect=False)
    except Exception:
        logger.exception("MySQL ping failed for %s", cfg.target())
        conn.close()
        raise
    return Database(conn, MySQLDialect(), debug=debug)


def open_client(config: Optional[Config] = None, *, debug: bool = False) -> Client:
    """Shortcut for `Client(connect(config, debug=debug))`."""

    return Client(connect(config, debug=debug))
