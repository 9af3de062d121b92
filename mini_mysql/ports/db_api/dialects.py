"""Concrete SQL dialect implementations for DB-API adapters."""

from __future__ import annotations

from typing import Any, Optional

from ...core.query_builder import escape_id


class Dialect:
    """Base dialect that defines SQL quoting and placeholder behavior."""

    name: str = "generic"
    paramstyle: str = "qmark"
    quote_char: str = '"'

    def __init__(self, *, paramstyle: Optional[str] = None):
        """Create dialect.

        Args:
            paramstyle: Override the class paramstyle (`qmark` or `format`),
                for drivers that expect a different placeholder than the default.
        """

        if paramstyle is not None:
            self.paramstyle = paramstyle
        self.placeholder()

    def q(self, ident: str, *, ignore_dot: bool = False) -> str:
        """Quote SQL identifier, splitting `schema.table` unless `ignore_dot`.

        With the `format` paramstyle a `%` in the name is doubled, so the
        statement must be executed with a parameter list (possibly empty).
        """

        quoted = escape_id(ident, ignore_dot=ignore_dot, quote_char=self.quote_char)
        if self.paramstyle == "format":
            # `format` drivers interpolate with `query % args`; keep a literal `%`.
            return quoted.replace("%", "%%")
        return quoted

    def placeholder(self) -> str:
        """Return positional parameter placeholder for current param style."""

        if self.paramstyle == "qmark":
            return "?"
        if self.paramstyle == "format":
            return "%s"
        raise ValueError(f"Unsupported paramstyle: {self.paramstyle}")

    def get_lastrowid(self, cursor: Any) -> Optional[int]:
        """Extract `lastrowid` from DB-API cursor when available."""

        return getattr(cursor, "lastrowid", None)


class MySQLDialect(Dialect):
    """MySQL dialect (backtick identifiers, `%s` positional parameters)."""

    name = "mysql"
    paramstyle = "format"
    quote_char = "`"

    def get_lastrowid(self, cursor: Any) -> Optional[int]:
        # PyMySQL reports 0 when the statement generated no AUTO_INCREMENT id.
        lastrowid = getattr(cursor, "lastrowid", None)
        return lastrowid or None
