"""Basic select/insert/update/delete with condition maps (runs on SQLite)."""

from __future__ import annotations

import logging
import sqlite3
import sys
from pathlib import Path

# Allow running this script directly from repository root.
PROJECT_ROOT = next(
    (parent for parent in Path(__file__).resolve().parents if (parent / "mini_mysql").exists()),
    None,
)
if PROJECT_ROOT and str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from mini_mysql import Client, Database, MySQLDialect, parse_uint32


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # SQLite understands backtick identifiers and `LIMIT offset, count`, so the
    # MySQL dialect works here with `?` placeholders.
    db = Database(sqlite3.connect(":memory:"), MySQLDialect(paramstyle="qmark"), debug=True)
    client = Client(db)

    try:
        # 1) Create a table with a hand-written statement.
        client.exec(
            "CREATE TABLE `users` (`id` INTEGER PRIMARY KEY, `email` TEXT, "
            "`status` TEXT, `meta` TEXT, `visits` INTEGER);"
        )

        # 2) Insert rows. Dict values are stored as compact JSON.
        for email, status, visits in [
            ("alice@example.com", "active", 12),
            ("bob@example.com", None, 3),
            ("carol@example.com", "banned", 40),
        ]:
            result = client.insert(
                "users",
                {"email": email, "status": status, "visits": visits, "meta": {"src": "demo"}},
            )
            print("Inserted id:", result.lastrowid)

        # 3) None => IS NULL, list => IN(...), everything else => = ?.
        print("No status:", client.select("users", {"status": None}))
        print("Some ids:", client.select("users", {"id": [1, 3]}, {"column": "email"}))

        # 4) Paging: LIMIT <offset>, <limit>.
        page = client.select("users", None, {"columns": ["id", "email"], "order": "id", "limit": 2, "offset": 1})
        print("Page 2:", page)

        # 5) Values come back as text; convert explicitly.
        row = client.first("users", {"email": "carol@example.com"})
        if row is not None:
            print("Carol visits:", parse_uint32(row["visits"]))

        # 6) Update and delete.
        print("Updated:", client.update("users", {"status": "active"}, {"status": None}).rowcount)
        print("Deleted:", client.delete("users", {"status": "banned"}).rowcount)
        print("Remaining:", client.select("users", None, {"column": "email", "order": "id"}))
    finally:
        db.close()


if __name__ == "__main__":
    main()
