"""Connect to MySQL from a YAML config file and run a few helpers.

Usage:
    python examples/02_mysql_config.py path/to/config.yaml

The file holds a `mysql` section with `host`, `port`, `socket`, `name`,
`user` and `pass` keys.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Allow running this script directly from repository root.
PROJECT_ROOT = next(
    (parent for parent in Path(__file__).resolve().parents if (parent / "mini_mysql").exists()),
    None,
)
if PROJECT_ROOT and str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from mini_mysql import Client, Config, QueryError, connect


def main(argv: list[str]) -> int:
    logging.basicConfig(level=logging.INFO)
    if len(argv) != 2:
        print(__doc__)
        return 2

    config = Config.from_yaml(argv[1], section="mysql")
    db = connect(config, debug=True)
    client = Client(db)
    try:
        tables = client.select(
            "INFORMATION_SCHEMA.TABLES",
            {"TABLE_SCHEMA": config.name},
            {"column": "TABLE_NAME", "order": "TABLE_NAME"},
        )
        print("Tables:", [row["TABLE_NAME"] for row in tables])

        try:
            client.select("table_that_does_not_exist")
        except QueryError as exc:
            print("Failed query:", exc.query, "detail:", exc.detail)
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
