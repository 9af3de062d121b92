from __future__ import annotations

import os
import tempfile
import unittest
from typing import Any

import pymysql.converters

from mini_mysql import Config, Database, MySQLDialect, connect
from mini_mysql.connection import text_conversions


class _FakeConn:
    def __init__(self, *, ping_error: Exception | None = None):
        self.ping_error = ping_error
        self.ping_calls: list[bool] = []
        self.closed = False

    def ping(self, reconnect: bool = True) -> None:
        self.ping_calls.append(reconnect)
        if self.ping_error is not None:
            raise self.ping_error

    def close(self) -> None:
        self.closed = True


class ConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = Config()
        self.assertEqual(cfg.host, "127.0.0.1")
        self.assertEqual(cfg.port, 3306)
        self.assertIsNone(cfg.socket)
        self.assertEqual(cfg.target(), "tcp(127.0.0.1:3306)")

    def test_from_mapping_accepts_config_file_keys(self) -> None:
        cfg = Config.from_mapping(
            {"host": "db", "port": "3307", "name": "app", "user": "svc", "pass": "s3cret"}
        )
        self.assertEqual(cfg, Config(host="db", port=3307, name="app", user="svc", password="s3cret"))

    def test_from_mapping_rejects_unknown_keys_and_bad_ports(self) -> None:
        with self.assertRaises(ValueError):
            Config.from_mapping({"hots": "db"})
        with self.assertRaises(ValueError):
            Config.from_mapping({"port": "mysql"})
        with self.assertRaises(ValueError):
            Config(port=0)
        with self.assertRaises(ValueError):
            Config(port=True)  # type: ignore[arg-type]

    def test_socket_wins_over_host(self) -> None:
        cfg = Config(socket="/run/mysqld/mysqld.sock", name="app", user="u")
        kwargs = cfg.connect_kwargs()
        self.assertEqual(kwargs["unix_socket"], "/run/mysqld/mysqld.sock")
        self.assertNotIn("host", kwargs)
        self.assertEqual(cfg.target(), "unix(/run/mysqld/mysqld.sock)")

    def test_tcp_connect_kwargs(self) -> None:
        kwargs = Config(name="app", user="u", password="p").connect_kwargs()
        self.assertEqual(
            kwargs,
            {
                "user": "u",
                "password": "p",
                "database": "app",
                "charset": "utf8",
                "host": "127.0.0.1",
                "port": 3306,
            },
        )

    def test_repr_hides_password(self) -> None:
        self.assertNotIn("s3cret", repr(Config(password="s3cret")))

    def test_from_yaml(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "db.yaml")
            with open(path, "w", encoding="utf-8") as f:
                f.write("mysql:\n  socket: /tmp/mysql.sock\n  name: app\n  user: svc\n  pass: pw\n")

            cfg = Config.from_yaml(path, section="mysql")
            self.assertEqual(cfg.socket, "/tmp/mysql.sock")
            self.assertEqual(cfg.password, "pw")

            with open(path, "w", encoding="utf-8") as f:
                f.write("")
            self.assertEqual(Config.from_yaml(path), Config())


class ConnectTests(unittest.TestCase):
    def test_connect_pings_and_wraps(self) -> None:
        fake = _FakeConn()
        calls: list[dict[str, Any]] = []

        def connect_fn(**kwargs: Any) -> _FakeConn:
            calls.append(kwargs)
            return fake

        with self.assertLogs("mini_mysql.connection", level="INFO") as logs:
            db = connect(Config(name="app", password="pw"), debug=True, connect_fn=connect_fn)

        self.assertIsInstance(db, Database)
        self.assertIsInstance(db.dialect, MySQLDialect)
        self.assertTrue(db.debug)
        self.assertEqual(fake.ping_calls, [False])
        self.assertEqual(calls[0]["database"], "app")
        self.assertEqual(calls[0]["conv"], text_conversions())
        self.assertFalse(any("pw" in line for line in logs.output))

    def test_connect_closes_on_failed_ping(self) -> None:
        fake = _FakeConn(ping_error=pymysql.err.OperationalError(2003, "Can't connect"))
        with self.assertLogs("mini_mysql.connection", level="ERROR"):
            with self.assertRaises(pymysql.err.OperationalError):
                connect(Config(), connect_fn=lambda **_: fake)
        self.assertTrue(fake.closed)

    def test_text_conversions_keep_only_encoders(self) -> None:
        conv = text_conversions()
        self.assertIn(str, conv)
        self.assertTrue(all(not isinstance(key, int) for key in conv))
        self.assertEqual(conv, dict(pymysql.converters.encoders))


if __name__ == "__main__":
    unittest.main()
