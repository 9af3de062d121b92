from __future__ import annotations

import os
import unittest

from mini_mysql import Client, Config, QueryError, connect, parse_datetime, parse_uint32

HAS_MYSQL_SERVER = bool(os.getenv("MINI_MYSQL_HOST") or os.getenv("MINI_MYSQL_SOCKET"))


@unittest.skipUnless(HAS_MYSQL_SERVER, "set MINI_MYSQL_HOST to run against a MySQL server")
class ClientMySQLTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.config = Config(
            host=os.getenv("MINI_MYSQL_HOST", "127.0.0.1"),
            port=int(os.getenv("MINI_MYSQL_PORT", "3306")),
            socket=os.getenv("MINI_MYSQL_SOCKET") or None,
            name=os.getenv("MINI_MYSQL_DATABASE", "mini_mysql_test"),
            user=os.getenv("MINI_MYSQL_USER", "root"),
            password=os.getenv("MINI_MYSQL_PASSWORD", "password"),
        )

    def setUp(self) -> None:
        self.db = connect(self.config)
        self.client = Client(self.db)
        self.client.exec("DROP TABLE IF EXISTS `mini_mysql_users`;")
        self.client.exec(
            "CREATE TABLE `mini_mysql_users` ("
            "`id` INT AUTO_INCREMENT PRIMARY KEY, "
            "`email` VARCHAR(255) NOT NULL, "
            "`status` VARCHAR(32) NULL, "
            "`meta` JSON NULL, "
            "`visits` INT UNSIGNED NOT NULL DEFAULT 0, "
            "`created_at` DATETIME(3) NOT NULL DEFAULT CURRENT_TIMESTAMP(3));"
        )

    def tearDown(self) -> None:
        self.client.exec("DROP TABLE IF EXISTS `mini_mysql_users`;")
        self.db.conn.commit()
        self.db.close()

    def test_crud_roundtrip(self) -> None:
        inserted = self.client.insert("mini_mysql_users", {"email": "a@example.com", "visits": 3})
        self.assertEqual(inserted.lastrowid, 1)
        self.client.insert_row(
            "mini_mysql_users", {"email": "b@example.com", "status": None, "visits": 7}
        )

        row = self.client.first("mini_mysql_users", {"email": "b@example.com"})
        self.assertIsNotNone(row)
        assert row is not None
        self.assertEqual(row["id"], "2")
        self.assertIsNone(row["status"])
        self.assertEqual(parse_uint32(row["visits"]), 7)
        self.assertGreaterEqual(parse_datetime(row["created_at"]).year, 2024)

        updated = self.client.update_first(
            "mini_mysql_users", {"status": "active"}, {"status": None}, {"order": "id"}
        )
        self.assertEqual(updated.rowcount, 1)

        page = self.client.select(
            "mini_mysql_users", None, {"column": "email", "order": "id", "limit": 1, "offset": 1}
        )
        self.assertEqual(page, [{"email": "b@example.com"}])

        deleted = self.client.delete_first("mini_mysql_users", {"id": [1, 2]}, {"order": "id"})
        self.assertEqual(deleted.rowcount, 1)
        self.assertEqual(len(self.client.select("mini_mysql_users")), 1)

    def test_driver_error_detail(self) -> None:
        with self.assertRaises(QueryError) as ctx:
            self.client.select("mini_mysql_missing", {"id": 1})
        self.assertIsNotNone(ctx.exception.detail)
        assert ctx.exception.detail is not None
        self.assertEqual(ctx.exception.detail.code, 1146)
        self.assertEqual(ctx.exception.values, (1,))


if __name__ == "__main__":
    unittest.main()
