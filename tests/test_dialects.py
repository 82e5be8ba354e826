from __future__ import annotations

import unittest

import fetsch
from fetsch.ports.db_api.dialects import Dialect, MySQLDialect, PostgresDialect, SQLiteDialect


class _InvalidDialect(Dialect):
    paramstyle = "invalid"


class DialectTests(unittest.TestCase):
    def test_builtin_dialect_properties(self) -> None:
        self.assertEqual(MySQLDialect().placeholder("x"), "?")
        self.assertEqual(SQLiteDialect().placeholder("x"), "?")
        self.assertEqual(PostgresDialect().placeholder("x"), "%s")
        self.assertEqual(MySQLDialect().q("users"), "`users`")
        self.assertEqual(SQLiteDialect().q("users"), '"users"')

    def test_paramstyle_override(self) -> None:
        self.assertEqual(MySQLDialect(paramstyle="format").placeholder("x"), "%s")
        self.assertEqual(SQLiteDialect(paramstyle="format").placeholder("x"), "%s")
        self.assertEqual(MySQLDialect().paramstyle, "qmark")

    def test_invalid_paramstyle_raises(self) -> None:
        with self.assertRaises(ValueError):
            _InvalidDialect()
        with self.assertRaises(ValueError):
            Dialect(paramstyle="pyformat")

    def test_named_paramstyle_is_rejected(self) -> None:
        for dialect_cls in (Dialect, MySQLDialect, SQLiteDialect, PostgresDialect):
            with self.subTest(dialect=dialect_cls.__name__):
                with self.assertRaises(ValueError):
                    dialect_cls(paramstyle="named")

    def test_quoting_does_not_escape(self) -> None:
        self.assertEqual(MySQLDialect().q("a`b"), "`a`b`")

    def test_default_dialect_is_mysql_style(self) -> None:
        self.assertIsInstance(fetsch.DEFAULT_DIALECT, MySQLDialect)
        self.assertEqual(fetsch.DEFAULT_PRIMARY_KEY, "id")


if __name__ == "__main__":
    unittest.main()
