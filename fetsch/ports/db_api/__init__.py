"""DB-API facing dialect objects."""

from .dialects import Dialect, MySQLDialect, PostgresDialect, SQLiteDialect

__all__ = ["Dialect", "MySQLDialect", "PostgresDialect", "SQLiteDialect"]
