"""Concrete SQL dialects used to render prepared statements."""

from __future__ import annotations

from typing import Optional


PARAMSTYLES = frozenset({"qmark", "format"})


class Dialect:
    """Base dialect that defines identifier quoting and placeholder style."""

    name: str = "generic"
    paramstyle: str = "qmark"
    quote_char: str = '"'

    def __init__(self, *, paramstyle: Optional[str] = None) -> None:
        if paramstyle is not None:
            self.paramstyle = paramstyle
        if self.paramstyle not in PARAMSTYLES:
            raise ValueError(f"Unsupported paramstyle: {self.paramstyle}")

    def q(self, ident: str) -> str:
        """Quote SQL identifier."""

        return f"{self.quote_char}{ident}{self.quote_char}"

    def placeholder(self, key: str) -> str:
        """Return parameter placeholder for current param style."""

        if self.paramstyle == "format":
            return "%s"
        return "?"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(paramstyle={self.paramstyle!r})"


class MySQLDialect(Dialect):
    """MySQL dialect (backtick identifiers, `?` positional parameters)."""

    name = "mysql"
    paramstyle = "qmark"
    quote_char = "`"


class SQLiteDialect(Dialect):
    """SQLite dialect (double-quoted identifiers, `?` positional parameters)."""

    name = "sqlite"
    paramstyle = "qmark"
    quote_char = '"'


class PostgresDialect(Dialect):
    """PostgreSQL dialect (`%s` positional parameters)."""

    name = "postgres"
    paramstyle = "format"
    quote_char = '"'
