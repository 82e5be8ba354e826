"""Parameterized INSERT / UPDATE / upsert statement assembly.

The builder only assembles strings: it never validates identifiers against a
schema and never talks to a database. Statement text and bound values are
produced together so that the position of every placeholder matches the
position of its value.

Example:
    >>> statement, values = prepare_statement({"id": 1, "name": "x"}, "odu", "id", "users")
    >>> statement
    'INSERT INTO `users` (`id`, `name`) VALUES (?, ?) ON DUPLICATE KEY UPDATE `name`=?'
    >>> values
    [1, 'x', 'x']
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List, Optional, Tuple

import structlog

from ..ports.db_api.dialects import MySQLDialect
from .contracts import DialectPort
from .types import PrimaryKey, Source, StatementValues

logger = structlog.get_logger(__name__)

DEFAULT_PRIMARY_KEY = "id"
DEFAULT_DIALECT = MySQLDialect()


class StatementMode(str, Enum):
    """Supported statement shapes."""

    INSERT = "insert"
    ODU = "odu"
    UPD = "upd"


@dataclass(frozen=True)
class PreparedStatement:
    """SQL fragment with its positional values, unpackable as a pair."""

    statement: str
    values: StatementValues

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[Any]:
        yield self.statement
        yield self.values


def prepare_statement(
    source: Source,
    mode: StatementMode | str | None = StatementMode.INSERT,
    primary: PrimaryKey = DEFAULT_PRIMARY_KEY,
    table_name: Optional[str] = None,
    *,
    dialect: Optional[DialectPort] = None,
) -> PreparedStatement:
    """Build a parameterized statement and its values from a row.

    Args:
        source: Column/value pairs. A mapping is read in iteration order; an
            iterable of `(column, value)` pairs can be passed when the order
            must be explicit.
        mode: `insert` (default), `upd` (UPDATE ... WHERE primary key) or
            `odu` (INSERT ... ON DUPLICATE KEY UPDATE). Unknown modes build an
            insert.
        primary: Primary key column, or list of columns for a compound key.
        table_name: When given, the statement is prefixed with
            `INSERT INTO <table>` / `UPDATE <table>`; otherwise only the
            column/value part is returned for the caller to embed.
        dialect: Quoting and placeholder rules. Defaults to MySQL style
            (backticks and `?`).

    Returns:
        A `PreparedStatement` whose `values` align with the placeholders.
    """

    dialect = dialect or DEFAULT_DIALECT
    items = _ordered_items(source)
    resolved = _resolve_mode(mode)

    if resolved is StatementMode.UPD:
        return _build_update(items, _primary_columns(primary), table_name, dialect)
    if resolved is StatementMode.ODU:
        return _build_upsert(items, _primary_columns(primary), table_name, dialect)
    return _build_insert(items, table_name, dialect)


def _build_insert(
    items: List[Tuple[str, Any]],
    table_name: Optional[str],
    dialect: DialectPort,
) -> PreparedStatement:
    statement = _insert_prefix(table_name, dialect) + _columns_and_values(items, dialect)
    return PreparedStatement(statement, [value for _, value in items])


def _build_update(
    items: List[Tuple[str, Any]],
    primary: List[str],
    table_name: Optional[str],
    dialect: DialectPort,
) -> PreparedStatement:
    updatable = [(key, value) for key, value in items if key not in primary]
    row = dict(items)

    set_sql = ", ".join(_assignment(key, dialect) for key, _ in updatable)
    where_sql = " AND ".join(_assignment(key, dialect) for key in primary)

    statement = f"SET {set_sql} WHERE {where_sql}"
    if table_name:
        statement = f"UPDATE {dialect.q(table_name)} {statement}"

    values = [value for _, value in updatable]
    values.extend(row.get(key) for key in primary)
    return PreparedStatement(statement, values)


def _build_upsert(
    items: List[Tuple[str, Any]],
    primary: List[str],
    table_name: Optional[str],
    dialect: DialectPort,
) -> PreparedStatement:
    updatable = [(key, value) for key, value in items if key not in primary]

    update_sql = ", ".join(_assignment(key, dialect) for key, _ in updatable)
    statement = (
        _insert_prefix(table_name, dialect)
        + _columns_and_values(items, dialect)
        + f" ON DUPLICATE KEY UPDATE {update_sql}"
    )

    # Insert values first, then the update values in the same column order.
    values = [value for _, value in items]
    values.extend(value for _, value in updatable)
    return PreparedStatement(statement, values)


def _insert_prefix(table_name: Optional[str], dialect: DialectPort) -> str:
    if table_name:
        return f"INSERT INTO {dialect.q(table_name)} "
    return ""


def _columns_and_values(items: List[Tuple[str, Any]], dialect: DialectPort) -> str:
    columns = ", ".join(dialect.q(key) for key, _ in items)
    placeholders = ", ".join(dialect.placeholder(key) for key, _ in items)
    return f"({columns}) VALUES ({placeholders})"


def _assignment(key: str, dialect: DialectPort) -> str:
    return f"{dialect.q(key)}={dialect.placeholder(key)}"


def _ordered_items(source: Source) -> List[Tuple[str, Any]]:
    if isinstance(source, Mapping):
        return [(str(key), value) for key, value in source.items()]
    return [(str(key), value) for key, value in source]


def _primary_columns(primary: Any) -> List[str]:
    """Normalize a primary key argument into a list of column names."""

    if isinstance(primary, str):
        return [primary]
    if isinstance(primary, (list, tuple)):
        return [str(item) for item in primary]
    return [str(primary)]


def _resolve_mode(mode: StatementMode | str | None) -> StatementMode:
    if mode is None:
        return StatementMode.INSERT
    if isinstance(mode, StatementMode):
        return mode
    try:
        return StatementMode(mode)
    except ValueError:
        logger.debug("statement_mode_fallback", mode=mode, fallback=StatementMode.INSERT.value)
        return StatementMode.INSERT
