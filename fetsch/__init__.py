"""Stateless helpers for a data-access layer."""

from .core import (
    DEFAULT_DIALECT,
    DEFAULT_PRIMARY_KEY,
    SLUG_TRANSLITERATION,
    TOKEN_PATTERN,
    PreparedStatement,
    StatementMode,
    dump_json_fields,
    only,
    parse_json_fields,
    prepare_statement,
    slugify,
    str_format,
)
from .ports.db_api.dialects import Dialect, MySQLDialect, PostgresDialect, SQLiteDialect

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_DIALECT",
    "DEFAULT_PRIMARY_KEY",
    "SLUG_TRANSLITERATION",
    "TOKEN_PATTERN",
    "Dialect",
    "MySQLDialect",
    "PostgresDialect",
    "PreparedStatement",
    "SQLiteDialect",
    "StatementMode",
    "dump_json_fields",
    "only",
    "parse_json_fields",
    "prepare_statement",
    "slugify",
    "str_format",
]
