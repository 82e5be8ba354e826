"""Public core API for row projection, statement building, and text helpers."""

from .codecs import dump_json_fields, parse_json_fields
from .fields import only
from .slugs import SLUG_TRANSLITERATION, slugify
from .statements import (
    DEFAULT_DIALECT,
    DEFAULT_PRIMARY_KEY,
    PreparedStatement,
    StatementMode,
    prepare_statement,
)
from .templates import TOKEN_PATTERN, str_format

__all__ = [
    "DEFAULT_DIALECT",
    "DEFAULT_PRIMARY_KEY",
    "PreparedStatement",
    "SLUG_TRANSLITERATION",
    "StatementMode",
    "TOKEN_PATTERN",
    "dump_json_fields",
    "only",
    "parse_json_fields",
    "prepare_statement",
    "slugify",
    "str_format",
]
