"""Encode JSON columns for writes and decode them with defaults on reads."""

from __future__ import annotations

import sqlite3
import sys
from pathlib import Path

# Allow running this script directly from repository root.
PROJECT_ROOT = next(
    (parent for parent in Path(__file__).resolve().parents if (parent / "fetsch").exists()),
    None,
)
if PROJECT_ROOT and str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fetsch import SQLiteDialect, dump_json_fields, parse_json_fields, prepare_statement

JSON_DEFAULTS = {"meta": {}, "tags": []}


def main() -> None:
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    dialect = SQLiteDialect()
    try:
        conn.execute('CREATE TABLE "articles" ("id" INTEGER PRIMARY KEY, "meta" TEXT, "tags" TEXT)')

        article = {"id": 1, "meta": {"views": 10}, "tags": ["python", "sql"]}
        conn.execute(
            *prepare_statement(
                dump_json_fields(JSON_DEFAULTS, article),
                table_name="articles",
                dialect=dialect,
            )
        )
        # Broken and empty values fall back to defaults on read.
        conn.execute('INSERT INTO "articles" VALUES (2, \'{broken\', NULL)')

        for raw in conn.execute('SELECT * FROM "articles" ORDER BY "id"'):
            print(parse_json_fields(JSON_DEFAULTS, dict(raw)))
    finally:
        conn.close()


if __name__ == "__main__":
    main()
