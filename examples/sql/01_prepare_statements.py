"""Build INSERT / UPDATE / upsert statements and run them against SQLite."""

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

from fetsch import PostgresDialect, SQLiteDialect, only, prepare_statement


def show_mysql_shapes() -> None:
    row = {"id": 1, "email": "alice@example.com", "age": 30}

    for mode in ("insert", "upd", "odu"):
        statement, values = prepare_statement(row, mode, "id", "users")
        print(f"[{mode}] SQL:", statement)
        print(f"[{mode}] Values:", values)

    # Without a table name only the column/value part is returned.
    fragment = prepare_statement(row)
    print("Fragment:", fragment.statement)

    pg = prepare_statement(row, "upd", "id", "users", dialect=PostgresDialect())
    print("Postgres:", pg.statement, pg.values)


def run_on_sqlite() -> None:
    conn = sqlite3.connect(":memory:")
    dialect = SQLiteDialect()
    try:
        conn.execute('CREATE TABLE "users" ("id" INTEGER PRIMARY KEY, "email" TEXT, "age" INTEGER)')

        # Request payloads often carry extra keys; keep only real columns.
        payload = {"id": 1, "email": "alice@example.com", "age": 30, "csrf": "x"}
        row = only({"id", "email", "age"}, payload)
        conn.execute(*prepare_statement(row, table_name="users", dialect=dialect))

        conn.execute(
            *prepare_statement({"id": 1, "age": 31}, "upd", "id", "users", dialect=dialect)
        )
        print("Stored:", conn.execute('SELECT * FROM "users"').fetchall())
    finally:
        conn.close()


def main() -> None:
    show_mysql_shapes()
    run_on_sqlite()


if __name__ == "__main__":
    main()
