"""SQLite row store.

Each primitive opens its own connection and commits on its own, so a save
is four independent writes exactly like the remote store it stands in for.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path

from corkboard.errors import StoreError
from corkboard.model.rows import Row
from corkboard.store.base import RowStore

DB_NAME = "corkboard.db"


def _connect(db_path: str) -> sqlite3.Connection:
    """Open a connection returning dict-like rows."""
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


class SqliteStore(RowStore):
    """Store rows in ``columns`` and ``cards`` tables."""

    name = "sqlite"

    def __init__(self, db_path: str | Path):
        db_path = Path(db_path)
        if db_path.is_dir():
            db_path = db_path / DB_NAME
        db_path.parent.mkdir(parents=True, exist_ok=True)
        self.db_path = str(db_path)
        self._init_schema()

    def _init_schema(self) -> None:
        """Create tables if they don't exist."""
        with self._connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS columns (
                    id TEXT PRIMARY KEY,
                    title TEXT NOT NULL,
                    "order" INTEGER NOT NULL
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS cards (
                    id TEXT PRIMARY KEY,
                    title TEXT NOT NULL,
                    column_id TEXT NOT NULL,
                    "order" INTEGER NOT NULL,
                    priority TEXT
                )
            """)

    @contextmanager
    def _connection(self):
        """Connection that commits on success, closes always and raises StoreError."""
        try:
            conn = _connect(self.db_path)
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        finally:
            conn.close()

    def select_columns(self) -> list[Row]:
        with self._connection() as conn:
            rows = conn.execute('SELECT id, title, "order" FROM columns ORDER BY "order"').fetchall()
        return [dict(r) for r in rows]

    def select_cards(self) -> list[Row]:
        with self._connection() as conn:
            rows = conn.execute('SELECT id, title, column_id, "order", priority FROM cards ORDER BY "order"').fetchall()
        result = []
        for r in rows:
            row = dict(r)
            if row["priority"] is None:
                del row["priority"]
            result.append(row)
        return result

    def delete_columns(self) -> None:
        with self._connection() as conn:
            conn.execute("DELETE FROM columns")

    def delete_cards(self) -> None:
        with self._connection() as conn:
            conn.execute("DELETE FROM cards")

    def insert_columns(self, rows: list[Row]) -> None:
        with self._connection() as conn:
            conn.executemany(
                'INSERT INTO columns (id, title, "order") VALUES (:id, :title, :order)',
                rows,
            )

    def insert_cards(self, rows: list[Row]) -> None:
        with self._connection() as conn:
            conn.executemany(
                'INSERT INTO cards (id, title, column_id, "order", priority) '
                "VALUES (:id, :title, :column_id, :order, :priority)",
                [{"priority": None, **r} for r in rows],
            )

