"""In-process row store."""

from __future__ import annotations

import threading

from corkboard.model.rows import Row
from corkboard.store.base import RowStore, check_new_ids


class MemoryStore(RowStore):
    """Keeps rows in lists. Nothing survives the process."""

    name = "memory"

    def __init__(self, columns: list[Row] | None = None, cards: list[Row] | None = None):
        self._lock = threading.Lock()
        self.columns: list[Row] = [dict(r) for r in columns or []]
        self.cards: list[Row] = [dict(r) for r in cards or []]

    def select_columns(self) -> list[Row]:
        with self._lock:
            return sorted((dict(r) for r in self.columns), key=lambda r: r["order"])

    def select_cards(self) -> list[Row]:
        with self._lock:
            return sorted((dict(r) for r in self.cards), key=lambda r: r["order"])

    def delete_columns(self) -> None:
        with self._lock:
            self.columns = []

    def delete_cards(self) -> None:
        with self._lock:
            self.cards = []

    def insert_columns(self, rows: list[Row]) -> None:
        with self._lock:
            check_new_ids(self.columns, rows, "columns")
            self.columns.extend(dict(r) for r in rows)

    def insert_cards(self, rows: list[Row]) -> None:
        with self._lock:
            check_new_ids(self.cards, rows, "cards")
            self.cards.extend(dict(r) for r in rows)
