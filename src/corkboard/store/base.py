"""Persistence contract: load everything, replace everything.

A RowStore saves by deleting every card and column row and then inserting
the full board again. The four steps are separate operations with no
transaction around them, so a failure after the deletes leaves the store
empty until the next successful save. Loading such a store yields None,
and callers fall back to a default board.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from corkboard.errors import StoreError
from corkboard.model.entities import Board
from corkboard.model.rows import Row, board_from_rows, board_to_rows

logger = logging.getLogger(__name__)


def check_new_ids(existing: list[Row], rows: list[Row], table: str) -> None:
    """Raise StoreError if rows repeat an id, among themselves or against existing.

    Stores without a primary key call this before inserting.
    """
    seen = {r.get("id") for r in existing}
    for row in rows:
        if row["id"] in seen:
            raise StoreError(f"{table}: duplicate id {row['id']!r}")
        seen.add(row["id"])


class BoardStore(ABC):
    """Anything that can load and save a whole board."""

    @abstractmethod
    def load(self) -> Board | None:
        """Return the last saved board, or None if empty or unreadable."""

    @abstractmethod
    def save(self, board: Board) -> bool:
        """Replace the stored board. Returns False on failure."""


class RowStore(BoardStore):
    """BoardStore built from six row primitives.

    Primitives raise StoreError. load() and save() are the error boundary:
    they log and report failure instead of raising.
    """

    name = "rows"

    @abstractmethod
    def select_columns(self) -> list[Row]:
        """All column rows ordered by order."""

    @abstractmethod
    def select_cards(self) -> list[Row]:
        """All card rows ordered by order."""

    @abstractmethod
    def delete_columns(self) -> None: ...

    @abstractmethod
    def delete_cards(self) -> None: ...

    @abstractmethod
    def insert_columns(self, rows: list[Row]) -> None: ...

    @abstractmethod
    def insert_cards(self, rows: list[Row]) -> None: ...

    def load(self) -> Board | None:
        try:
            column_rows = self.select_columns()
            card_rows = self.select_cards()
        except StoreError as exc:
            logger.warning("%s load failed: %s", self.name, exc)
            return None
        if not column_rows:
            return None
        try:
            return board_from_rows(column_rows, card_rows)
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("%s load failed: malformed row: %s", self.name, exc)
            return None

    def save(self, board: Board) -> bool:
        column_rows, card_rows = board_to_rows(board)
        try:
            self.delete_cards()
            self.delete_columns()
            if column_rows:
                self.insert_columns(column_rows)
            if card_rows:
                self.insert_cards(card_rows)
        except StoreError as exc:
            logger.error("%s save failed: %s", self.name, exc)
            return False
        logger.debug("%s saved %d columns, %d cards", self.name, len(column_rows), len(card_rows))
        return True
