"""Value types for corkboard boards."""

from __future__ import annotations

from dataclasses import astuple, dataclass, field
from enum import Enum


class Priority(str, Enum):
    """Card priority. A card without one is treated as MEDIUM."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True, eq=False)
class Column:
    """A named, ordered bucket of cards."""

    id: str
    title: str
    order: int

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Column):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(("column", self.id))


@dataclass(frozen=True, eq=False)
class Card:
    """A titled unit of work owned by exactly one column."""

    id: str
    title: str
    column_id: str
    order: int
    priority: Priority | None = None

    @property
    def effective_priority(self) -> Priority:
        return self.priority or Priority.MEDIUM

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(("card", self.id))


@dataclass(frozen=True, eq=False)
class Board:
    """The full board state: every column and every card.

    Columns and cards compare by id, so two boards are compared on the
    complete content of their entities instead.
    """

    columns: tuple[Column, ...] = field(default_factory=tuple)
    cards: tuple[Card, ...] = field(default_factory=tuple)

    def column(self, column_id: str) -> Column | None:
        for col in self.columns:
            if col.id == column_id:
                return col
        return None

    def card(self, card_id: str) -> Card | None:
        for card in self.cards:
            if card.id == card_id:
                return card
        return None

    def sorted_columns(self) -> tuple[Column, ...]:
        return tuple(sorted(self.columns, key=lambda c: c.order))

    def cards_in(self, column_id: str) -> tuple[Card, ...]:
        """Cards of a column sorted by order."""
        return tuple(sorted((c for c in self.cards if c.column_id == column_id), key=lambda c: c.order))

    def _content(self) -> tuple:
        return (
            tuple(astuple(c) for c in self.columns),
            tuple(astuple(c) for c in self.cards),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._content() == other._content()

    def __hash__(self) -> int:
        return hash(self._content())
