"""Pure board transforms.

Every transform takes a Board and returns a Change. Nothing is mutated:
the result holds a new Board, or the very same Board with applied=False
when the command refers to an id that does not exist (or would not
change anything). Transforms never raise.
"""

from __future__ import annotations

from dataclasses import replace
from typing import NamedTuple

from corkboard.constants import DEFAULT_COLUMNS, NEW_COLUMN_TITLE
from corkboard.ids import new_card_id, new_column_id
from corkboard.model.entities import Board, Card, Column, Priority


class Change(NamedTuple):
    """Result of a transform."""

    board: Board
    applied: bool
    entity_id: str | None = None


def _unchanged(board: Board) -> Change:
    return Change(board, False)


def _renumber(cards) -> list[Card]:
    """Rewrite order to 0..n-1 following list position."""
    return [c if c.order == i else replace(c, order=i) for i, c in enumerate(cards)]


def default_board() -> Board:
    """The board used when nothing could be loaded."""
    return Board(columns=tuple(Column(id=cid, title=title, order=i) for i, (cid, title) in enumerate(DEFAULT_COLUMNS)))


# --- Columns ---


def add_column(board: Board, title: str = NEW_COLUMN_TITLE, column_id: str | None = None) -> Change:
    """Append a column after all others."""
    existing = {c.id for c in board.columns}
    if column_id is None:
        column_id = new_column_id(existing)
    elif column_id in existing:
        return _unchanged(board)
    col = Column(id=column_id, title=title, order=len(board.columns))
    return Change(replace(board, columns=(*board.columns, col)), True, column_id)


def rename_column(board: Board, column_id: str, title: str) -> Change:
    col = board.column(column_id)
    if col is None:
        return _unchanged(board)
    columns = tuple(replace(c, title=title) if c.id == column_id else c for c in board.columns)
    return Change(replace(board, columns=columns), True, column_id)


def delete_column(board: Board, column_id: str) -> Change:
    """Remove a column and every card it owns. Remaining orders keep their gaps."""
    if board.column(column_id) is None:
        return _unchanged(board)
    return Change(
        Board(
            columns=tuple(c for c in board.columns if c.id != column_id),
            cards=tuple(c for c in board.cards if c.column_id != column_id),
        ),
        True,
        column_id,
    )


def move_column(board: Board, column_id: str, index: int) -> Change:
    """Move a column to index among the sorted columns and renumber all of them."""
    col = board.column(column_id)
    if col is None:
        return _unchanged(board)
    ordered = list(board.sorted_columns())
    current = ordered.index(col)
    ordered.remove(col)
    index = max(0, min(index, len(ordered)))
    if index == current and all(c.order == i for i, c in enumerate(board.sorted_columns())):
        return _unchanged(board)
    ordered.insert(index, col)
    columns = tuple(c if c.order == i else replace(c, order=i) for i, c in enumerate(ordered))
    return Change(replace(board, columns=columns), True, column_id)


# --- Cards ---


def add_card(
    board: Board,
    column_id: str,
    title: str,
    priority: Priority | None = None,
    card_id: str | None = None,
) -> Change:
    """Append a card to a column with order = number of cards already there."""
    if board.column(column_id) is None:
        return _unchanged(board)
    existing = {c.id for c in board.cards}
    if card_id is None:
        card_id = new_card_id(existing)
    elif card_id in existing:
        return _unchanged(board)
    count = sum(1 for c in board.cards if c.column_id == column_id)
    card = Card(id=card_id, title=title, column_id=column_id, order=count, priority=priority)
    return Change(replace(board, cards=(*board.cards, card)), True, card_id)


def _update_card(board: Board, card_id: str, **changes) -> Change:
    if board.card(card_id) is None:
        return _unchanged(board)
    cards = tuple(replace(c, **changes) if c.id == card_id else c for c in board.cards)
    return Change(replace(board, cards=cards), True, card_id)


def rename_card(board: Board, card_id: str, title: str) -> Change:
    return _update_card(board, card_id, title=title)


def set_priority(board: Board, card_id: str, priority: Priority | None) -> Change:
    return _update_card(board, card_id, priority=priority)


def delete_card(board: Board, card_id: str) -> Change:
    """Remove a card. Its siblings are not renumbered."""
    if board.card(card_id) is None:
        return _unchanged(board)
    return Change(replace(board, cards=tuple(c for c in board.cards if c.id != card_id)), True, card_id)


def move_card(
    board: Board,
    card_id: str,
    target_column_id: str,
    after_card_id: str | None = None,
) -> Change:
    """Move a card into another column, after after_card_id or at the end.

    Both the source and the target column are renumbered 0..n-1. Cards in
    every other column are carried over as the same objects. Moving a card
    to the column it is already in does nothing.
    """
    card = board.card(card_id)
    if card is None or card.column_id == target_column_id:
        return _unchanged(board)
    if board.column(target_column_id) is None:
        return _unchanged(board)

    source_column_id = card.column_id
    target = [c for c in board.cards_in(target_column_id) if c.id != card_id]

    insert_at = len(target)
    if after_card_id is not None:
        for i, c in enumerate(target):
            if c.id == after_card_id:
                insert_at = i + 1
                break

    target.insert(insert_at, replace(card, column_id=target_column_id))
    target = _renumber(target)
    source = _renumber(c for c in board.cards_in(source_column_id) if c.id != card_id)
    others = [c for c in board.cards if c.column_id not in (source_column_id, target_column_id)]

    return Change(replace(board, cards=(*others, *source, *target)), True, card_id)
