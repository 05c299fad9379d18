"""Convert boards to and from persisted rows.

Rows are plain dicts in the store's shape: {id, title, order} for columns
and {id, title, column_id, order, priority?} for cards. The ``priority``
key is left out entirely when a card has none.
"""

from __future__ import annotations

import logging
from typing import Any

from corkboard.model.entities import Board, Card, Column, Priority

logger = logging.getLogger(__name__)

Row = dict[str, Any]


def column_to_row(column: Column) -> Row:
    return {"id": column.id, "title": column.title, "order": column.order}


def card_to_row(card: Card) -> Row:
    row = {
        "id": card.id,
        "title": card.title,
        "column_id": card.column_id,
        "order": card.order,
    }
    if card.priority is not None:
        row["priority"] = card.priority.value
    return row


def _parse_priority(raw: Any, card_id: str) -> Priority | None:
    if raw is None or raw == "":
        return None
    try:
        return Priority(str(raw).lower())
    except ValueError:
        logger.warning("card %s has unknown priority %r, ignoring", card_id, raw)
        return None


def column_from_row(row: Row) -> Column:
    return Column(id=str(row["id"]), title=str(row.get("title") or ""), order=int(row["order"]))


def card_from_row(row: Row) -> Card:
    card_id = str(row["id"])
    return Card(
        id=card_id,
        title=str(row.get("title") or ""),
        column_id=str(row["column_id"]),
        order=int(row["order"]),
        priority=_parse_priority(row.get("priority"), card_id),
    )


def board_to_rows(board: Board) -> tuple[list[Row], list[Row]]:
    """Return (column_rows, card_rows) for a board."""
    return [column_to_row(c) for c in board.columns], [card_to_row(c) for c in board.cards]


def board_from_rows(column_rows: list[Row], card_rows: list[Row]) -> Board:
    """Build a Board from store rows.

    Rows repeating an id already seen, and cards pointing at a column that
    is not present, are dropped and logged. Both only happen when saves
    were interrupted or overlapped between their phases.
    """
    columns = []
    known: set[str] = set()
    for row in column_rows:
        column = column_from_row(row)
        if column.id in known:
            logger.warning("dropping column %s: duplicate id", column.id)
            continue
        known.add(column.id)
        columns.append(column)
    cards = []
    seen: set[str] = set()
    for row in card_rows:
        card = card_from_row(row)
        if card.id in seen:
            logger.warning("dropping card %s: duplicate id", card.id)
            continue
        seen.add(card.id)
        if card.column_id not in known:
            logger.warning("dropping card %s: column %s not found", card.id, card.column_id)
            continue
        cards.append(card)
    return Board(columns=tuple(columns), cards=tuple(cards))
