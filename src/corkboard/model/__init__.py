"""Board model: value types, pure transforms and row mapping."""

from corkboard.model.entities import Board, Card, Column, Priority
from corkboard.model.reorder import (
    Change,
    add_card,
    add_column,
    default_board,
    delete_card,
    delete_column,
    move_card,
    move_column,
    rename_card,
    rename_column,
    set_priority,
)
from corkboard.model.rows import board_from_rows, board_to_rows

__all__ = [
    "Board",
    "Card",
    "Change",
    "Column",
    "Priority",
    "add_card",
    "add_column",
    "board_from_rows",
    "board_to_rows",
    "default_board",
    "delete_card",
    "delete_column",
    "move_card",
    "move_column",
    "rename_card",
    "rename_column",
    "set_priority",
]
