"""Shared helpers for CLI command handlers."""

import asyncio
import functools
import json
import sys

from corkboard.config import Config, load_config
from corkboard.controller import BoardController
from corkboard.errors import CorkboardError
from corkboard.model.entities import Board, Card, Column
from corkboard.store import open_store


def config_from_args(args) -> Config:
    """Load config, letting --store and --path win over file and environment."""
    overrides = {
        "store": getattr(args, "store", None),
        "path": getattr(args, "path", None),
    }
    return load_config(getattr(args, "config", None), overrides=overrides)


async def open_controller(args) -> BoardController:
    """Open the configured store and load the board. Exit 1 on bad config or store."""
    try:
        config = config_from_args(args)
        store = open_store(config.store, config.path, branch=config.branch)
    except CorkboardError as e:
        error(str(e), args.json)
    return await BoardController.open(store, save_mode=config.save_mode)


def command(handler):
    """Run an async handler(args, controller) to completion and wait for its saves."""

    @functools.wraps(handler)
    def run(args) -> int:
        async def main() -> int:
            controller = await open_controller(args)
            try:
                return await handler(args, controller)
            finally:
                await controller.drain()

        return asyncio.run(main())

    return run


def find_column(board: Board, column_id: str, json_mode: bool) -> Column:
    """Lookup column by id. Exit 1 listing available columns if not found."""
    col = board.column(column_id)
    if col is not None:
        return col
    available = [f"  {c.id}  {c.title}" for c in board.sorted_columns()]
    msg = f"Column '{column_id}' not found. Available:\n" + "\n".join(available)
    error(msg, json_mode)


def find_card(board: Board, card_id: str, json_mode: bool) -> Card:
    """Lookup card by id. Exit 1 if not found."""
    card = board.card(card_id)
    if card is not None:
        return card
    error(f"Card '{card_id}' not found.", json_mode)


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output mutation result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def column_summary(board: Board, col: Column) -> dict:
    return {
        "id": col.id,
        "title": col.title,
        "order": col.order,
        "cards": len(board.cards_in(col.id)),
    }


def card_summary(board: Board, card: Card) -> dict:
    col = board.column(card.column_id)
    return {
        "id": card.id,
        "title": card.title,
        "order": card.order,
        "priority": card.effective_priority.value,
        "column": {"id": card.column_id, "title": col.title if col else ""},
    }


def format_column_line(c: dict, indent: str = "") -> str:
    """Format a column summary dict as a text line."""
    cards = "card" if c["cards"] == 1 else "cards"
    return f"{indent}{c['id']}  {c['title']:<16} {c['cards']} {cards}"


def format_card_line(c: dict, indent: str = "  ") -> str:
    return f"{indent}{c['id']}  [{c['priority']}] {c['title']}"
