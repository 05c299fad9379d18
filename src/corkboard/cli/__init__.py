"""CLI argument parser and dispatch for corkboard."""

import argparse

from corkboard.cli.board import board_show
from corkboard.cli.card import card_add, card_delete, card_list, card_move, card_priority, card_rename
from corkboard.cli.column import column_add, column_delete, column_list, column_move, column_rename
from corkboard.model.entities import Priority
from corkboard.store import STORES

PRIORITIES = [p.value for p in Priority]


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", help="Path to a corkboard.yaml config file")
    common.add_argument("--store", choices=STORES, help="Persistence backend (default: git)")
    common.add_argument("--path", help="Repository or database path (default: .)")
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")

    parser = argparse.ArgumentParser(
        prog="corkboard",
        description="Kanban board with columns and cards",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- board ---
    board_p = nouns.add_parser("board", help="Board operations", parents=[common])
    board_verbs = board_p.add_subparsers(dest="verb")

    board_show_p = board_verbs.add_parser("show", help="Show all columns and cards", parents=[common])
    board_show_p.set_defaults(func=board_show)

    # board with no verb = show
    board_p.set_defaults(func=board_show)

    # --- column ---
    col_p = nouns.add_parser("column", help="Column operations", parents=[common])
    col_verbs = col_p.add_subparsers(dest="verb")

    col_list_p = col_verbs.add_parser("list", help="List columns", parents=[common])
    col_list_p.set_defaults(func=column_list)

    col_add_p = col_verbs.add_parser("add", help="Create a column", parents=[common])
    col_add_p.add_argument("title", help="Column title")
    col_add_p.set_defaults(func=column_add)

    col_rename_p = col_verbs.add_parser("rename", help="Rename a column", parents=[common])
    col_rename_p.add_argument("id", help="Column ID")
    col_rename_p.add_argument("title", help="New column title")
    col_rename_p.set_defaults(func=column_rename)

    col_delete_p = col_verbs.add_parser("delete", help="Delete a column and its cards", parents=[common])
    col_delete_p.add_argument("id", help="Column ID")
    col_delete_p.set_defaults(func=column_delete)

    col_move_p = col_verbs.add_parser("move", help="Move a column", parents=[common])
    col_move_p.add_argument("id", help="Column ID")
    col_move_p.add_argument("--position", type=int, required=True, help="New position (1-indexed)")
    col_move_p.set_defaults(func=column_move)

    # column with no verb = list
    col_p.set_defaults(func=column_list)

    # --- card ---
    card_p = nouns.add_parser("card", help="Card operations", parents=[common])
    card_verbs = card_p.add_subparsers(dest="verb")

    card_list_p = card_verbs.add_parser("list", help="List cards", parents=[common])
    card_list_p.add_argument("--column", dest="column", help="Filter by column ID")
    card_list_p.set_defaults(func=card_list)

    card_add_p = card_verbs.add_parser("add", help="Create a card", parents=[common])
    card_add_p.add_argument("column", help="Target column ID")
    card_add_p.add_argument("title", help="Card title")
    card_add_p.add_argument("--priority", choices=PRIORITIES, help="Card priority (default: medium)")
    card_add_p.set_defaults(func=card_add)

    card_rename_p = card_verbs.add_parser("rename", help="Rename a card", parents=[common])
    card_rename_p.add_argument("id", help="Card ID")
    card_rename_p.add_argument("title", help="New card title")
    card_rename_p.set_defaults(func=card_rename)

    card_priority_p = card_verbs.add_parser("priority", help="Set card priority", parents=[common])
    card_priority_p.add_argument("id", help="Card ID")
    card_priority_p.add_argument("priority", choices=PRIORITIES, help="New priority")
    card_priority_p.set_defaults(func=card_priority)

    card_delete_p = card_verbs.add_parser("delete", help="Delete a card", parents=[common])
    card_delete_p.add_argument("id", help="Card ID")
    card_delete_p.set_defaults(func=card_delete)

    card_move_p = card_verbs.add_parser("move", help="Move a card to another column", parents=[common])
    card_move_p.add_argument("id", help="Card ID")
    card_move_p.add_argument("--column", dest="column", required=True, help="Target column ID")
    card_move_p.add_argument("--after", dest="after", help="Place after this card (default: at the end)")
    card_move_p.set_defaults(func=card_move)

    # card with no verb = list
    card_p.set_defaults(func=card_list, column=None)

    return parser
