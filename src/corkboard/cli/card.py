"""Handlers for 'corkboard card' commands."""

from corkboard.cli._common import (
    card_summary,
    command,
    error,
    find_card,
    find_column,
    format_card_line,
    output_json,
    output_result,
)
from corkboard.model.entities import Priority


@command
async def card_list(args, controller) -> int:
    """List cards grouped by column."""
    board = controller.board
    if args.column:
        find_column(board, args.column, args.json)

    columns = []
    for col in board.sorted_columns():
        if args.column and col.id != args.column:
            continue
        columns.append((col, [card_summary(board, c) for c in board.cards_in(col.id)]))

    if args.json:
        output_json([c for _, cards in columns for c in cards])
    else:
        for col, cards in columns:
            print(f"{col.id}  {col.title}")
            for c in cards:
                print(format_card_line(c))

    return 0


@command
async def card_add(args, controller) -> int:
    """Create a card at the end of a column."""
    col = find_column(controller.board, args.column, args.json)
    priority = Priority(args.priority) if args.priority else None

    change = controller.add_card(col.id, args.title, priority)
    card = change.board.card(change.entity_id)

    output_result(
        card_summary(change.board, card),
        f"Created card {card.id} in {col.title}",
        args.json,
    )

    return 0


@command
async def card_rename(args, controller) -> int:
    """Rename a card."""
    card = find_card(controller.board, args.id, args.json)
    controller.rename_card(card.id, args.title)

    output_result(
        {"id": card.id, "title": args.title},
        f'Renamed card {card.id}: "{card.title}" -> "{args.title}"',
        args.json,
    )

    return 0


@command
async def card_priority(args, controller) -> int:
    """Set a card's priority."""
    card = find_card(controller.board, args.id, args.json)
    priority = Priority(args.priority)
    controller.set_priority(card.id, priority)

    output_result(
        {"id": card.id, "priority": priority.value},
        f"Set priority of card {card.id} to {priority.value}",
        args.json,
    )

    return 0


@command
async def card_delete(args, controller) -> int:
    """Delete a card."""
    card = find_card(controller.board, args.id, args.json)
    controller.delete_card(card.id)

    output_result(
        {"id": card.id},
        f"Deleted card {card.id}",
        args.json,
    )

    return 0


@command
async def card_move(args, controller) -> int:
    """Move a card to another column, optionally after a given card."""
    board = controller.board
    card = find_card(board, args.id, args.json)
    target = find_column(board, args.column, args.json)
    if card.column_id == target.id:
        error(f"Card '{card.id}' is already in column '{target.id}'.", args.json)

    change = controller.move_card(card.id, target.id, args.after)
    moved = change.board.card(card.id)

    output_result(
        card_summary(change.board, moved),
        f"Moved card {card.id} to {target.title} at position {moved.order + 1}",
        args.json,
    )

    return 0
