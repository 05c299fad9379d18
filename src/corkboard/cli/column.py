"""Handlers for 'corkboard column' commands."""

from corkboard.cli._common import (
    column_summary,
    command,
    find_column,
    format_column_line,
    output_json,
    output_result,
)


@command
async def column_list(args, controller) -> int:
    """List all columns."""
    board = controller.board
    items = [column_summary(board, col) for col in board.sorted_columns()]

    if args.json:
        output_json(items)
    else:
        for c in items:
            print(format_column_line(c))

    return 0


@command
async def column_add(args, controller) -> int:
    """Create a new column at the end."""
    change = controller.add_column(args.title)
    col = change.board.column(change.entity_id)

    output_result(
        {"id": col.id, "title": col.title, "order": col.order},
        f'Created column "{col.title}" (id {col.id})',
        args.json,
    )

    return 0


@command
async def column_rename(args, controller) -> int:
    """Rename a column."""
    col = find_column(controller.board, args.id, args.json)
    old_title = col.title
    controller.rename_column(col.id, args.title)

    output_result(
        {"id": col.id, "title": args.title},
        f'Renamed column {col.id}: "{old_title}" -> "{args.title}"',
        args.json,
    )

    return 0


@command
async def column_delete(args, controller) -> int:
    """Delete a column and its cards."""
    board = controller.board
    col = find_column(board, args.id, args.json)
    card_count = len(board.cards_in(col.id))
    controller.delete_column(col.id)

    output_result(
        {"id": col.id, "deleted_cards": card_count},
        f'Deleted column "{col.title}" and {card_count} cards',
        args.json,
    )

    return 0


@command
async def column_move(args, controller) -> int:
    """Move a column to a 1-indexed position."""
    col = find_column(controller.board, args.id, args.json)
    change = controller.move_column(col.id, args.position - 1)
    moved = change.board.column(col.id)

    output_result(
        {"id": col.id, "order": moved.order},
        f'Moved column "{col.title}" to position {moved.order + 1}',
        args.json,
    )

    return 0
