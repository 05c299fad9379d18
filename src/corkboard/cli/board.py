"""Handlers for 'corkboard board' commands."""

from corkboard.cli._common import (
    card_summary,
    column_summary,
    command,
    format_card_line,
    format_column_line,
    output_json,
)


@command
async def board_show(args, controller) -> int:
    """Show every column with its cards."""
    board = controller.board
    columns = []
    for col in board.sorted_columns():
        summary = column_summary(board, col)
        summary["items"] = [card_summary(board, c) for c in board.cards_in(col.id)]
        columns.append(summary)

    if args.json:
        output_json({"columns": columns})
    else:
        for col in columns:
            print(format_column_line(col))
            for card in col["items"]:
                print(format_card_line(card))

    return 0
