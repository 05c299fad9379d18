"""Tests for pure board transforms."""

from corkboard.constants import NEW_COLUMN_TITLE
from corkboard.model.entities import Board, Priority
from corkboard.model.reorder import (
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
from tests.factories import assert_contiguous, layout_of, make_board, orders_of


# --- move_card ---


def test_move_card_after_card():
    board = make_board({"A": ["a0", "a1", "a2"], "B": ["b0"]})
    change = move_card(board, "a1", "B", "b0")

    assert change.applied
    assert change.entity_id == "a1"
    assert layout_of(change.board) == {"A": ["a0", "a2"], "B": ["b0", "a1"]}
    assert orders_of(change.board, "A") == [0, 1]
    assert orders_of(change.board, "B") == [0, 1]
    assert change.board.card("a1").column_id == "B"


def test_move_card_without_after_appends():
    board = make_board({"A": ["a0"], "X": ["x0", "x1"]})
    change = move_card(board, "a0", "X")
    assert layout_of(change.board)["X"] == ["x0", "x1", "a0"]
    assert change.board.card("a0").order == 2


def test_move_card_after_unknown_card_appends():
    board = make_board({"A": ["a0"], "X": ["x0", "x1"]})
    change = move_card(board, "a0", "X", "nope")
    assert layout_of(change.board)["X"] == ["x0", "x1", "a0"]


def test_move_card_after_first_card_inserts_in_middle():
    board = make_board({"A": ["a0"], "X": ["x0", "x1", "x2"]})
    change = move_card(board, "a0", "X", "x0")
    assert layout_of(change.board)["X"] == ["x0", "a0", "x1", "x2"]
    assert orders_of(change.board, "X") == [0, 1, 2, 3]


def test_move_card_after_card_of_other_column_appends():
    """after_card_id only counts when it is in the target column."""
    board = make_board({"A": ["a0", "a1"], "X": ["x0"]})
    change = move_card(board, "a0", "X", "a1")
    assert layout_of(change.board)["X"] == ["x0", "a0"]


def test_move_card_into_empty_column():
    board = make_board({"A": ["a0", "a1"], "B": []})
    change = move_card(board, "a0", "B")
    assert layout_of(change.board) == {"A": ["a1"], "B": ["a0"]}
    assert change.board.card("a0").order == 0
    assert change.board.card("a1").order == 0


def test_move_card_same_column_is_noop():
    board = make_board({"A": ["a0", "a1"], "B": []})
    change = move_card(board, "a0", "A", "a1")
    assert not change.applied
    assert change.board is board


def test_move_card_unknown_card_is_noop():
    board = make_board({"A": ["a0"], "B": []})
    change = move_card(board, "zz", "B")
    assert not change.applied
    assert change.board is board


def test_move_card_unknown_column_is_noop():
    board = make_board({"A": ["a0"]})
    change = move_card(board, "a0", "nowhere")
    assert not change.applied
    assert change.board is board


def test_move_card_twice_equals_once():
    board = make_board({"A": ["a0", "a1", "a2"], "B": ["b0"]})
    once = move_card(board, "a1", "B", "b0")
    twice = move_card(once.board, "a1", "B", "b0")
    assert not twice.applied
    assert twice.board == once.board


def test_move_card_leaves_other_columns_untouched():
    board = make_board({"A": ["a0", "a1"], "B": ["b0"], "C": ["c0", "c1"]})
    change = move_card(board, "a0", "B")
    for card_id in ("c0", "c1"):
        assert change.board.card(card_id) is board.card(card_id)


def test_move_card_closes_gaps_in_source_and_target():
    board = make_board({"A": ["a0", "a1", "a2"], "B": ["b0", "b1"]})
    board = delete_card(board, "a0").board
    board = delete_card(board, "b0").board
    assert orders_of(board, "A") == [1, 2]
    assert orders_of(board, "B") == [1]

    change = move_card(board, "a1", "B")
    assert orders_of(change.board, "A") == [0]
    assert orders_of(change.board, "B") == [0, 1]
    assert layout_of(change.board) == {"A": ["a2"], "B": ["b1", "a1"]}


def test_move_card_keeps_priority():
    board = make_board({"A": ["a0"], "B": []}, priorities={"a0": Priority.HIGH})
    change = move_card(board, "a0", "B")
    assert change.board.card("a0").priority is Priority.HIGH


def test_move_card_does_not_mutate_input():
    board = make_board({"A": ["a0", "a1"], "B": ["b0"]})
    before = layout_of(board)
    move_card(board, "a0", "B")
    assert layout_of(board) == before
    assert board.card("a0").column_id == "A"


# --- add_card ---


def test_add_card_to_empty_column_gets_order_zero():
    board = make_board({"A": []})
    change = add_card(board, "A", "First")
    card = change.board.card(change.entity_id)
    assert card.order == 0
    assert card.title == "First"
    assert card.column_id == "A"
    assert card.priority is None
    assert card.effective_priority is Priority.MEDIUM


def test_add_card_order_is_count_not_max_plus_one():
    board = make_board({"A": ["a0", "a1", "a2"]})
    board = delete_card(board, "a1").board
    assert orders_of(board, "A") == [0, 2]

    change = add_card(board, "A", "New")
    assert change.board.card(change.entity_id).order == 2


def test_add_card_with_priority():
    board = make_board({"A": []})
    change = add_card(board, "A", "Urgent", Priority.HIGH)
    assert change.board.card(change.entity_id).priority is Priority.HIGH


def test_add_card_generates_unique_ids():
    board = make_board({"A": []})
    ids = set()
    for i in range(20):
        change = add_card(board, "A", f"card {i}")
        board = change.board
        ids.add(change.entity_id)
    assert len(ids) == 20
    assert orders_of(board, "A") == list(range(20))


def test_add_card_unknown_column_is_noop():
    board = make_board({"A": []})
    change = add_card(board, "B", "Lost")
    assert not change.applied
    assert change.board is board


def test_add_card_with_taken_id_is_noop():
    board = make_board({"A": ["a0"]})
    change = add_card(board, "A", "Dup", card_id="a0")
    assert not change.applied


# --- card fields ---


def test_rename_card():
    board = make_board({"A": ["a0", "a1"]})
    change = rename_card(board, "a1", "Renamed")
    assert change.board.card("a1").title == "Renamed"
    assert change.board.card("a0") is board.card("a0")


def test_rename_unknown_card_is_noop():
    board = make_board({"A": ["a0"]})
    change = rename_card(board, "zz", "x")
    assert change.board is board
    assert not change.applied


def test_set_priority_and_clear():
    board = make_board({"A": ["a0"]})
    board = set_priority(board, "a0", Priority.LOW).board
    assert board.card("a0").priority is Priority.LOW
    board = set_priority(board, "a0", None).board
    assert board.card("a0").priority is None


def test_set_priority_unknown_card_is_noop():
    board = make_board({"A": ["a0"]})
    assert not set_priority(board, "zz", Priority.HIGH).applied


def test_delete_card_leaves_gap():
    board = make_board({"A": ["a0", "a1", "a2"]})
    change = delete_card(board, "a1")
    assert change.applied
    assert change.board.card("a1") is None
    assert orders_of(change.board, "A") == [0, 2]


def test_delete_unknown_card_is_noop():
    board = make_board({"A": ["a0"]})
    assert delete_card(board, "zz").board is board


# --- columns ---


def test_add_column_appends():
    board = make_board({"A": [], "B": []})
    change = add_column(board)
    col = change.board.column(change.entity_id)
    assert col.order == 2
    assert col.title == NEW_COLUMN_TITLE
    assert col.id.startswith("col-")


def test_add_column_to_empty_board():
    change = add_column(Board(), "Only")
    assert change.board.columns[0].order == 0
    assert change.board.columns[0].title == "Only"


def test_add_column_with_taken_id_is_noop():
    board = make_board({"A": []})
    assert not add_column(board, column_id="A").applied


def test_rename_column():
    board = make_board({"A": [], "B": []})
    change = rename_column(board, "B", "Done")
    assert change.board.column("B").title == "Done"
    assert change.board.column("A").title == "A"


def test_rename_unknown_column_is_noop():
    board = make_board({"A": []})
    change = rename_column(board, "Z", "x")
    assert change.board is board


def test_delete_column_cascades_cards():
    board = make_board({"A": ["a0", "a1"], "B": ["b0"], "C": ["c0"]})
    change = delete_column(board, "B")
    assert change.board.column("B") is None
    assert all(c.column_id != "B" for c in change.board.cards)
    assert layout_of(change.board) == {"A": ["a0", "a1"], "C": ["c0"]}


def test_delete_column_leaves_order_gap():
    board = make_board({"A": [], "B": [], "C": []})
    change = delete_column(board, "B")
    assert sorted(c.order for c in change.board.columns) == [0, 2]


def test_delete_unknown_column_is_noop():
    board = make_board({"A": ["a0"]})
    assert delete_column(board, "Z").board is board


def test_move_column_to_front():
    board = make_board({"A": [], "B": [], "C": []})
    change = move_column(board, "C", 0)
    assert [c.id for c in change.board.sorted_columns()] == ["C", "A", "B"]
    assert_contiguous(change.board)


def test_move_column_index_is_clamped():
    board = make_board({"A": [], "B": [], "C": []})
    change = move_column(board, "A", 99)
    assert [c.id for c in change.board.sorted_columns()] == ["B", "C", "A"]


def test_move_column_to_same_place_is_noop():
    board = make_board({"A": [], "B": []})
    change = move_column(board, "B", 1)
    assert not change.applied
    assert change.board is board


def test_move_column_renumbers_after_gap():
    board = make_board({"A": [], "B": [], "C": []})
    board = delete_column(board, "A").board
    change = move_column(board, "B", 0)
    assert change.applied
    assert [(c.id, c.order) for c in change.board.sorted_columns()] == [("B", 0), ("C", 1)]


def test_move_column_keeps_cards():
    board = make_board({"A": ["a0"], "B": ["b0"]})
    change = move_column(board, "B", 0)
    assert change.board.cards == board.cards


# --- default board ---


def test_default_board():
    board = default_board()
    assert [c.title for c in board.sorted_columns()] == ["To Do", "In Progress", "Done"]
    assert [c.id for c in board.sorted_columns()] == ["col-1", "col-2", "col-3"]
    assert board.cards == ()
    assert_contiguous(board)
