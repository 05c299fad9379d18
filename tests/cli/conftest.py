"""Shared fixtures for CLI tests."""

from argparse import Namespace

import pytest

from corkboard.model.entities import Priority
from corkboard.store import SqliteStore
from tests.factories import make_board


@pytest.fixture
def db_path(tmp_path):
    """A SQLite board with 3 columns and 3 cards."""
    path = tmp_path / "board.db"
    board = make_board(
        {"todo": ["c1", "c2"], "doing": ["c3"], "done": []},
        priorities={"c2": Priority.HIGH},
    )
    assert SqliteStore(path).save(board)
    return path


@pytest.fixture
def make_args(db_path):
    """Build handler args pointing at the seeded database."""

    def build(json=False, **kwargs):
        return Namespace(config=None, store="sqlite", path=str(db_path), json=json, **kwargs)

    return build


@pytest.fixture
def saved(db_path):
    """Reload the board the commands wrote."""
    return lambda: SqliteStore(db_path).load()
