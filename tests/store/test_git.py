"""Tests for the git-backed row store."""

import pytest
import yaml
from git import Repo

from corkboard.errors import StoreError
from corkboard.model.entities import Priority
from corkboard.model.rows import board_to_rows
from corkboard.store import GitStore, open_store
from corkboard.store.git import CARDS_FILE, COLUMNS_FILE, _git, _mktree
from tests.factories import make_board


@pytest.fixture
def empty_repo(tmp_path):
    """Create an empty git repo with one commit on the default branch."""
    repo = Repo.init(tmp_path)
    (tmp_path / ".gitkeep").write_text("")
    repo.index.add([".gitkeep"])
    repo.index.commit("Initial commit")
    return tmp_path


def _read_yaml(repo_path, filename, branch="corkboard"):
    repo = Repo(repo_path)
    return yaml.safe_load(repo.commit(branch).tree[filename].data_stream.read())


def test_load_without_branch_is_none(empty_repo):
    assert GitStore(empty_repo).load() is None


def test_round_trip(empty_repo):
    board = make_board({"A": ["a0", "a1"], "B": ["b0"]}, priorities={"b0": Priority.LOW})
    store = GitStore(empty_repo)
    assert store.save(board)
    assert GitStore(empty_repo).load() == board


def test_rows_are_yaml_on_branch(empty_repo):
    GitStore(empty_repo).save(make_board({"A": ["a0"]}))
    assert _read_yaml(empty_repo, COLUMNS_FILE) == [{"id": "A", "title": "A", "order": 0}]
    assert _read_yaml(empty_repo, CARDS_FILE) == [{"id": "a0", "title": "A0", "column_id": "A", "order": 0}]


def test_save_is_four_commits(empty_repo):
    GitStore(empty_repo).save(make_board({"A": ["a0"]}))
    messages = [c.message.strip() for c in Repo(empty_repo).iter_commits("corkboard")]
    assert messages == ["Insert 1 cards", "Insert 1 columns", "Delete all columns", "Delete all cards"]


def test_working_tree_untouched(empty_repo):
    GitStore(empty_repo).save(make_board({"A": ["a0"]}))
    repo = Repo(empty_repo)
    assert repo.active_branch.name != "corkboard"
    assert not (empty_repo / COLUMNS_FILE).exists()
    assert not repo.is_dirty(untracked_files=True)


def test_save_replaces_previous_rows(empty_repo):
    store = GitStore(empty_repo)
    store.save(make_board({"A": ["a0", "a1"]}))
    store.save(make_board({"B": ["b0"]}))
    board = store.load()
    assert [c.id for c in board.columns] == ["B"]
    assert [c.id for c in board.cards] == ["b0"]


def test_custom_branch(empty_repo):
    store = GitStore(empty_repo, branch="kanban")
    store.save(make_board({"A": []}))
    assert _read_yaml(empty_repo, COLUMNS_FILE, branch="kanban")[0]["id"] == "A"
    assert GitStore(empty_repo).load() is None


def test_creates_repository_when_missing(tmp_path):
    path = tmp_path / "fresh"
    store = GitStore(path)
    assert store.save(make_board({"A": ["a0"]}))
    assert (path / ".git").is_dir()
    assert store.load().card("a0").column_id == "A"


def test_malformed_yaml_raises_store_error(empty_repo):
    store = GitStore(empty_repo)
    # A mapping where a list of rows is expected
    blob = _git(store.repo_path, ["hash-object", "-w", "--stdin"], input="not: a list\n")
    tree = _mktree(store.repo_path, [("100644", "blob", blob, COLUMNS_FILE)])
    commit = _git(store.repo_path, ["commit-tree", tree, "-m", "broken"])
    _git(store.repo_path, ["update-ref", "refs/heads/corkboard", commit])

    with pytest.raises(StoreError):
        store.select_columns()
    assert store.load() is None


def test_open_store_git(empty_repo):
    store = open_store("git", empty_repo, branch="other")
    assert isinstance(store, GitStore)
    assert store.branch == "other"


def test_overlapping_save_phases_keep_ids_unique(empty_repo):
    board = make_board({"A": ["a0"], "B": ["b0"]})
    column_rows, card_rows = board_to_rows(board)
    store = GitStore(empty_repo)
    for _ in range(2):
        store.delete_cards()
        store.delete_columns()
    store.insert_columns(column_rows)
    with pytest.raises(StoreError, match="duplicate id"):
        store.insert_columns(column_rows)
    store.insert_cards(card_rows)
    with pytest.raises(StoreError, match="duplicate id"):
        store.insert_cards(card_rows)

    assert [r["id"] for r in _read_yaml(empty_repo, COLUMNS_FILE)] == ["A", "B"]
    assert GitStore(empty_repo).load() == board


def test_failed_insert_is_not_committed(empty_repo):
    store = GitStore(empty_repo)
    store.save(make_board({"A": ["a0"]}))
    with pytest.raises(StoreError):
        store.insert_cards([{"id": "a0", "title": "again", "column_id": "A", "order": 1}])
    messages = [c.message.strip() for c in Repo(empty_repo).iter_commits("corkboard")]
    assert messages[0] == "Insert 1 cards"
    assert len(messages) == 4
