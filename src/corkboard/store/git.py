"""Git-backed row store.

Rows live as YAML lists in ``columns.yaml`` and ``cards.yaml`` on an orphan
branch. Every primitive is one commit on that branch, built with plumbing
commands so the working tree is never touched. A save therefore shows up
in the history as four commits: the deletes, then the inserts.
"""

from __future__ import annotations

import subprocess
import threading
from pathlib import Path

import yaml
from git import GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo

from corkboard.constants import BRANCH_NAME
from corkboard.errors import StoreError
from corkboard.model.rows import Row
from corkboard.store.base import RowStore, check_new_ids

COLUMNS_FILE = "columns.yaml"
CARDS_FILE = "cards.yaml"


def _get_repo(repo_path: Path) -> Repo:
    """Open the repository at repo_path, creating it if needed."""
    try:
        return Repo(repo_path)
    except (InvalidGitRepositoryError, NoSuchPathError):
        return Repo.init(repo_path, mkdir=True)


def _git(repo_path: Path, args: list[str], input: str | None = None) -> str:
    """Run a git command and return stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=repo_path,
        input=input.encode("utf-8") if input is not None else None,
        capture_output=True,
        check=True,
    )
    return result.stdout.decode("utf-8").strip()


def _get_branch_tip(repo_path: Path, branch: str) -> str | None:
    """Get the current commit hash of a branch, or None if it doesn't exist."""
    result = subprocess.run(
        ["git", "rev-parse", "--verify", "--quiet", f"refs/heads/{branch}"],
        cwd=repo_path,
        capture_output=True,
    )
    if result.returncode != 0:
        return None
    return result.stdout.decode("utf-8").strip()


def _tree_entries(repo_path: Path, commit: str | None) -> list[tuple[str, str, str, str]]:
    """List (mode, type, sha, name) for the root tree of commit."""
    if commit is None:
        return []
    entries = []
    for line in _git(repo_path, ["ls-tree", commit]).splitlines():
        info, name = line.split("\t", 1)
        mode, typ, sha = info.split()
        entries.append((mode, typ, sha, name))
    return entries


def _mktree(repo_path: Path, entries: list[tuple[str, str, str, str]]) -> str:
    """Create a tree object from entries and return its hash."""
    lines = [f"{mode} {typ} {sha}\t{name}" for mode, typ, sha, name in entries]
    content = "\n".join(lines) + "\n" if lines else ""
    return _git(repo_path, ["mktree"], input=content)


def _dump_rows(rows: list[Row]) -> str:
    return yaml.safe_dump(rows, sort_keys=False, allow_unicode=True)


class GitStore(RowStore):
    """Store rows as YAML on a dedicated branch of a git repository."""

    name = "git"

    def __init__(self, repo_path: str | Path, branch: str = BRANCH_NAME):
        self.repo_path = Path(repo_path).resolve()
        self.branch = branch
        self._lock = threading.Lock()
        try:
            _get_repo(self.repo_path).close()
        except (GitCommandError, OSError) as exc:
            raise StoreError(f"cannot open repository {self.repo_path}: {exc}") from exc

    # --- reading ---

    def _read_rows(self, filename: str) -> list[Row]:
        try:
            tip = _get_branch_tip(self.repo_path, self.branch)
            if tip is None:
                return []
            with Repo(self.repo_path) as repo:
                tree = repo.commit(tip).tree
                try:
                    blob = tree[filename]
                except KeyError:
                    return []
                rows = yaml.safe_load(blob.data_stream.read().decode("utf-8"))
        except (GitCommandError, ValueError, OSError, yaml.YAMLError) as exc:
            raise StoreError(f"reading {filename}: {exc}") from exc
        if rows is None:
            return []
        if not isinstance(rows, list):
            raise StoreError(f"{filename} is not a list of rows")
        try:
            return sorted(rows, key=lambda r: r["order"])
        except (KeyError, TypeError) as exc:
            raise StoreError(f"{filename} has a malformed row: {exc}") from exc

    def select_columns(self) -> list[Row]:
        return self._read_rows(COLUMNS_FILE)

    def select_cards(self) -> list[Row]:
        return self._read_rows(CARDS_FILE)

    # --- writing ---

    def _write_rows(self, filename: str, rows: list[Row], message: str) -> str:
        """Commit filename with rows on top of the branch tip and return the commit."""
        try:
            tip = _get_branch_tip(self.repo_path, self.branch)
            blob = _git(self.repo_path, ["hash-object", "-w", "--stdin"], input=_dump_rows(rows))
            entries = [e for e in _tree_entries(self.repo_path, tip) if e[3] != filename]
            entries.append(("100644", "blob", blob, filename))
            tree = _mktree(self.repo_path, sorted(entries, key=lambda e: e[3]))
            parent_args = ["-p", tip] if tip else []
            commit = _git(self.repo_path, ["commit-tree", tree, *parent_args, "-m", message])
            _git(self.repo_path, ["update-ref", f"refs/heads/{self.branch}", commit])
        except (subprocess.CalledProcessError, OSError) as exc:
            stderr = getattr(exc, "stderr", b"") or b""
            raise StoreError(f"writing {filename}: {stderr.decode('utf-8', 'replace').strip() or exc}") from exc
        return commit

    def delete_columns(self) -> None:
        with self._lock:
            self._write_rows(COLUMNS_FILE, [], "Delete all columns")

    def delete_cards(self) -> None:
        with self._lock:
            self._write_rows(CARDS_FILE, [], "Delete all cards")

    def _insert_rows(self, filename: str, rows: list[Row], table: str) -> None:
        """Append rows to filename, rejecting ids that are already stored."""
        with self._lock:
            existing = self._read_rows(filename)
            check_new_ids(existing, rows, table)
            self._write_rows(filename, existing + rows, f"Insert {len(rows)} {table}")

    def insert_columns(self, rows: list[Row]) -> None:
        self._insert_rows(COLUMNS_FILE, rows, "columns")

    def insert_cards(self, rows: list[Row]) -> None:
        self._insert_rows(CARDS_FILE, rows, "cards")
