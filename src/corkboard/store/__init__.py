"""Board persistence."""

from __future__ import annotations

from pathlib import Path

from corkboard.store.base import BoardStore, RowStore
from corkboard.store.git import GitStore
from corkboard.store.memory import MemoryStore
from corkboard.store.sqlite import SqliteStore

STORES = ("git", "sqlite", "memory")


def open_store(kind: str, path: str | Path = ".", branch: str | None = None) -> BoardStore:
    """Build the store named by kind."""
    if kind == "git":
        return GitStore(path, branch=branch) if branch else GitStore(path)
    if kind == "sqlite":
        return SqliteStore(path)
    if kind == "memory":
        return MemoryStore()
    raise ValueError(f"unknown store {kind!r}")


__all__ = [
    "STORES",
    "BoardStore",
    "GitStore",
    "MemoryStore",
    "RowStore",
    "SqliteStore",
    "open_store",
]
