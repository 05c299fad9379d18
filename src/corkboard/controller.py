"""Board controller: optimistic local state, best-effort background saves.

The controller holds the current Board snapshot. A command applies a pure
transform, swaps the snapshot, tells watchers, and hands the new snapshot
to a saver. Saves run in worker threads via asyncio.to_thread and are never
awaited by the command. A failed save is logged; the local snapshot stays.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from corkboard.constants import NEW_COLUMN_TITLE
from corkboard.model import reorder
from corkboard.model.entities import Board, Priority
from corkboard.model.reorder import Change, default_board
from corkboard.store.base import BoardStore

logger = logging.getLogger(__name__)

DETACHED = "detached"
SERIAL = "serial"
SAVE_MODES = (DETACHED, SERIAL)

Watcher = Callable[[Board, Board], None]


class DetachedSaver:
    """Start every save as soon as it is submitted.

    Saves are not ordered: when two overlap, whichever finishes last on the
    store wins, regardless of which command came first.
    """

    def __init__(self, store: BoardStore):
        self.store = store
        self._tasks: set[asyncio.Task] = set()

    def _spawn(self, make_coro) -> asyncio.Task | None:
        """Schedule make_coro() on the running loop. Without a loop the save is skipped."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.error("no running event loop, board not saved")
            return None
        task = loop.create_task(make_coro())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def submit(self, board: Board) -> None:
        self._spawn(lambda: self._save(board))

    async def _save(self, board: Board) -> None:
        try:
            ok = await asyncio.to_thread(self.store.save, board)
        except Exception:
            logger.exception("save failed, keeping local board")
            return
        if not ok:
            logger.warning("save failed, keeping local board")

    @property
    def busy(self) -> bool:
        return bool(self._tasks)

    async def drain(self) -> None:
        """Wait until no save is in flight."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))


class SerialSaver(DetachedSaver):
    """At most one save in flight; snapshots submitted meanwhile collapse to the latest."""

    def __init__(self, store: BoardStore):
        super().__init__(store)
        self._pending: Board | None = None
        self._writer: asyncio.Task | None = None

    def submit(self, board: Board) -> None:
        self._pending = board
        if self._writer is None or self._writer.done():
            self._writer = self._spawn(self._run)

    async def _run(self) -> None:
        while self._pending is not None:
            board, self._pending = self._pending, None
            await self._save(board)


def make_saver(mode: str, store: BoardStore) -> DetachedSaver:
    if mode == DETACHED:
        return DetachedSaver(store)
    if mode == SERIAL:
        return SerialSaver(store)
    raise ValueError(f"unknown save mode {mode!r}")


class BoardController:
    """Single writer of the board snapshot."""

    def __init__(self, store: BoardStore, board: Board | None = None, save_mode: str = DETACHED):
        self.store = store
        self._board = board if board is not None else default_board()
        self._watchers: list[Watcher] = []
        self._saver = make_saver(save_mode, store)

    @classmethod
    async def open(cls, store: BoardStore, save_mode: str = DETACHED) -> BoardController:
        """Load the board from store, falling back to the default board."""
        try:
            board = await asyncio.to_thread(store.load)
        except Exception:
            logger.exception("load failed")
            board = None
        if board is None or not board.columns:
            logger.warning("no saved board found, starting from the default board")
            board = default_board()
        return cls(store, board, save_mode=save_mode)

    @property
    def board(self) -> Board:
        return self._board

    def watch(self, callback: Watcher) -> Callable[[], None]:
        """Call callback(old, new) after each applied command. Returns an unwatch callable."""
        self._watchers.append(callback)
        return lambda: callback in self._watchers and self._watchers.remove(callback)

    def apply(self, transform: Callable[..., Change], *args, **kwargs) -> Change:
        """Run transform on the held board, publish the result and start saving it."""
        change = transform(self._board, *args, **kwargs)
        if not change.applied:
            logger.debug("%s%r: nothing to do", transform.__name__, args)
            return change
        old = self._board
        self._board = change.board
        for callback in list(self._watchers):
            callback(old, change.board)
        self._saver.submit(change.board)
        return change

    @property
    def saving(self) -> bool:
        return self._saver.busy

    async def drain(self) -> None:
        """Wait for in-flight saves. Commands never call this."""
        await self._saver.drain()

    # --- commands ---

    def add_column(self, title: str = NEW_COLUMN_TITLE) -> Change:
        return self.apply(reorder.add_column, title)

    def rename_column(self, column_id: str, title: str) -> Change:
        return self.apply(reorder.rename_column, column_id, title)

    def delete_column(self, column_id: str) -> Change:
        return self.apply(reorder.delete_column, column_id)

    def move_column(self, column_id: str, index: int) -> Change:
        return self.apply(reorder.move_column, column_id, index)

    def add_card(self, column_id: str, title: str, priority: Priority | None = None) -> Change:
        return self.apply(reorder.add_card, column_id, title, priority)

    def rename_card(self, card_id: str, title: str) -> Change:
        return self.apply(reorder.rename_card, card_id, title)

    def set_priority(self, card_id: str, priority: Priority | None) -> Change:
        return self.apply(reorder.set_priority, card_id, priority)

    def delete_card(self, card_id: str) -> Change:
        return self.apply(reorder.delete_card, card_id)

    def move_card(self, card_id: str, target_column_id: str, after_card_id: str | None = None) -> Change:
        return self.apply(reorder.move_card, card_id, target_column_id, after_card_id)
