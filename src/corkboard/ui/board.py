"""Board screen showing kanban columns and cards."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer

from corkboard.controller import BoardController
from corkboard.model.entities import Board
from corkboard.ui.card import CardWidget, next_priority
from corkboard.ui.column import ColumnHeader, ColumnWidget
from corkboard.ui.prompt import TextPrompt


class BoardScreen(Screen):
    """Main board screen showing all columns.

    The screen never edits the board itself: every key turns into a
    controller command, and the board is redrawn when the controller
    reports a new snapshot.
    """

    BINDINGS = [
        ("shift+left", "move(-1)", "Move left"),
        ("shift+right", "move(1)", "Move right"),
        ("a", "add_card", "Add card"),
        ("n", "add_column", "Add column"),
        ("r", "rename", "Rename"),
        ("p", "cycle_priority", "Priority"),
        ("delete", "delete", "Delete"),
    ]

    def __init__(self, controller: BoardController):
        super().__init__()
        self.controller = controller
        self._unwatch = None
        self._focus_card_id: str | None = None
        self._focus_column_id: str | None = None

    def _column_widgets(self, board: Board) -> list[ColumnWidget]:
        return [ColumnWidget(col, board.cards_in(col.id)) for col in board.sorted_columns()]

    def compose(self) -> ComposeResult:
        with Horizontal(id="columns"):
            yield from self._column_widgets(self.controller.board)
        yield Footer()

    def on_mount(self) -> None:
        self._unwatch = self.controller.watch(self._on_board_changed)
        self.call_after_refresh(self._restore_focus)

    def on_unmount(self) -> None:
        if self._unwatch is not None:
            self._unwatch()
            self._unwatch = None

    def _on_board_changed(self, old: Board, new: Board) -> None:
        self.call_later(self._rebuild)

    async def _rebuild(self) -> None:
        container = self.query_one("#columns", Horizontal)
        await container.remove_children()
        await container.mount_all(self._column_widgets(self.controller.board))
        self._restore_focus()

    def _restore_focus(self) -> None:
        """Focus the remembered card, else the remembered column, else the first column."""
        for card in self.query(CardWidget):
            if card.card_id == self._focus_card_id:
                card.focus()
                return
        headers = list(self.query(ColumnHeader))
        for header in headers:
            if header.column_id == self._focus_column_id:
                header.focus()
                return
        if headers:
            headers[0].focus()

    def _remember(self, card_id: str | None, column_id: str | None) -> None:
        self._focus_card_id = card_id
        self._focus_column_id = column_id

    def _focused_column_id(self) -> str | None:
        return getattr(self.focused, "column_id", None)

    # -- actions --

    def action_move(self, direction: int) -> None:
        """Move the focused card to the neighbouring column, or the focused column itself."""
        focused = self.focused
        board = self.controller.board
        columns = board.sorted_columns()
        ids = [c.id for c in columns]
        if isinstance(focused, CardWidget):
            index = ids.index(focused.column_id) + direction
            if 0 <= index < len(ids):
                self._remember(focused.card_id, ids[index])
                self.controller.move_card(focused.card_id, ids[index])
        elif isinstance(focused, ColumnHeader):
            index = ids.index(focused.column_id) + direction
            if 0 <= index < len(ids):
                self._remember(None, focused.column_id)
                self.controller.move_column(focused.column_id, index)

    def action_add_card(self) -> None:
        column_id = self._focused_column_id()
        if column_id is None:
            return

        def on_title(title: str | None) -> None:
            if title:
                change = self.controller.add_card(column_id, title)
                self._remember(change.entity_id, column_id)

        self.app.push_screen(TextPrompt("New card title"), on_title)

    def action_add_column(self) -> None:
        change = self.controller.add_column()
        self._remember(None, change.entity_id)

    def action_rename(self) -> None:
        focused = self.focused
        if isinstance(focused, CardWidget):
            card_id = focused.card_id

            def on_card_title(title: str | None) -> None:
                if title:
                    self._remember(card_id, None)
                    self.controller.rename_card(card_id, title)

            self.app.push_screen(TextPrompt("Card title", focused.card.title), on_card_title)
        elif isinstance(focused, ColumnHeader):
            column_id = focused.column_id

            def on_column_title(title: str | None) -> None:
                if title:
                    self._remember(None, column_id)
                    self.controller.rename_column(column_id, title)

            self.app.push_screen(TextPrompt("Column title", focused.column.title), on_column_title)

    def action_cycle_priority(self) -> None:
        focused = self.focused
        if isinstance(focused, CardWidget):
            self._remember(focused.card_id, focused.column_id)
            self.controller.set_priority(focused.card_id, next_priority(focused.card.effective_priority))

    def action_delete(self) -> None:
        focused = self.focused
        if isinstance(focused, CardWidget):
            self._remember(None, focused.column_id)
            self.controller.delete_card(focused.card_id)
        elif isinstance(focused, ColumnHeader):
            self._remember(None, None)
            self.controller.delete_column(focused.column_id)
