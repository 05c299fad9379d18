"""Column widgets for corkboard UI."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Rule, Static

from corkboard.model.entities import Card, Column
from corkboard.ui.card import CardWidget


class ColumnHeader(Static, can_focus=True):
    """Column title. Focusable so empty columns can still take commands."""

    DEFAULT_CSS = """
    ColumnHeader {
        width: 100%;
        text-align: center;
        text-style: bold;
    }
    ColumnHeader:focus {
        background: $primary;
    }
    """

    def __init__(self, column: Column):
        super().__init__(column.title)
        self.column = column

    @property
    def column_id(self) -> str:
        return self.column.id


class ColumnWidget(Vertical):
    """A single column on the board."""

    DEFAULT_CSS = """
    ColumnWidget {
        width: 1fr;
        height: auto;
        min-height: 100%;
        min-width: 25;
        max-width: 30;
        padding: 0 1;
        border-right: tall $surface-lighten-1;
    }
    ColumnWidget > Rule.-horizontal {
        margin: 0;
    }
    """

    def __init__(self, column: Column, cards: tuple[Card, ...]):
        super().__init__()
        self.column = column
        self.cards = cards

    @property
    def column_id(self) -> str:
        return self.column.id

    def compose(self) -> ComposeResult:
        yield ColumnHeader(self.column)
        yield Rule()
        for card in self.cards:
            yield CardWidget(card)
