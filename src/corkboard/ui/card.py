"""Card widget for corkboard UI."""

from textual.widgets import Static

from corkboard.model.entities import Card, Priority

PRIORITY_MARKERS = {
    Priority.LOW: "▽",
    Priority.MEDIUM: "◇",
    Priority.HIGH: "▲",
}

PRIORITY_CYCLE = (Priority.LOW, Priority.MEDIUM, Priority.HIGH)


def next_priority(priority: Priority) -> Priority:
    """low → medium → high → low"""
    return PRIORITY_CYCLE[(PRIORITY_CYCLE.index(priority) + 1) % len(PRIORITY_CYCLE)]


def card_label(card: Card) -> str:
    return f"{PRIORITY_MARKERS[card.effective_priority]} {card.title}"


class CardWidget(Static, can_focus=True):
    """A single card in a column."""

    DEFAULT_CSS = """
    CardWidget {
        width: 100%;
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        background: $surface;
    }
    CardWidget:focus {
        background: $primary;
    }
    CardWidget.priority-high {
        border-left: tall $error;
    }
    CardWidget.priority-low {
        color: $text-muted;
    }
    """

    def __init__(self, card: Card):
        super().__init__(card_label(card), classes=f"priority-{card.effective_priority.value}")
        self.card = card

    @property
    def card_id(self) -> str:
        return self.card.id

    @property
    def column_id(self) -> str:
        return self.card.column_id
