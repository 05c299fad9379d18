"""Main Textual application for corkboard."""

from textual.app import App

from corkboard.config import Config
from corkboard.controller import BoardController
from corkboard.errors import StoreError
from corkboard.store import open_store
from corkboard.ui.board import BoardScreen


class CorkboardApp(App):
    """Kanban board TUI."""

    TITLE = "corkboard"
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, config: Config | None = None, controller: BoardController | None = None):
        super().__init__()
        self.config = config or Config()
        self.controller = controller

    async def on_mount(self) -> None:
        if self.controller is None:
            try:
                store = open_store(self.config.store, self.config.path, branch=self.config.branch)
            except StoreError as e:
                self.exit(return_code=1, message=f"error: {e}")
                return
            self.controller = await BoardController.open(store, save_mode=self.config.save_mode)
        self.push_screen(BoardScreen(self.controller))

    async def action_quit(self) -> None:
        """Wait for pending saves, then quit."""
        if self.controller is not None:
            await self.controller.drain()
        self.exit()
