"""caseboard TUI Application."""

import logging

from textual.app import App
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import Input

from .config import Settings
from .models import Board, BoardEvent
from .services import BoardService, DragService
from .ui.screens.board import BoardScreen
from .ui.widgets import ColumnTitleInput, ConfirmModal, HelpScreen
from .utils import make_id_factory

logger = logging.getLogger(__name__)

DARK_THEME = "textual-dark"
LIGHT_THEME = "textual-light"


class CaseboardApp(App):
    """caseboard - Terminal Kanban board."""

    TITLE = "Board"

    CSS_PATH = "ui/styles.tcss"

    BINDINGS = [
        # Core bindings
        Binding("q", "quit", "Quit", show=True),
        Binding("?", "help", "Help", show=True),
        Binding("t", "toggle_theme", "Theme", show=True),
        # Navigation - vim style
        Binding("h", "nav_left", "← Column", show=False),
        Binding("j", "nav_down", "↓ Case", show=False),
        Binding("k", "nav_up", "↑ Case", show=False),
        Binding("l", "nav_right", "→ Column", show=False),
        # Navigation - arrow keys
        Binding("left", "nav_left", "← Column", show=False),
        Binding("down", "nav_down", "↓ Case", show=False),
        Binding("up", "nav_up", "↑ Case", show=False),
        Binding("right", "nav_right", "→ Column", show=False),
        # Jump navigation
        Binding("g", "nav_first", "First", show=False),
        Binding("G", "nav_last", "Last", show=False),
        Binding("home", "nav_first", "First", show=False),
        Binding("end", "nav_last", "Last", show=False),
        # Board actions
        Binding("c", "add_column", "Add Column", show=True),
        Binding("n", "new_case", "Create Case", show=True),
        Binding("r", "rename_column", "Rename", show=True),
        Binding("d", "delete_column", "Delete", show=True),
        Binding("space", "grab", "Move", show=True),
        Binding("escape", "escape", "Back", show=False, priority=True),
    ]

    SCREENS = {
        "board": BoardScreen,
    }

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self._init_services()

    def _init_services(self) -> None:
        """Create the board and the services around it."""
        board = Board.seed() if self.settings.seed else Board()
        self.board_service = BoardService(
            board,
            id_factory=make_id_factory(self.settings.id_strategy),
            new_column_title=self.settings.new_column_title,
            new_case_title=self.settings.new_case_title,
        )
        self.drag_service = DragService(self.board_service)
        self.board_service.subscribe(self._on_board_event)

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.theme = DARK_THEME if self.settings.theme == "dark" else LIGHT_THEME
        self.push_screen("board")

    def _on_board_event(self, event: BoardEvent) -> None:
        """Show board notifications as toasts."""
        self.notify(event.message, timeout=2)

    @property
    def dark_mode(self) -> bool:
        return self.theme == DARK_THEME

    def action_toggle_theme(self) -> None:
        """Switch between dark and light themes."""
        self.theme = LIGHT_THEME if self.dark_mode else DARK_THEME
        logger.debug("Theme switched to %s", self.theme)

    def action_help(self) -> None:
        """Show help screen."""
        self.push_screen(HelpScreen())

    # Navigation actions
    def action_nav_left(self) -> None:
        """Navigate to previous column."""
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_column(-1)

    def action_nav_right(self) -> None:
        """Navigate to next column."""
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_column(1)

    def action_nav_up(self) -> None:
        """Navigate to previous case."""
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_case(-1)

    def action_nav_down(self) -> None:
        """Navigate to next case."""
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_case(1)

    def action_nav_first(self) -> None:
        """Navigate to first case in column."""
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_to_case(0)

    def action_nav_last(self) -> None:
        """Navigate to last case in column."""
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_to_case(-1)

    def _refuse_while_holding(self, screen: BoardScreen) -> bool:
        """Warn and return True when a held case blocks board edits."""
        if not screen.is_holding:
            return False
        self.notify("Drop or cancel the held case first", severity="warning", timeout=2)
        return True

    # Column actions
    def action_add_column(self) -> None:
        """Append a column and start editing its title."""
        screen = self.screen
        if not isinstance(screen, BoardScreen):
            return
        if self._refuse_while_holding(screen):
            return

        column = self.board_service.add_column()
        screen.focus_column(column.id)
        screen.refresh_board()

    def action_rename_column(self) -> None:
        """Start editing the current column's title."""
        screen = self.screen
        if not isinstance(screen, BoardScreen):
            return
        if self._refuse_while_holding(screen):
            return

        column = screen.current_column
        if column is None:
            return

        self.board_service.begin_rename(column.id)
        screen.refresh_board()

    def _commit_rename(self, column_id: str, title: str) -> None:
        """Save a title typed into a column header."""
        if not self.board_service.board.rename.is_editing(column_id):
            return

        self.board_service.rename_column(column_id, title)
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.refresh_board()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Commit a column title on Enter."""
        if isinstance(event.input, ColumnTitleInput):
            self._commit_rename(event.input.column_id, event.value)

    def on_column_title_input_committed(self, event: ColumnTitleInput.Committed) -> None:
        """Commit a column title when the editor loses focus."""
        self._commit_rename(event.column_id, event.value)

    def action_delete_column(self) -> None:
        """Delete the current column (with confirmation)."""
        screen = self.screen
        if not isinstance(screen, BoardScreen):
            return
        if self._refuse_while_holding(screen):
            return

        column = screen.current_column
        if column is None:
            return

        noun = "case" if column.case_count == 1 else "cases"
        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            ConfirmModal(
                f"Delete '{column.title}'?",
                f"Its {column.case_count} {noun} will be deleted too.",
            ),
            callback=self._handle_delete_confirm,
        )

    def _handle_delete_confirm(self, confirmed: bool) -> None:
        """Handle delete confirmation result."""
        if not confirmed:
            return

        screen = self.screen
        if not isinstance(screen, BoardScreen):
            return

        column = screen.current_column
        if column:
            self.board_service.delete_column(column.id)
            screen.refresh_board()

    # Case actions
    def action_new_case(self) -> None:
        """Create a case at the top of the first column."""
        screen = self.screen
        if not isinstance(screen, BoardScreen):
            return
        if self._refuse_while_holding(screen):
            return

        if not self.board_service.board.columns:
            self.notify("Add a column first", severity="warning", timeout=2)
            return

        first_column = self.board_service.board.columns[0]
        case = self.board_service.add_case(first_column.id)
        if case is not None:
            screen.refresh_board(focus_case_id=case.id)

    def action_grab(self) -> None:
        """Pick up the case under the cursor, or drop the held one."""
        screen = self.screen
        if not isinstance(screen, BoardScreen):
            return

        if not screen.is_holding:
            screen.pick_up_current_case()
            return

        outcome = screen.drop_held_case()
        if outcome is None:
            return

        self.drag_service.handle_drag_end(outcome)
        screen.refresh_board(focus_case_id=outcome.draggable_id)

    def action_escape(self) -> None:
        """Handle escape: dismiss modal, cancel rename, or put back a held case."""
        screen = self.screen

        # If we're on a modal screen, dismiss it
        if isinstance(screen, ModalScreen):
            screen.dismiss()
            return

        if not isinstance(screen, BoardScreen):
            return

        if self.board_service.board.editing_column_id is not None:
            self.board_service.cancel_rename()
            screen.refresh_board()
            return

        outcome = screen.cancel_drag()
        if outcome is not None:
            # Aborted outcomes resolve to no move
            self.drag_service.handle_drag_end(outcome)
            screen.refresh_board(focus_case_id=outcome.draggable_id)


def run(settings: Settings | None = None) -> None:
    """Run the caseboard application."""
    app = CaseboardApp(settings)
    app.run()
