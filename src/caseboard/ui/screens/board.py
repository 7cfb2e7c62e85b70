"""Main kanban board screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from ...models import Board, Case, Column, DragOutcome
from ..gesture import DragGesture
from ..widgets.column import ColumnTitleInput, KanbanColumn


class EmptyBoardMessage(Static):
    """Displayed when the board has no columns."""

    pass


class BoardScreen(Screen):
    """Kanban board with a cursor and a keyboard drag gesture.

    The screen never mutates the board. It renders snapshots from the app's
    BoardService and turns cursor movement plus pick-up/drop into
    DragOutcomes for the app to resolve.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._current_column = 0
        self._current_case = 0
        self._board = Board()
        self._gesture = DragGesture()

    @property
    def board(self) -> Board:
        """The snapshot currently on screen."""
        return self._board

    @property
    def column_count(self) -> int:
        return len(self._board.columns)

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="board-container"):
            yield Horizontal(id="columns")
        yield Static("", id="drag-status", classes="drag-status-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Render the board when the screen mounts."""
        self.refresh_board()

    def refresh_board(self, focus_case_id: str | None = None) -> None:
        """
        Take a fresh snapshot and redraw.

        Args:
            focus_case_id: If provided, move the cursor to this case.
                           Otherwise the cursor keeps its position, clamped.
        """
        self._board = self.app.board_service.snapshot()  # pyrefly: ignore[missing-attribute]

        if focus_case_id is not None:
            found = self._board.find_case(focus_case_id)
            if found is not None:
                column, idx = found
                self._current_column = self._board.column_index(column.id)
                self._current_case = idx

        self._clamp_cursor()
        self.call_after_refresh(self._rebuild_columns)

    def focus_column(self, column_id: str) -> None:
        """Move the cursor to a column's first case."""
        idx = self._board.column_index(column_id)
        if idx >= 0:
            self._current_column = idx
            self._current_case = 0

    async def _rebuild_columns(self) -> None:
        """Replace the column widgets with ones built from the snapshot."""
        container = self.query_one("#columns", Horizontal)
        await container.remove_children()

        if not self._board.columns:
            await container.mount(EmptyBoardMessage("No columns yet. Press c to add one."))
        else:
            await container.mount(*self._build_columns())

        self._update_drag_status()
        for title_input in self.query(ColumnTitleInput):
            title_input.focus()
            break

    def _build_columns(self) -> list[KanbanColumn]:
        """Create one column widget per board column."""
        held_id = self._gesture.draggable_id
        source = self._gesture.source
        widgets: list[KanbanColumn] = []
        for idx, column in enumerate(self._board.columns):
            is_current = idx == self._current_column
            cursor = self._current_case if is_current and column.cases else None
            drop_slot = (
                is_current
                and self._gesture.active
                and source is not None
                and source.droppable_id != column.id
                and self._current_case == column.case_count
            )
            widgets.append(
                KanbanColumn(
                    column,
                    editing=self._board.rename.is_editing(column.id),
                    cursor=cursor,
                    held_case_id=held_id,
                    drop_slot=drop_slot,
                    classes="kanban-column -active" if is_current else "kanban-column",
                )
            )
        return widgets

    # Cursor

    def _max_case_index(self, column: Column) -> int:
        """
        Last valid cursor position in a column.

        While holding a case, other columns gain one extra slot past their
        last card so a drop can append.
        """
        source = self._gesture.source
        if self._gesture.active and source is not None and source.droppable_id != column.id:
            return column.case_count
        return max(column.case_count - 1, 0)

    def _clamp_cursor(self) -> None:
        if not self._board.columns:
            self._current_column = 0
            self._current_case = 0
            return
        self._current_column = max(0, min(self._current_column, self.column_count - 1))
        column = self._board.columns[self._current_column]
        self._current_case = max(0, min(self._current_case, self._max_case_index(column)))

    def navigate_column(self, delta: int) -> None:
        """Move the cursor between columns."""
        new_column = max(0, min(self._current_column + delta, self.column_count - 1))
        if new_column != self._current_column:
            self._current_column = new_column
            self._clamp_cursor()
            self.call_after_refresh(self._rebuild_columns)

    def navigate_case(self, delta: int) -> None:
        """Move the cursor between cases in the current column."""
        column = self.current_column
        if column is None:
            return
        new_case = max(0, min(self._current_case + delta, self._max_case_index(column)))
        if new_case != self._current_case:
            self._current_case = new_case
            self.call_after_refresh(self._rebuild_columns)

    def navigate_to_case(self, index: int) -> None:
        """Move the cursor to a specific case index (-1 for last)."""
        column = self.current_column
        if column is None:
            return
        last = self._max_case_index(column)
        self._current_case = last if index < 0 else min(index, last)
        self.call_after_refresh(self._rebuild_columns)

    @property
    def current_column(self) -> Column | None:
        """Column under the cursor."""
        if 0 <= self._current_column < self.column_count:
            return self._board.columns[self._current_column]
        return None

    @property
    def current_column_index(self) -> int:
        return self._current_column

    @property
    def current_case_index(self) -> int:
        return self._current_case

    def get_current_case(self) -> Case | None:
        """Case under the cursor."""
        column = self.current_column
        if column and 0 <= self._current_case < column.case_count:
            return column.cases[self._current_case]
        return None

    # Drag gesture

    @property
    def is_holding(self) -> bool:
        """Whether a case has been picked up."""
        return self._gesture.active

    def pick_up_current_case(self) -> Case | None:
        """Start dragging the case under the cursor."""
        column = self.current_column
        case = self.get_current_case()
        if column is None or case is None:
            return None
        self._gesture.pick_up(case.id, column.id, self._current_case)
        self.call_after_refresh(self._rebuild_columns)
        return case

    def drop_held_case(self) -> DragOutcome | None:
        """Drop the held case at the cursor."""
        column = self.current_column
        if not self._gesture.active or column is None:
            return None
        return self._gesture.drop(column.id, self._current_case)

    def cancel_drag(self) -> DragOutcome | None:
        """Abort the gesture, returning the aborted outcome."""
        if not self._gesture.active:
            return None
        return self._gesture.cancel()

    def _update_drag_status(self) -> None:
        """Show what is being dragged in the status bar."""
        status = self.query_one("#drag-status", Static)
        held_id = self._gesture.draggable_id
        found = self._board.find_case(held_id) if held_id else None
        if found is not None:
            column, idx = found
            title = column.cases[idx].title
            status.update(f"[dim]Moving:[/] {title} [dim](Space to drop, Esc to cancel)[/]")
            status.display = True
        else:
            status.update("")
            status.display = False
