"""Kanban column widget."""

from __future__ import annotations

from textual import events
from textual.actions import SkipAction
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, Static

from ...models import Column
from .case_card import CaseCard, DropSlot


class CaseListScroll(VerticalScroll):
    """Scroll container for case lists.

    Raises SkipAction for navigation keys so they bubble up to the App
    for cursor movement instead of being handled as scroll actions.
    """

    def action_scroll_up(self) -> None:
        raise SkipAction()

    def action_scroll_down(self) -> None:
        raise SkipAction()

    def action_scroll_left(self) -> None:
        raise SkipAction()

    def action_scroll_right(self) -> None:
        raise SkipAction()

    def action_scroll_home(self) -> None:
        raise SkipAction()

    def action_scroll_end(self) -> None:
        raise SkipAction()


class EmptyColumnMessage(Static):
    """Displayed when a column has no cases."""

    pass


class ColumnTitleInput(Input):
    """Inline editor for a column title while in rename mode."""

    class Committed(Message):
        """Posted when the editor loses focus."""

        def __init__(self, title_input: ColumnTitleInput) -> None:
            super().__init__()
            self.title_input = title_input

        @property
        def column_id(self) -> str:
            return self.title_input.column_id

        @property
        def value(self) -> str:
            return self.title_input.value

    def __init__(self, column_id: str, value: str, **kwargs) -> None:
        super().__init__(value=value, placeholder="Column title", **kwargs)
        self.column_id = column_id

    def on_blur(self, event: events.Blur) -> None:
        self.post_message(self.Committed(self))


class KanbanColumn(Widget):
    """A single column in the kanban board.

    Built from a snapshot of the column; the board screen rebuilds it after
    every mutation rather than patching it in place.
    """

    def __init__(
        self,
        column: Column,
        *args,
        editing: bool = False,
        cursor: int | None = None,
        held_case_id: str | None = None,
        drop_slot: bool = False,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._column = column
        self._editing = editing
        self._cursor = cursor
        self._held_case_id = held_case_id
        self._drop_slot = drop_slot

    @property
    def column_id(self) -> str:
        return self._column.id

    @property
    def case_count(self) -> int:
        return self._column.case_count

    @property
    def _header_text(self) -> str:
        """Header text with styled case count."""
        return f"{self._column.title} [dim]({self._column.case_count})[/]"

    def compose(self) -> ComposeResult:
        """Create column layout."""
        if self._editing:
            yield ColumnTitleInput(
                self._column.id,
                self._column.title,
                classes="column-title-input",
            )
        else:
            yield Static(self._header_text, classes="column-header")

        with CaseListScroll(classes="column-content"):
            if not self._column.cases and not self._drop_slot:
                yield EmptyColumnMessage("No cases")

            for idx, case in enumerate(self._column.cases):
                classes = ["case-card"]
                if idx == self._cursor:
                    classes.append("-cursor")
                if case.id == self._held_case_id:
                    classes.append("-held")
                yield CaseCard(
                    case,
                    classes=" ".join(classes),
                )

            if self._drop_slot:
                yield DropSlot("Drop here", classes="drop-slot -cursor")
