"""Case card widget."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static

from ...models import Case


class CaseCard(Widget):
    """A case displayed as a card in a column."""

    def __init__(self, case_data: Case, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._case_data = case_data

    @property
    def case(self) -> Case:
        """Get the case for this card."""
        return self._case_data

    def compose(self) -> ComposeResult:
        """Create card layout."""
        yield Static(self._truncate(self._case_data.title, 40), classes="case-title")
        yield Static(
            f"[dim]Updated {self._case_data.updated_label()}[/]",
            classes="case-updated",
        )

    def _truncate(self, text: str, max_len: int) -> str:
        """Truncate text with ellipsis."""
        if len(text) <= max_len:
            return text
        return text[: max_len - 1] + "…"


class DropSlot(Static):
    """Placeholder marking a drop position after the last card."""

    pass
