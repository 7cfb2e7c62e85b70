"""Widget components."""

from ..screens.help import HelpScreen
from .case_card import CaseCard, DropSlot
from .column import (
    CaseListScroll,
    ColumnTitleInput,
    EmptyColumnMessage,
    KanbanColumn,
)
from .confirm_modal import ConfirmModal

__all__ = [
    "CaseCard",
    "CaseListScroll",
    "ColumnTitleInput",
    "ConfirmModal",
    "DropSlot",
    "EmptyColumnMessage",
    "HelpScreen",
    "KanbanColumn",
]
