"""UI components."""

from .gesture import DragGesture
from .screens.board import BoardScreen
from .widgets.case_card import CaseCard
from .widgets.column import KanbanColumn

__all__ = [
    "BoardScreen",
    "CaseCard",
    "DragGesture",
    "KanbanColumn",
]
