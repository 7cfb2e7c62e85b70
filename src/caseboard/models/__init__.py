"""Data models."""

from .board import Board
from .case import DEFAULT_CASE_TITLE, Case
from .column import DEFAULT_COLUMN_TITLE, Column
from .drag import DraggableLocation, DragOutcome, MoveInstruction
from .events import (
    BoardEvent,
    CaseCreated,
    CaseMoved,
    ColumnAdded,
    ColumnDeleted,
    ColumnRenamed,
)
from .rename import RenameEditing, RenameIdle, RenameState

__all__ = [
    "DEFAULT_CASE_TITLE",
    "DEFAULT_COLUMN_TITLE",
    "Board",
    "BoardEvent",
    "Case",
    "CaseCreated",
    "CaseMoved",
    "Column",
    "ColumnAdded",
    "ColumnDeleted",
    "ColumnRenamed",
    "DragOutcome",
    "DraggableLocation",
    "MoveInstruction",
    "RenameEditing",
    "RenameIdle",
    "RenameState",
]
