"""Service layer for business logic."""

from .board_service import BoardListener, BoardService
from .drag_service import DragService

__all__ = [
    "BoardListener",
    "BoardService",
    "DragService",
]
