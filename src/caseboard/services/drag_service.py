"""Service translating completed drag gestures into board moves."""

from __future__ import annotations

import logging

from ..models import Case, DragOutcome, MoveInstruction
from .board_service import BoardService

logger = logging.getLogger(__name__)


class DragService:
    """Resolves drag outcomes and forwards them to BoardService.move_case."""

    def __init__(self, board_service: BoardService) -> None:
        self.board_service = board_service

    def resolve(self, outcome: DragOutcome) -> MoveInstruction | None:
        """
        Turn a drag outcome into a move instruction.

        Returns None for aborted gestures, for drops back onto the starting
        position, and for stale gestures whose held case is no longer at
        the recorded source position.
        """
        destination = outcome.destination
        if destination is None:
            logger.debug("Drag aborted: %s", outcome.draggable_id)
            return None

        source = outcome.source
        if source.droppable_id == destination.droppable_id and source.index == destination.index:
            logger.debug("Drag dropped in place: %s", outcome.draggable_id)
            return None

        if source.index < 0 or destination.index < 0:
            logger.debug("Drag with negative index ignored: %s", outcome.draggable_id)
            return None

        if outcome.draggable_id and not self._held_case_at_source(outcome):
            logger.debug(
                "Stale drag ignored: %s is not at %s[%d]",
                outcome.draggable_id,
                source.droppable_id,
                source.index,
            )
            return None

        return MoveInstruction(
            source_column_id=source.droppable_id,
            source_position=source.index,
            dest_column_id=destination.droppable_id,
            dest_position=destination.index,
        )

    def _held_case_at_source(self, outcome: DragOutcome) -> bool:
        """Whether the dragged case still sits where the gesture started."""
        column = self.board_service.get_column(outcome.source.droppable_id)
        if column is None or outcome.source.index >= column.case_count:
            return False
        return column.cases[outcome.source.index].id == outcome.draggable_id

    def handle_drag_end(self, outcome: DragOutcome) -> Case | None:
        """Apply a completed drag to the board. Returns the moved case, if any."""
        instruction = self.resolve(outcome)
        if instruction is None:
            return None

        return self.board_service.move_case(
            instruction.source_column_id,
            instruction.source_position,
            instruction.dest_column_id,
            instruction.dest_position,
        )
