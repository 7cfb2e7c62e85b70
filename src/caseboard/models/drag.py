"""Drag gesture outcome models."""

from pydantic import BaseModel, Field


class DraggableLocation(BaseModel):
    """A position inside a droppable container (one container per column)."""

    droppable_id: str
    index: int


class DragOutcome(BaseModel):
    """Result of a completed drag gesture.

    `destination` is None when the gesture was aborted or dropped outside
    any container.
    """

    draggable_id: str = ""
    source: DraggableLocation
    destination: DraggableLocation | None = None

    @property
    def aborted(self) -> bool:
        return self.destination is None


class MoveInstruction(BaseModel):
    """Arguments for BoardService.move_case."""

    model_config = {"frozen": True}

    source_column_id: str
    source_position: int = Field(..., ge=0)
    dest_column_id: str
    dest_position: int = Field(..., ge=0)
