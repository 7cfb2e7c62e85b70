"""Keyboard pick-up/drop gesture producing drag outcomes."""

from ..models import DraggableLocation, DragOutcome


class DragGesture:
    """Tracks a case that has been picked up but not yet dropped.

    The board screen drives it: `pick_up` when the user grabs a card,
    `drop` or `cancel` when the gesture ends. Both return the DragOutcome
    handed to DragService.
    """

    def __init__(self) -> None:
        self._draggable_id: str | None = None
        self._source: DraggableLocation | None = None

    @property
    def active(self) -> bool:
        """Whether a case is currently held."""
        return self._source is not None

    @property
    def source(self) -> DraggableLocation | None:
        """Where the held case was picked up."""
        return self._source

    @property
    def draggable_id(self) -> str | None:
        """Id of the held case."""
        return self._draggable_id

    def pick_up(self, draggable_id: str, droppable_id: str, index: int) -> None:
        """Start holding a case. Picking up again replaces the held case."""
        self._draggable_id = draggable_id
        self._source = DraggableLocation(droppable_id=droppable_id, index=index)

    def drop(self, droppable_id: str, index: int) -> DragOutcome:
        """Release the held case over a column position."""
        outcome = self._outcome(DraggableLocation(droppable_id=droppable_id, index=index))
        self._reset()
        return outcome

    def cancel(self) -> DragOutcome:
        """Abandon the gesture. The outcome has no destination."""
        outcome = self._outcome(None)
        self._reset()
        return outcome

    def _outcome(self, destination: DraggableLocation | None) -> DragOutcome:
        if self._source is None or self._draggable_id is None:
            raise RuntimeError("No case is being dragged")
        return DragOutcome(
            draggable_id=self._draggable_id,
            source=self._source,
            destination=destination,
        )

    def _reset(self) -> None:
        self._draggable_id = None
        self._source = None
