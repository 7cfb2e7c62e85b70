"""Notification events emitted after board mutations."""

from pydantic import BaseModel


class BoardEvent(BaseModel):
    """Base class for informational board notifications."""

    model_config = {"frozen": True}

    @property
    def message(self) -> str:
        """Human-readable text for a toast."""
        raise NotImplementedError


class ColumnAdded(BoardEvent):
    column_id: str
    title: str

    @property
    def message(self) -> str:
        return "Column added"


class ColumnRenamed(BoardEvent):
    column_id: str
    old_title: str
    new_title: str

    @property
    def message(self) -> str:
        return f"Column renamed to {self.new_title}"


class ColumnDeleted(BoardEvent):
    column_id: str
    title: str
    removed_cases: int

    @property
    def message(self) -> str:
        return "Column deleted successfully"


class CaseCreated(BoardEvent):
    case_id: str
    title: str
    column_id: str
    column_title: str

    @property
    def message(self) -> str:
        return f"{self.title} created in {self.column_title}"


class CaseMoved(BoardEvent):
    case_id: str
    title: str
    source_column_id: str
    dest_column_id: str
    dest_column_title: str
    dest_position: int

    @property
    def message(self) -> str:
        return f"Moved to {self.dest_column_title}"
