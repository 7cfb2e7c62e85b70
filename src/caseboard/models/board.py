"""Board state models."""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, Field

from ..utils import now_utc
from .case import Case
from .column import Column
from .rename import RenameEditing, RenameIdle, RenameState

# Sample content shown on first launch: (column id, title, case ids)
SEED_COLUMNS: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    ("todo", "TODO", ("1", "2")),
    ("in-progress", "IN PROGRESS", ("3",)),
    ("done", "DONE", ("4",)),
    ("archived", "ARCHIVED", ()),
)
SEED_CASE_AGE = timedelta(days=3)


class Board(BaseModel):
    """Full board state: ordered columns and the rename marker."""

    columns: list[Column] = Field(default_factory=list)
    rename: RenameState = Field(default_factory=RenameIdle)

    @classmethod
    def seed(cls, now: datetime | None = None) -> Board:
        """Create the sample board with four columns and four cases."""
        updated = (now or now_utc()) - SEED_CASE_AGE
        return cls(
            columns=[
                Column(
                    id=column_id,
                    title=title,
                    cases=[
                        Case(id=case_id, title=f"Case {case_id}", updated=updated)
                        for case_id in case_ids
                    ],
                )
                for column_id, title, case_ids in SEED_COLUMNS
            ]
        )

    def get_column(self, column_id: str) -> Column | None:
        """Get a column by id."""
        for column in self.columns:
            if column.id == column_id:
                return column
        return None

    def column_index(self, column_id: str) -> int:
        """Get position of a column, or -1 if not found."""
        for idx, column in enumerate(self.columns):
            if column.id == column_id:
                return idx
        return -1

    def find_case(self, case_id: str) -> tuple[Column, int] | None:
        """Find the column owning a case and the case's position in it."""
        for column in self.columns:
            idx = column.index_of(case_id)
            if idx >= 0:
                return column, idx
        return None

    @property
    def column_ids(self) -> list[str]:
        """Column ids in display order."""
        return [column.id for column in self.columns]

    @property
    def case_ids(self) -> list[str]:
        """All case ids, column by column."""
        return [case.id for column in self.columns for case in column.cases]

    @property
    def case_count(self) -> int:
        """Total number of cases across all columns."""
        return sum(column.case_count for column in self.columns)

    @property
    def editing_column_id(self) -> str | None:
        """Id of the column in rename mode, if any."""
        if isinstance(self.rename, RenameEditing):
            return self.rename.column_id
        return None

    def is_live_id(self, value: str) -> bool:
        """Check whether an id is already used by a column or a case."""
        return value in self.column_ids or value in self.case_ids
