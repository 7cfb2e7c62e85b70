"""Column domain model."""

from pydantic import BaseModel, Field

from .case import Case

DEFAULT_COLUMN_TITLE = "New Column"


class Column(BaseModel):
    """A named, ordered bucket of cases."""

    id: str = Field(..., min_length=1)
    title: str = DEFAULT_COLUMN_TITLE
    cases: list[Case] = Field(default_factory=list)

    @property
    def case_count(self) -> int:
        """Number of cases in this column."""
        return len(self.cases)

    def index_of(self, case_id: str) -> int:
        """Get position of a case in this column, or -1 if not found."""
        for idx, case in enumerate(self.cases):
            if case.id == case_id:
                return idx
        return -1
