"""Case domain model."""

from datetime import datetime

from pydantic import BaseModel, Field

from ..utils import humanize_age, now_utc

DEFAULT_CASE_TITLE = "New Case"


class Case(BaseModel):
    """A single work item shown as a card on the board."""

    id: str = Field(..., min_length=1)
    title: str = DEFAULT_CASE_TITLE
    updated: datetime = Field(default_factory=now_utc)

    def updated_label(self, now: datetime | None = None) -> str:
        """Display label for the last update, e.g. "Just now" or "3 days ago"."""
        return humanize_age(self.updated, now)

    def touch(self, when: datetime | None = None) -> None:
        """Mark the case as updated."""
        self.updated = when or now_utc()
