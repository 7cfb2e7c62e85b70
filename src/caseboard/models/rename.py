"""Rename mode state machine.

The board is either idle or editing exactly one column's title.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field


class RenameIdle(BaseModel):
    """No column title is being edited."""

    kind: Literal["idle"] = "idle"

    def is_editing(self, column_id: str) -> bool:
        return False


class RenameEditing(BaseModel):
    """The title of `column_id` is being edited."""

    kind: Literal["editing"] = "editing"
    column_id: str

    def is_editing(self, column_id: str) -> bool:
        return self.column_id == column_id


RenameState = Annotated[RenameIdle | RenameEditing, Field(discriminator="kind")]
