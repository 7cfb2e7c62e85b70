"""Application settings."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from ..models import DEFAULT_CASE_TITLE, DEFAULT_COLUMN_TITLE


class Settings(BaseSettings):
    """Application settings."""

    theme: Literal["dark", "light"] = Field(
        default="dark",
        description="Color scheme for the board",
    )

    seed: bool = Field(
        default=True,
        description="Start with the sample board instead of an empty one",
    )

    id_strategy: Literal["uuid", "sequential"] = Field(
        default="uuid",
        description="How new column and case ids are generated",
    )

    new_column_title: str = Field(
        default=DEFAULT_COLUMN_TITLE,
        min_length=1,
        description="Title given to newly added columns",
    )

    new_case_title: str = Field(
        default=DEFAULT_CASE_TITLE,
        min_length=1,
        description="Title given to newly created cases",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "CASEBOARD_",
    }
