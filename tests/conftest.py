"""Shared fixtures."""

from datetime import UTC, datetime

import pytest

from caseboard.models import Board, Case, Column
from caseboard.services import BoardService, DragService
from caseboard.utils import SequentialIds

FIXED_NOW = datetime(2025, 1, 15, 10, 30, tzinfo=UTC)


def make_column(column_id: str, *case_ids: str, title: str | None = None) -> Column:
    """Build a column holding cases titled after their ids."""
    return Column(
        id=column_id,
        title=title or column_id.upper(),
        cases=[Case(id=case_id, title=case_id, updated=FIXED_NOW) for case_id in case_ids],
    )


def titles(column: Column) -> list[str]:
    """Case titles of a column in order."""
    return [case.title for case in column.cases]


@pytest.fixture
def events() -> list:
    """Collected notification events."""
    return []


@pytest.fixture
def board_service(events: list) -> BoardService:
    """Service over the seed board with predictable ids and clock."""
    service = BoardService(
        Board.seed(now=FIXED_NOW),
        id_factory=SequentialIds("id-"),
        clock=lambda: FIXED_NOW,
    )
    service.subscribe(events.append)
    return service


@pytest.fixture
def empty_service(events: list) -> BoardService:
    """Service over an empty board."""
    service = BoardService(id_factory=SequentialIds("id-"), clock=lambda: FIXED_NOW)
    service.subscribe(events.append)
    return service


@pytest.fixture
def drag_service(board_service: BoardService) -> DragService:
    return DragService(board_service)
