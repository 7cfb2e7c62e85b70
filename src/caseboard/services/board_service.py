"""Service for board state management."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..models import (
    DEFAULT_CASE_TITLE,
    DEFAULT_COLUMN_TITLE,
    Board,
    BoardEvent,
    Case,
    CaseCreated,
    CaseMoved,
    Column,
    ColumnAdded,
    ColumnDeleted,
    ColumnRenamed,
    RenameEditing,
    RenameIdle,
)
from ..utils import IdFactory, now_utc, uuid_ids

logger = logging.getLogger(__name__)

BoardListener = Callable[[BoardEvent], None]


class BoardService:
    """Owns the board and applies every mutation to it.

    Operations never raise for stale or unknown targets: they log and
    return None, leaving the board untouched.
    """

    def __init__(
        self,
        board: Board | None = None,
        id_factory: IdFactory | None = None,
        clock: Callable[[], datetime] = now_utc,
        new_column_title: str = DEFAULT_COLUMN_TITLE,
        new_case_title: str = DEFAULT_CASE_TITLE,
    ) -> None:
        self.board = board if board is not None else Board()
        self._id_factory = id_factory or uuid_ids()
        self._clock = clock
        self._new_column_title = new_column_title
        self._new_case_title = new_case_title
        self._listeners: list[BoardListener] = []

    # Notifications

    def subscribe(self, listener: BoardListener) -> None:
        """Register a callback for board events."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: BoardListener) -> None:
        """Remove a previously registered callback."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event: BoardEvent) -> None:
        """Send an event to all listeners."""
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Board listener failed for %s", type(event).__name__)

    # Queries

    def snapshot(self) -> Board:
        """Get a deep copy of the board for rendering."""
        return self.board.model_copy(deep=True)

    def get_column(self, column_id: str) -> Column | None:
        """Get a live column by id."""
        return self.board.get_column(column_id)

    def find_case(self, case_id: str) -> tuple[Column, int] | None:
        """Find a case's owning column and position."""
        return self.board.find_case(case_id)

    @property
    def case_count(self) -> int:
        """Total number of cases on the board."""
        return self.board.case_count

    def _new_id(self) -> str:
        """Generate an id not used by any live column or case."""
        candidate = self._id_factory()
        while self.board.is_live_id(candidate):
            logger.debug("Skipping id already on the board: %s", candidate)
            candidate = self._id_factory()
        return candidate

    # Columns

    def add_column(self) -> Column:
        """Append a new empty column and start renaming it."""
        column = Column(id=self._new_id(), title=self._new_column_title)
        self.board.columns.append(column)
        self.board.rename = RenameEditing(column_id=column.id)

        logger.info("Column added: %s", column.id)
        self._emit(ColumnAdded(column_id=column.id, title=column.title))
        return column

    def begin_rename(self, column_id: str) -> Column | None:
        """
        Put a column into rename mode.

        Any other column being edited is abandoned with its title unchanged.
        """
        column = self.board.get_column(column_id)
        if column is None:
            logger.debug("begin_rename: column not found: %s", column_id)
            return None

        previous = self.board.editing_column_id
        if previous is not None and previous != column_id:
            logger.debug("begin_rename: abandoning edit of %s", previous)

        self.board.rename = RenameEditing(column_id=column_id)
        return column

    def rename_column(self, column_id: str, new_title: str) -> Column | None:
        """
        Commit a column title and leave rename mode.

        Blank titles keep the existing one. Rename mode is exited even when
        the column no longer exists.
        """
        self.board.rename = RenameIdle()

        column = self.board.get_column(column_id)
        if column is None:
            logger.debug("rename_column: column not found: %s", column_id)
            return None

        title = new_title.strip()
        if not title or title == column.title:
            return column

        old_title = column.title
        column.title = title
        logger.info("Column renamed: %s (%r -> %r)", column_id, old_title, title)
        self._emit(ColumnRenamed(column_id=column_id, old_title=old_title, new_title=title))
        return column

    def cancel_rename(self) -> None:
        """Leave rename mode without changing any title."""
        self.board.rename = RenameIdle()

    def delete_column(self, column_id: str) -> Column | None:
        """Remove a column together with all of its cases."""
        idx = self.board.column_index(column_id)
        if idx < 0:
            logger.debug("delete_column: column not found: %s", column_id)
            return None

        column = self.board.columns.pop(idx)
        if self.board.rename.is_editing(column_id):
            self.board.rename = RenameIdle()

        logger.info("Column deleted: %s (%d cases)", column_id, column.case_count)
        self._emit(
            ColumnDeleted(
                column_id=column.id,
                title=column.title,
                removed_cases=column.case_count,
            )
        )
        return column

    # Cases

    def add_case(self, column_id: str) -> Case | None:
        """Create a new case at the top of a column (newest first)."""
        column = self.board.get_column(column_id)
        if column is None:
            logger.debug("add_case: column not found: %s", column_id)
            return None

        case = Case(id=self._new_id(), title=self._new_case_title, updated=self._clock())
        column.cases.insert(0, case)

        logger.info("Case created: %s in %s", case.id, column_id)
        self._emit(
            CaseCreated(
                case_id=case.id,
                title=case.title,
                column_id=column.id,
                column_title=column.title,
            )
        )
        return case

    def move_case(
        self,
        source_column_id: str,
        source_position: int,
        dest_column_id: str,
        dest_position: int,
    ) -> Case | None:
        """
        Move a case to a position, optionally in another column.

        Within one column the destination index refers to the list after the
        case has been removed, so moving index 0 to 2 in [A, B, C, D] gives
        [B, C, A, D]. Across columns it refers to the destination list as it
        was. A destination past the end appends.

        Returns:
            The moved case, or None if nothing changed.
        """
        source = self.board.get_column(source_column_id)
        dest = self.board.get_column(dest_column_id)
        if source is None or dest is None:
            logger.debug(
                "move_case: column not found: %s -> %s", source_column_id, dest_column_id
            )
            return None

        if not 0 <= source_position < source.case_count:
            logger.debug(
                "move_case: source position %d out of range in %s",
                source_position,
                source_column_id,
            )
            return None

        if dest_position < 0:
            logger.debug("move_case: negative destination position %d", dest_position)
            return None

        if source is dest and source_position == dest_position:
            return None

        case = source.cases.pop(source_position)
        dest.cases.insert(dest_position, case)
        case.touch(self._clock())

        if source is dest:
            logger.debug(
                "Case reordered: %s in %s (pos %d -> %d)",
                case.id,
                source.id,
                source_position,
                dest_position,
            )
            return case

        logger.info("Case moved: %s (%s -> %s)", case.id, source.id, dest.id)
        self._emit(
            CaseMoved(
                case_id=case.id,
                title=case.title,
                source_column_id=source.id,
                dest_column_id=dest.id,
                dest_column_title=dest.title,
                dest_position=dest.index_of(case.id),
            )
        )
        return case
