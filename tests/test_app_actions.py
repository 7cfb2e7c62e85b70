"""Tests for app action handlers.

These tests drive the action methods against a real BoardService with a
mocked screen, verifying board mutations and user feedback.
"""

from unittest.mock import MagicMock, PropertyMock, patch

import pytest
from conftest import titles

from caseboard.app import CaseboardApp
from caseboard.models import DraggableLocation, DragOutcome
from caseboard.services import BoardService, DragService
from caseboard.ui.screens.board import BoardScreen


@pytest.fixture
def app(board_service: BoardService) -> CaseboardApp:
    """App instance wired to the seed board without starting Textual."""
    app = CaseboardApp.__new__(CaseboardApp)
    app.notify = MagicMock()
    app.board_service = board_service
    app.drag_service = DragService(board_service)
    board_service.subscribe(app._on_board_event)
    return app


@pytest.fixture
def screen(board_service: BoardService) -> MagicMock:
    """Board screen mock positioned on the first column."""
    mock_screen = MagicMock()
    mock_screen.current_column = board_service.get_column("todo")
    mock_screen.is_holding = False
    return mock_screen


def run_action(app: CaseboardApp, screen: MagicMock, action: str, *args) -> None:
    """Invoke an app method with `screen` as the active BoardScreen."""
    with (
        patch.object(CaseboardApp, "screen", new_callable=PropertyMock, return_value=screen),
        patch(
            "caseboard.app.isinstance",
            side_effect=lambda obj, cls: obj is screen if cls is BoardScreen else isinstance(obj, cls),
        ),
    ):
        getattr(app, action)(*args)


class TestColumnActions:
    """Tests for add/rename/delete column actions."""

    def test_add_column_notifies_and_focuses(self, app, screen, board_service):
        run_action(app, screen, "action_add_column")

        new_column = board_service.board.columns[-1]
        screen.focus_column.assert_called_once_with(new_column.id)
        screen.refresh_board.assert_called_once_with()
        app.notify.assert_called_once_with("Column added", timeout=2)
        assert board_service.board.editing_column_id == new_column.id

    def test_rename_column_enters_rename_mode(self, app, screen, board_service):
        run_action(app, screen, "action_rename_column")

        assert board_service.board.editing_column_id == "todo"
        screen.refresh_board.assert_called_once_with()

    def test_commit_rename_saves_title(self, app, screen, board_service):
        board_service.begin_rename("todo")

        run_action(app, screen, "_commit_rename", "todo", "Backlog")

        assert board_service.get_column("todo").title == "Backlog"
        app.notify.assert_called_once_with("Column renamed to Backlog", timeout=2)

    def test_commit_rename_ignored_when_not_editing(self, app, screen, board_service):
        """A late blur after Enter does not rename again."""
        run_action(app, screen, "_commit_rename", "todo", "Backlog")

        assert board_service.get_column("todo").title == "TODO"
        screen.refresh_board.assert_not_called()

    def test_delete_confirmed_removes_column(self, app, screen, board_service):
        run_action(app, screen, "_handle_delete_confirm", True)

        assert board_service.get_column("todo") is None
        app.notify.assert_called_once_with("Column deleted successfully", timeout=2)

    def test_delete_declined_keeps_column(self, app, screen, board_service):
        run_action(app, screen, "_handle_delete_confirm", False)

        assert board_service.get_column("todo") is not None
        app.notify.assert_not_called()

    def test_delete_column_asks_for_confirmation(self, app, screen):
        app.push_screen = MagicMock()

        run_action(app, screen, "action_delete_column")

        modal = app.push_screen.call_args[0][0]
        assert modal.message == "Delete 'TODO'?"
        assert modal.detail == "Its 2 cases will be deleted too."


class TestCaseActions:
    """Tests for case creation and the drag gesture."""

    def test_new_case_goes_to_first_column(self, app, screen, board_service):
        screen.current_column = board_service.get_column("done")

        run_action(app, screen, "action_new_case")

        first = board_service.get_column("todo")
        assert titles(first) == ["New Case", "Case 1", "Case 2"]
        screen.refresh_board.assert_called_once_with(focus_case_id=first.cases[0].id)
        app.notify.assert_called_once_with("New Case created in TODO", timeout=2)

    def test_new_case_without_columns_warns(self, app, screen, board_service):
        board_service.board.columns.clear()

        run_action(app, screen, "action_new_case")

        app.notify.assert_called_once_with("Add a column first", severity="warning", timeout=2)

    def test_grab_picks_up_when_not_holding(self, app, screen):
        run_action(app, screen, "action_grab")

        screen.pick_up_current_case.assert_called_once_with()
        screen.drop_held_case.assert_not_called()

    def test_grab_drops_held_case(self, app, screen, board_service):
        screen.is_holding = True
        screen.drop_held_case.return_value = DragOutcome(
            draggable_id="1",
            source=DraggableLocation(droppable_id="todo", index=0),
            destination=DraggableLocation(droppable_id="done", index=0),
        )

        run_action(app, screen, "action_grab")

        assert titles(board_service.get_column("done")) == ["Case 1", "Case 4"]
        screen.refresh_board.assert_called_once_with(focus_case_id="1")
        app.notify.assert_called_once_with("Moved to DONE", timeout=2)

    def test_escape_cancels_drag_without_moving(self, app, screen, board_service):
        screen.cancel_drag.return_value = DragOutcome(
            draggable_id="1",
            source=DraggableLocation(droppable_id="todo", index=0),
        )
        before = board_service.snapshot()

        run_action(app, screen, "action_escape")

        assert board_service.board == before
        app.notify.assert_not_called()

    def test_escape_cancels_rename_first(self, app, screen, board_service):
        board_service.begin_rename("todo")

        run_action(app, screen, "action_escape")

        assert board_service.board.editing_column_id is None
        screen.cancel_drag.assert_not_called()


class TestHeldCaseBlocksEdits:
    """Board edits wait until the held case is dropped or put back."""

    @pytest.mark.parametrize(
        "action",
        ["action_add_column", "action_new_case", "action_rename_column", "action_delete_column"],
    )
    def test_edit_refused_while_holding(self, app, screen, board_service, action):
        screen.is_holding = True
        app.push_screen = MagicMock()
        before = board_service.board.model_dump_json()

        run_action(app, screen, action)

        assert board_service.board.model_dump_json() == before
        app.push_screen.assert_not_called()
        screen.refresh_board.assert_not_called()
        app.notify.assert_called_once_with(
            "Drop or cancel the held case first", severity="warning", timeout=2
        )
