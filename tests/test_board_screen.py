"""Tests for the board screen's keyboard drag gesture, driven through Textual's pilot."""

import pytest
from conftest import titles

from caseboard.app import CaseboardApp
from caseboard.config import Settings
from caseboard.ui.widgets import DropSlot


@pytest.fixture
def app() -> CaseboardApp:
    """App over the seed board, cursor starting on Case 1 in TODO."""
    return CaseboardApp(Settings(id_strategy="sequential"))


async def press(pilot, *keys: str) -> None:
    """Press keys and let the board redraw."""
    await pilot.press(*keys)
    await pilot.pause()


class TestSameColumnDrop:
    """Reordering within the source column."""

    @pytest.mark.asyncio
    async def test_drop_at_last_index(self, app: CaseboardApp):
        async with app.run_test() as pilot:
            await press(pilot, "space", "j", "j")

            # The source column has no append slot: the cursor stops on the last card
            assert app.screen.current_case_index == 1
            assert not app.screen.query(DropSlot)

            await press(pilot, "space")

            assert titles(app.board_service.get_column("todo")) == ["Case 2", "Case 1"]
            assert not app.screen.is_holding


class TestCrossColumnDrop:
    """Moving into another column."""

    @pytest.mark.asyncio
    async def test_drop_into_append_slot(self, app: CaseboardApp):
        async with app.run_test() as pilot:
            await press(pilot, "space", "l", "l", "j", "j")

            # DONE holds one case, so index 1 is the slot past its end
            assert app.screen.current_case_index == 1
            assert len(app.screen.query(DropSlot)) == 1

            await press(pilot, "space")

            assert titles(app.board_service.get_column("done")) == ["Case 4", "Case 1"]
            assert titles(app.board_service.get_column("todo")) == ["Case 2"]

    @pytest.mark.asyncio
    async def test_drop_above_first_card(self, app: CaseboardApp):
        async with app.run_test() as pilot:
            await press(pilot, "space", "l", "l", "space")

            assert titles(app.board_service.get_column("done")) == ["Case 1", "Case 4"]

    @pytest.mark.asyncio
    async def test_new_case_while_holding_moves_held_case(self, app: CaseboardApp):
        async with app.run_test() as pilot:
            await press(pilot, "space", "n", "l", "l", "l", "space")

            assert titles(app.board_service.get_column("archived")) == ["Case 1"]
            assert titles(app.board_service.get_column("todo")) == ["Case 2"]


class TestAbortDrag:
    """Escape puts the held case back."""

    @pytest.mark.asyncio
    async def test_escape_leaves_board_unchanged(self, app: CaseboardApp):
        async with app.run_test() as pilot:
            before = app.board_service.board.model_dump_json()

            await press(pilot, "space", "l", "j", "escape")

            assert app.board_service.board.model_dump_json() == before
            assert not app.screen.is_holding
            assert not app.screen.query(DropSlot)
