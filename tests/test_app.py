"""Tests for the Textual odometer app, driven through the pilot."""

import asyncio

from textual.widgets import Button

from odometer.app import OdometerTUI
from odometer.chain import DONE, WORKING
from odometer.config import ConfigManager
from odometer.runner import RunState
from odometer.widgets import DigitDrum, StatusBar, TotalsPanel


def _app(tmp_path, start_value=0):
    config = ConfigManager(str(tmp_path / "config.yaml"))
    return OdometerTUI(config=config, start_value=start_value)


def test_column_buttons_step_and_cascade(tmp_path):
    async def scenario():
        app = _app(tmp_path, start_value=9)
        async with app.run_test(size=(100, 32)) as pilot:
            await pilot.pause()
            await pilot.click("#up-0")
            await pilot.pause()

            assert app.state.value == 10
            assert app.screen.query_one("#digit-1", DigitDrum).value == 1
            assert app.screen.query_one("#digit-0", DigitDrum).value == 0
            assert app.screen.query_one(TotalsPanel).status == "0 + 0 + 0 + 0 + 10 + 0"

            await pilot.click("#down-1")
            await pilot.pause()
            assert app.state.value == 0

    asyncio.run(scenario())


def test_run_up_reaches_done(tmp_path):
    async def scenario():
        app = _app(tmp_path, start_value=999990)
        async with app.run_test(size=(100, 32)) as pilot:
            await pilot.pause()
            await pilot.press("u")
            await pilot.pause(0.3)

            assert app.state.value == 999999
            assert app.state.run_state == RunState.DONE
            assert app.screen.query_one(TotalsPanel).status == DONE
            assert not app.screen.query_one("#run_up", Button).disabled

    asyncio.run(scenario())


def test_run_disables_triggers_and_cancels(tmp_path):
    async def scenario():
        app = _app(tmp_path)
        async with app.run_test(size=(100, 32)) as pilot:
            await pilot.pause()
            await pilot.press("u")
            await pilot.pause(0.1)

            assert app.state.running
            assert app.screen.query_one("#run_down", Button).disabled
            assert app.screen.query_one(TotalsPanel).status == WORKING
            assert not app.state.on_run_down()

            await pilot.press("escape")
            await pilot.pause()

            assert app.state.run_state == RunState.IDLE
            assert not app.screen.query_one("#run_up", Button).disabled
            assert app.screen.query_one(TotalsPanel).status != WORKING

    asyncio.run(scenario())


def test_reset_key(tmp_path):
    async def scenario():
        app = _app(tmp_path, start_value=4321)
        async with app.run_test(size=(100, 32)) as pilot:
            await pilot.pause()
            await pilot.press("r")
            await pilot.pause()

            assert app.state.value == 0
            assert app.screen.query_one(StatusBar)._value == 0

    asyncio.run(scenario())
