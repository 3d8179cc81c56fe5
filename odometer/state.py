"""Reactive state for the Odometer TUI.

Owns the digit chain, the run controller and the totals status string.
State mutations post Textual Messages so widgets can watch for changes.
"""

import logging
from typing import Callable, Optional, Tuple, TYPE_CHECKING

from textual.message import Message

from .chain import DigitChain, format_breakdown
from .runner import (
    DEFAULT_FRAME_RATE,
    RUN_DOWN_INTERVAL_US,
    RUN_UP_INTERVAL_US,
    RunController,
    RunState,
)

if TYPE_CHECKING:
    from textual.app import App

_log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Textual messages (events posted to the app message bus)
# ---------------------------------------------------------------------------

class DigitsChanged(Message):
    """One or more digit columns changed."""

    def __init__(self, digits: Tuple[int, ...]) -> None:
        super().__init__()
        self.digits = digits


class StatusChanged(Message):
    """The totals text changed (breakdown, working marker or done)."""

    def __init__(self, status: str) -> None:
        super().__init__()
        self.status = status


class RunStateChanged(Message):
    """A run started, finished or was cancelled."""

    def __init__(self, state: RunState) -> None:
        super().__init__()
        self.state = state


# ---------------------------------------------------------------------------
# Application state
# ---------------------------------------------------------------------------

class OdometerState:
    """The odometer model and its control interface.

    Call the ``on_*`` triggers (not chain methods directly) so that
    Textual messages are posted to the app's message bus.
    """

    def __init__(
        self,
        start_value: int = 0,
        up_interval_us: int = RUN_UP_INTERVAL_US,
        down_interval_us: int = RUN_DOWN_INTERVAL_US,
        frame_rate: int = DEFAULT_FRAME_RATE,
    ) -> None:
        self.chain = DigitChain.from_value(start_value)
        self.status: str = format_breakdown(self.chain)
        self.runner = RunController(
            self.chain,
            up_interval_us=up_interval_us,
            down_interval_us=down_interval_us,
            frame_rate=frame_rate,
            on_frame=self._on_run_frame,
            on_finish=self._on_run_finish,
        )
        self._app: Optional["App"] = None

    def bind(self, app: "App") -> None:
        """Bind to a Textual App so mutations post messages and runs use its timers."""
        self._app = app
        self.runner.schedule = app.set_interval

    def _post(self, msg: Message) -> None:
        if self._app is not None:
            self._app.post_message(msg)

    def _set_status(self, status: str) -> None:
        self.status = status
        self._post(StatusChanged(status))

    def _publish_digits(self) -> None:
        self._post(DigitsChanged(self.chain.digits))

    # -- Column triggers ---------------------------------------------------

    def on_column_increment(self, index: int) -> None:
        self._set_status(self.chain.increment(index))
        self._publish_digits()
        self.refresh_breakdown()

    def on_column_decrement(self, index: int) -> None:
        self._set_status(self.chain.decrement(index))
        self._publish_digits()
        self.refresh_breakdown()

    def refresh_breakdown(self) -> None:
        self._set_status(format_breakdown(self.chain))

    # -- Run triggers ------------------------------------------------------

    def on_run_up(self) -> bool:
        return self._start_run(self.runner.start_up)

    def on_run_down(self) -> bool:
        return self._start_run(self.runner.start_down)

    def _start_run(self, start: Callable[[], bool]) -> bool:
        if not start():
            return False
        self._post(RunStateChanged(self.runner.state))
        return True

    def cancel_run(self) -> bool:
        if not self.runner.cancel():
            return False
        self._post(RunStateChanged(self.runner.state))
        self.refresh_breakdown()
        return True

    def reset(self) -> bool:
        """Zero every column. Not available while a run is active."""
        if self.running:
            return False
        self.chain.clear()
        _log.debug("odometer reset")
        self._publish_digits()
        self.refresh_breakdown()
        return True

    def _on_run_frame(self, status: str) -> None:
        self._publish_digits()
        self._set_status(status)

    def _on_run_finish(self, status: str) -> None:
        self._publish_digits()
        self._set_status(status)
        self._post(RunStateChanged(self.runner.state))

    # -- Queries -----------------------------------------------------------

    @property
    def running(self) -> bool:
        return self.runner.running

    @property
    def run_state(self) -> RunState:
        return self.runner.state

    @property
    def value(self) -> int:
        return self.chain.value
