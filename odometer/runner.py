"""Run controller: drives the chain to all nines or all zeros.

A run steps the least-significant column one tick at a time while a
cursor walks the columns from the most significant down. The cursor only
decides when the run is finished; it is never the column being stepped.

Runs are scheduled on an interval timer (Textual's ``set_interval`` in
the app). Each timer frame performs as many single steps as fit in the
frame at the configured step interval, then hands control back so the
screen can repaint.
"""

import logging
from enum import Enum, auto
from typing import Callable, Optional, Protocol

from .chain import COLUMNS, DONE, BASE, DigitChain

_log = logging.getLogger(__name__)

# Microseconds per single step
RUN_UP_INTERVAL_US = 750
RUN_DOWN_INTERVAL_US = 500
DEFAULT_FRAME_RATE = 60


class RunState(Enum):
    IDLE = auto()
    RUNNING_UP = auto()
    RUNNING_DOWN = auto()
    DONE = auto()


class Timer(Protocol):
    def stop(self) -> None: ...


Schedule = Callable[[float, Callable[[], None]], Timer]


def steps_per_frame(step_interval_us: int, frame_rate: int) -> int:
    """Number of single steps that fit into one repaint frame."""
    if step_interval_us <= 0:
        raise ValueError(f"step interval must be positive, got {step_interval_us}")
    if frame_rate <= 0:
        raise ValueError(f"frame rate must be positive, got {frame_rate}")
    frame_us = 1_000_000 / frame_rate
    return max(1, round(frame_us / step_interval_us))


class RunController:
    """Animated run-up / run-down over a :class:`DigitChain`.

    Args:
        chain: The chain to drive.
        schedule: ``schedule(interval, callback)`` returning a timer with
            ``stop()``. Without one, only :meth:`run_to_completion` and
            manual :meth:`advance` calls move the run forward.
        up_interval_us: Pause per step during a run-up.
        down_interval_us: Pause per step during a run-down.
        frame_rate: Repaints per second while running.
        on_frame: Called after every frame with the chain's status marker.
        on_finish: Called with ``"Done!"`` once the terminal value is reached.
    """

    def __init__(
        self,
        chain: DigitChain,
        schedule: Optional[Schedule] = None,
        up_interval_us: int = RUN_UP_INTERVAL_US,
        down_interval_us: int = RUN_DOWN_INTERVAL_US,
        frame_rate: int = DEFAULT_FRAME_RATE,
        on_frame: Optional[Callable[[str], None]] = None,
        on_finish: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._chain = chain
        self.schedule = schedule
        self._frame_interval = 1 / frame_rate
        self._up_steps = steps_per_frame(up_interval_us, frame_rate)
        self._down_steps = steps_per_frame(down_interval_us, frame_rate)
        self._on_frame = on_frame
        self._on_finish = on_finish
        self._state = RunState.IDLE
        self._cursor = COLUMNS - 1
        self._timer: Optional[Timer] = None
        self._status = ""
        self.ticks = 0

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state in (RunState.RUNNING_UP, RunState.RUNNING_DOWN)

    @property
    def target_digit(self) -> int:
        return BASE - 1 if self._state == RunState.RUNNING_UP else 0

    @property
    def frame_interval(self) -> float:
        return self._frame_interval

    @property
    def frame_steps(self) -> int:
        if self._state == RunState.RUNNING_DOWN:
            return self._down_steps
        return self._up_steps

    # -- Triggers ----------------------------------------------------------

    def start_up(self) -> bool:
        """Begin a run-up. Ignored (returns False) while a run is active."""
        return self._start(RunState.RUNNING_UP)

    def start_down(self) -> bool:
        """Begin a run-down. Ignored (returns False) while a run is active."""
        return self._start(RunState.RUNNING_DOWN)

    def _start(self, state: RunState) -> bool:
        if self.running:
            _log.debug("run already in progress, ignoring %s", state.name)
            return False
        self._state = state
        self._cursor = COLUMNS - 1
        self.ticks = 0
        _log.info("starting %s from %06d", state.name.lower(), self._chain.value)
        if self.schedule is not None:
            self._timer = self.schedule(self._frame_interval, self.advance)
        return True

    def cancel(self) -> bool:
        """Stop an active run and return to idle without reporting done."""
        if not self.running:
            return False
        self._stop_timer()
        _log.info("cancelled %s after %d ticks", self._state.name.lower(), self.ticks)
        self._state = RunState.IDLE
        return True

    # -- Stepping ----------------------------------------------------------

    def step(self) -> bool:
        """Perform one single-column tick. Returns False once the run is over."""
        if not self.running:
            return False

        target = self.target_digit
        while self._cursor >= 0 and self._chain[self._cursor] == target:
            self._cursor -= 1
        if self._cursor < 0 and not self._chain.is_terminal(target):
            # a column was changed behind the cursor; walk again from the top
            self._cursor = COLUMNS - 1
            while self._chain[self._cursor] == target:
                self._cursor -= 1
        if self._cursor < 0:
            self._finish()
            return False

        if self._state == RunState.RUNNING_UP:
            self._status = self._chain.increment(0)
        else:
            self._status = self._chain.decrement(0)
        self.ticks += 1
        return True

    def advance(self) -> None:
        """Run one frame worth of steps, then report to the display."""
        if not self.running:
            self._stop_timer()
            return
        for _ in range(self.frame_steps):
            if not self.step():
                return
        if self._on_frame is not None:
            self._on_frame(self._status)

    def run_to_completion(self) -> int:
        """Drive the active run synchronously. Returns the tick count."""
        while self.step():
            pass
        return self.ticks

    def _finish(self) -> None:
        self._stop_timer()
        self._state = RunState.DONE
        _log.info("run finished after %d ticks at %06d", self.ticks, self._chain.value)
        if self._on_finish is not None:
            self._on_finish(DONE)

    def _stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None
