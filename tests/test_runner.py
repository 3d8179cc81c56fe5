"""Tests for the run controller."""

import pytest

from odometer.chain import DONE, MAX_VALUE, WORKING, DigitChain
from odometer.runner import RunController, RunState, steps_per_frame


class FakeTimer:
    def __init__(self, interval, callback):
        self.interval = interval
        self.callback = callback
        self.stopped = False

    def stop(self):
        self.stopped = True


class FakeScheduler:
    """Collects scheduled callbacks so tests can fire frames by hand."""

    def __init__(self):
        self.timers = []

    def __call__(self, interval, callback):
        timer = FakeTimer(interval, callback)
        self.timers.append(timer)
        return timer

    def fire(self, times=1):
        timer = self.timers[-1]
        for _ in range(times):
            if timer.stopped:
                return
            timer.callback()


def test_full_run_up_from_zero():
    chain = DigitChain()
    finished = []
    runner = RunController(chain, on_finish=finished.append)

    assert runner.start_up()
    assert runner.state == RunState.RUNNING_UP
    ticks = runner.run_to_completion()

    assert ticks == MAX_VALUE
    assert chain.digits == (9, 9, 9, 9, 9, 9)
    assert runner.state == RunState.DONE
    assert finished == [DONE]


def test_full_run_down_from_max():
    chain = DigitChain.from_value(MAX_VALUE)
    runner = RunController(chain)

    runner.start_down()
    assert runner.run_to_completion() == MAX_VALUE
    assert chain.value == 0
    assert runner.state == RunState.DONE


def test_run_up_from_partial_value():
    chain = DigitChain.from_value(999990)
    runner = RunController(chain)
    runner.start_up()
    assert runner.run_to_completion() == 9
    assert chain.value == MAX_VALUE


def test_run_at_terminal_value_finishes_without_ticks():
    chain = DigitChain()
    finished = []
    runner = RunController(chain, on_finish=finished.append)
    runner.start_down()
    assert runner.run_to_completion() == 0
    assert finished == [DONE]


def test_only_least_significant_column_is_stepped():
    chain = DigitChain.from_value(899999)
    runner = RunController(chain)
    runner.start_up()
    runner.step()
    # one tick on the units column carries all the way up
    assert chain.value == 900000
    assert runner.ticks == 1


def test_trigger_ignored_while_running():
    runner = RunController(DigitChain())
    assert runner.start_up()
    assert not runner.start_down()
    assert not runner.start_up()
    assert runner.state == RunState.RUNNING_UP


def test_can_start_again_after_done():
    chain = DigitChain.from_value(999998)
    runner = RunController(chain)
    runner.start_up()
    runner.run_to_completion()
    assert runner.state == RunState.DONE

    assert runner.start_down()
    assert runner.state == RunState.RUNNING_DOWN


def test_cancel_returns_to_idle_without_done():
    chain = DigitChain()
    finished = []
    runner = RunController(chain, on_finish=finished.append)
    runner.start_up()
    for _ in range(50):
        runner.step()

    assert runner.cancel()
    assert runner.state == RunState.IDLE
    assert not runner.step()
    assert chain.value == 50
    assert finished == []


def test_cancel_when_idle_is_noop():
    assert not RunController(DigitChain()).cancel()


class TestScheduledRun:
    def test_schedules_at_frame_rate(self):
        scheduler = FakeScheduler()
        runner = RunController(DigitChain(), schedule=scheduler, frame_rate=50)
        runner.start_up()
        assert len(scheduler.timers) == 1
        assert scheduler.timers[0].interval == pytest.approx(0.02)

    def test_frame_performs_batched_steps(self):
        scheduler = FakeScheduler()
        frames = []
        chain = DigitChain()
        runner = RunController(
            chain, schedule=scheduler, up_interval_us=1000, frame_rate=100,
            on_frame=frames.append,
        )
        runner.start_up()
        scheduler.fire()
        assert chain.value == 10
        assert frames == [WORKING]

    def test_timer_stopped_on_finish(self):
        scheduler = FakeScheduler()
        finished = []
        chain = DigitChain.from_value(999995)
        runner = RunController(chain, schedule=scheduler, on_finish=finished.append)
        runner.start_up()
        scheduler.fire(3)
        assert scheduler.timers[0].stopped
        assert finished == [DONE]
        assert chain.value == MAX_VALUE

    def test_timer_stopped_on_cancel(self):
        scheduler = FakeScheduler()
        runner = RunController(DigitChain(), schedule=scheduler)
        runner.start_down()
        scheduler.fire()
        runner.cancel()
        assert scheduler.timers[0].stopped

    def test_run_down_uses_down_interval(self):
        scheduler = FakeScheduler()
        chain = DigitChain.from_value(MAX_VALUE)
        runner = RunController(
            chain, schedule=scheduler, up_interval_us=1000, down_interval_us=500,
            frame_rate=100,
        )
        runner.start_down()
        scheduler.fire()
        assert chain.value == MAX_VALUE - 20


class TestStepsPerFrame:
    def test_default_pacing(self):
        assert steps_per_frame(750, 60) == 22
        assert steps_per_frame(500, 60) == 33

    def test_at_least_one_step(self):
        assert steps_per_frame(1_000_000, 60) == 1

    def test_rejects_non_positive(self):
        with pytest.raises(ValueError):
            steps_per_frame(0, 60)
        with pytest.raises(ValueError):
            steps_per_frame(750, 0)


def test_column_changed_behind_cursor_is_rechecked():
    chain = DigitChain.from_value(900000)
    finished = []
    runner = RunController(chain, on_finish=finished.append)
    runner.start_up()
    runner.step()
    assert chain.value == 900001

    # the top column already read 9 and was passed; knock it back down
    chain.decrement(5)
    assert chain.value == 800001

    ticks = runner.run_to_completion()
    assert chain.value == MAX_VALUE
    assert runner.state == RunState.DONE
    assert finished == [DONE]
    assert ticks == 1 + (MAX_VALUE - 800001)


def test_run_down_rechecks_raised_column():
    chain = DigitChain.from_value(5)
    runner = RunController(chain)
    runner.start_down()
    runner.step()
    chain.increment(3)

    runner.run_to_completion()
    assert chain.value == 0
    assert runner.state == RunState.DONE
