"""Tests for odometer.ui.card."""

from io import StringIO

from rich.console import Console

from odometer.chain import DONE, DigitChain
from odometer.state import OdometerState
from odometer.ui.card import animate_run, print_card, render_card, render_digits


def _capture_console() -> Console:
    return Console(file=StringIO(), width=60, force_terminal=True)


def test_renders_breakdown():
    con = _capture_console()
    print_card(DigitChain.from_value(123456), console=con)
    output = con.file.getvalue()
    assert "100000 + 20000 + 3000 + 400 + 50 + 6" in output
    assert "odometer" in output


def test_renders_borders():
    card = render_card(DigitChain())
    plain = card.plain
    assert "╭" in plain
    assert "╰" in plain
    lines = plain.split("\n")
    assert len({len(line) for line in lines}) == 1


def test_digits_most_significant_first():
    plain = render_digits(DigitChain.from_value(120034)).plain
    assert plain.split() == ["1", "2", "0", "0", "3", "4"]


def test_explicit_status_replaces_breakdown():
    plain = render_card(DigitChain(), DONE).plain
    assert DONE in plain
    assert "0 + 0" not in plain


def test_animate_run_finishes():
    con = _capture_console()
    state = OdometerState(start_value=999990)
    state.on_run_up()
    assert animate_run(state, console=con) == 9
    assert state.status == DONE
    assert state.value == 999999
