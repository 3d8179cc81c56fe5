"""Odometer TUI widgets -- Textual components."""

from .status_bar import StatusBar
from .odometer import DigitColumn, DigitDrum, OdometerRow, parse_column_button
from .totals import TotalsPanel

__all__ = [
    "StatusBar",
    "DigitColumn",
    "DigitDrum",
    "OdometerRow",
    "TotalsPanel",
    "parse_column_button",
]
