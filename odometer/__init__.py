"""Odometer - mechanical odometer simulator for the terminal."""

__version__ = "0.1.0"

from .chain import DigitChain, format_breakdown
from .runner import RunController, RunState
from .state import OdometerState
from .config import ConfigManager

__all__ = [
    "DigitChain",
    "format_breakdown",
    "RunController",
    "RunState",
    "OdometerState",
    "ConfigManager",
]
