"""Odometer TUI theme: canonical color system.

All hex values live here. Widgets never hardcode colors.
"""

from dataclasses import dataclass
from typing import Dict

from rich.console import Console

from .runner import RunState


# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Palette:
    """Full surface / text / functional color palette."""

    # Surfaces
    bg: str = "#0d1117"
    surface: str = "#121218"
    drum: str = "#f2f2f2"
    border: str = "#30363d"
    border_subtle: str = "#1a1a28"

    # Text hierarchy
    text_bright: str = "#e8e8f0"
    text_primary: str = "#c9d1d9"
    text_dim: str = "#6e7681"
    text_muted: str = "#363648"
    digit: str = "#121218"

    # Functional
    cyan: str = "#00d4e5"
    green: str = "#34d399"
    amber: str = "#e5c747"
    red: str = "#e55a6e"


PALETTE = Palette()

console = Console()


# ---------------------------------------------------------------------------
# Run state identities
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RunTheme:
    """Visual identity for a run state in the status bar."""

    accent: str
    label: str


RUN_THEMES: Dict[RunState, RunTheme] = {
    RunState.IDLE: RunTheme(accent=PALETTE.text_dim, label="idle"),
    RunState.RUNNING_UP: RunTheme(accent=PALETTE.green, label="running up"),
    RunState.RUNNING_DOWN: RunTheme(accent=PALETTE.amber, label="running down"),
    RunState.DONE: RunTheme(accent=PALETTE.cyan, label="done"),
}


def get_run_theme(state: RunState) -> RunTheme:
    """Look up the status bar identity for a run state."""
    return RUN_THEMES[state]
