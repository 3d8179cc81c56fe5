"""Bottom status line -- dock bottom, height 1.

Left:  run state . key hints
Right: aggregate value, zero padded
"""

from rich.text import Text
from textual.widgets import Static

from ..chain import COLUMNS
from ..runner import RunState
from ..theme import PALETTE, get_run_theme

KEY_HINTS = "u run up . d run down . esc cancel . r reset . q quit"


class StatusBar(Static):
    """Single-line status bar docked to the bottom of the screen."""

    DEFAULT_CSS = f"""
    StatusBar {{
        height: 1;
        dock: bottom;
        width: 100%;
        background: {PALETTE.surface};
        padding: 0 2;
    }}
    """

    def __init__(
        self,
        value: int = 0,
        run_state: RunState = RunState.IDLE,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._value = value
        self._run_state = run_state

    def render(self) -> Text:
        theme = get_run_theme(self._run_state)

        t = Text()
        t.append(" \u25cf", style=theme.accent)
        t.append(f" {theme.label}", style=f"dim {PALETTE.text_dim}")
        t.append(f" . {KEY_HINTS}", style=f"dim {PALETTE.text_muted}")

        right = Text(f"{self._value:0{COLUMNS}d}", style=f"bold {PALETTE.text_bright}")

        # Pad between left and right
        width = self.size.width if self.size.width > 0 else 80
        available = width - len(t.plain) - len(right.plain) - 2
        t.append(" " * max(available, 2))
        t.append_text(right)

        return t

    def update_value(self, value: int) -> None:
        self._value = value
        self.refresh()

    def set_run_state(self, state: RunState) -> None:
        self._run_state = state
        self.refresh()
