"""Odometer card for the command line.

Shows the six digits and the totals line in a bordered box, and can
animate a run in place with rich's Live display.
"""

import time
from typing import Optional

from rich.console import Console
from rich.live import Live
from rich.text import Text

from ..chain import DONE, WORKING, DigitChain, format_breakdown
from ..state import OdometerState
from ..theme import PALETTE

_TOP_LEFT = "\u256d"
_TOP_RIGHT = "\u256e"
_BOT_LEFT = "\u2570"
_BOT_RIGHT = "\u256f"
_VERT = "\u2502"
_HORIZ = "\u2500"


def render_digits(chain: DigitChain) -> Text:
    """Render the digit drums, most significant first."""
    t = Text()
    for d in reversed(chain.digits):
        t.append(f" {d} ", style=f"bold {PALETTE.digit} on {PALETTE.drum}")
        t.append(" ")
    return t


def _status_style(status: str) -> str:
    if status == WORKING:
        return f"italic {PALETTE.amber}"
    if status == DONE:
        return f"bold {PALETTE.green}"
    return PALETTE.text_primary


def render_card(chain: DigitChain, status: Optional[str] = None, width: int = 50) -> Text:
    """Build the bordered odometer card as one Text block."""
    status = format_breakdown(chain) if status is None else status
    inner = max(width - 4, len(status) + 2)
    border = f"dim {PALETTE.border}"

    t = Text()
    label = " odometer "
    fill = inner + 2 - len(label)
    left_fill = fill // 2
    t.append(_TOP_LEFT + _HORIZ * left_fill, style=border)
    t.append(label, style=f"dim {PALETTE.text_dim}")
    t.append(_HORIZ * (fill - left_fill) + _TOP_RIGHT + "\n", style=border)

    for line in (render_digits(chain), Text(status, style=_status_style(status))):
        t.append(f"{_VERT} ", style=border)
        t.append_text(line)
        t.append(" " * max(inner - len(line.plain), 0))
        t.append(f" {_VERT}\n", style=border)

    t.append(_BOT_LEFT + _HORIZ * (inner + 2) + _BOT_RIGHT, style=border)
    return t


def print_card(chain: DigitChain, status: Optional[str] = None, console: Optional[Console] = None) -> None:
    """Print the odometer card."""
    from ..theme import console as default_console

    con = console or default_console
    width = min(con.width or 50, 50)
    con.print(render_card(chain, status, width=width))


def animate_run(state: OdometerState, console: Optional[Console] = None) -> int:
    """Play the active run frame by frame. Returns the tick count.

    Ctrl+C cancels the run and leaves the chain where it stopped.
    """
    from ..theme import console as default_console

    con = console or default_console
    runner = state.runner
    width = min(con.width or 50, 50)

    with Live(console=con, refresh_per_second=runner_fps(runner.frame_interval)) as live:
        try:
            while runner.running:
                runner.advance()
                live.update(render_card(state.chain, state.status, width=width))
                time.sleep(runner.frame_interval)
        except KeyboardInterrupt:
            state.cancel_run()
        live.update(render_card(state.chain, state.status, width=width))
    return runner.ticks


def runner_fps(frame_interval: float) -> int:
    return max(1, round(1 / frame_interval))
