"""Totals panel: place-value breakdown, working marker or done."""

from rich.text import Text
from textual.reactive import reactive
from textual.widgets import Static

from ..chain import DONE, WORKING
from ..theme import PALETTE


class TotalsPanel(Static):
    """Bordered box showing the current status string."""

    DEFAULT_CSS = f"""
    TotalsPanel {{
        width: 60;
        height: 5;
        border: round {PALETTE.border};
        padding: 1 2;
    }}
    """

    status: reactive[str] = reactive("")

    def __init__(self, status: str = "", **kwargs) -> None:
        super().__init__(**kwargs)
        self.border_title = "totals"
        self.status = status

    def render(self) -> Text:
        if self.status == WORKING:
            return Text(self.status, style=f"italic {PALETTE.amber}")
        if self.status == DONE:
            return Text(self.status, style=f"bold {PALETTE.green}")
        return Text(self.status, style=PALETTE.text_primary)
