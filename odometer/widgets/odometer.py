"""Odometer digit columns.

Each column stacks a ``+`` button, the digit drum and a ``-`` button.
Button ids carry the column index (0 = least significant) so the screen
can route presses without holding per-column references.
"""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.reactive import reactive
from textual.widgets import Button, Static

from ..chain import COLUMNS
from ..theme import PALETTE

UP_PREFIX = "up-"
DOWN_PREFIX = "down-"


def parse_column_button(button_id: str | None) -> tuple[str, int] | None:
    """Split a column button id into ("up" | "down", index)."""
    if not button_id:
        return None
    for prefix in (UP_PREFIX, DOWN_PREFIX):
        if button_id.startswith(prefix):
            suffix = button_id[len(prefix):]
            if suffix.isdigit():
                return prefix[:-1], int(suffix)
    return None


class DigitDrum(Static):
    """Single digit display."""

    DEFAULT_CSS = f"""
    DigitDrum {{
        width: 100%;
        height: 3;
        content-align: center middle;
        background: {PALETTE.drum};
        border: tall {PALETTE.border};
    }}
    """

    value: reactive[int] = reactive(0)

    def __init__(self, value: int = 0, **kwargs) -> None:
        super().__init__(**kwargs)
        self.value = value

    def render(self) -> Text:
        return Text(str(self.value), style=f"bold {PALETTE.digit}")


class DigitColumn(Vertical):
    """One odometer column: up button, digit, down button."""

    DEFAULT_CSS = """
    DigitColumn {
        width: 9;
        height: auto;
        margin: 0 1 0 0;
    }
    DigitColumn Button {
        width: 100%;
        min-width: 5;
    }
    """

    def __init__(self, index: int, value: int = 0, **kwargs) -> None:
        super().__init__(**kwargs)
        self.column_index = index
        self._initial = value

    def compose(self) -> ComposeResult:
        yield Button("+", id=f"{UP_PREFIX}{self.column_index}")
        yield DigitDrum(self._initial, id=f"digit-{self.column_index}")
        yield Button("-", id=f"{DOWN_PREFIX}{self.column_index}")

    def set_value(self, value: int) -> None:
        self.query_one(DigitDrum).value = value


class OdometerRow(Horizontal):
    """Six digit columns, most significant on the left."""

    DEFAULT_CSS = """
    OdometerRow {
        width: auto;
        height: auto;
    }
    """

    def __init__(self, digits: tuple[int, ...] = (0,) * COLUMNS, **kwargs) -> None:
        super().__init__(**kwargs)
        self._digits = digits

    def compose(self) -> ComposeResult:
        for index in reversed(range(COLUMNS)):
            yield DigitColumn(index, self._digits[index])

    def set_digits(self, digits: tuple[int, ...]) -> None:
        """Update every column; ``digits`` is least significant first."""
        for column in self.query(DigitColumn):
            column.set_value(digits[column.column_index])
