"""Main odometer screen.

Composes OdometerRow + run buttons + TotalsPanel + StatusBar.
Button presses and key bindings are routed to the control interface on
``app.state``; state changes come back through the app's message bus.
"""

from textual.app import ComposeResult
from textual.containers import Center, Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button

from ..runner import RunState
from ..widgets.odometer import OdometerRow, parse_column_button
from ..widgets.status_bar import StatusBar
from ..widgets.totals import TotalsPanel


class MainScreen(Screen):
    """Six columns, run controls and the totals breakdown."""

    BINDINGS = [
        ("u", "run_up", "Run Up"),
        ("d", "run_down", "Run Down"),
        ("escape", "cancel_run", "Cancel"),
        ("r", "reset", "Reset"),
        ("q", "quit_app", "Quit"),
    ]

    DEFAULT_CSS = """
    MainScreen {
        align: center top;
        padding: 1 2;
    }
    #run_buttons {
        width: auto;
        height: auto;
        margin: 1 0;
    }
    #run_buttons Button {
        margin: 0 1;
    }
    """

    def compose(self) -> ComposeResult:
        state = self.app.state
        with Vertical():
            with Center():
                yield OdometerRow(state.chain.digits)
            with Center():
                with Horizontal(id="run_buttons"):
                    yield Button("Run Up", id="run_up", variant="success")
                    yield Button("Run Down", id="run_down", variant="warning")
            with Center():
                yield TotalsPanel(state.status)
        yield StatusBar(value=state.value, run_state=state.run_state)

    # ------------------------------------------------------------------
    # Input handling
    # ------------------------------------------------------------------

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "run_up":
            self.action_run_up()
            return
        if button_id == "run_down":
            self.action_run_down()
            return

        parsed = parse_column_button(button_id)
        if parsed is None:
            return
        direction, index = parsed
        if direction == "up":
            self.app.state.on_column_increment(index)
        else:
            self.app.state.on_column_decrement(index)

    def action_run_up(self) -> None:
        self.app.state.on_run_up()

    def action_run_down(self) -> None:
        self.app.state.on_run_down()

    def action_cancel_run(self) -> None:
        self.app.state.cancel_run()

    def action_reset(self) -> None:
        self.app.state.reset()

    def action_quit_app(self) -> None:
        self.app.state.cancel_run()
        self.app.exit()

    # ------------------------------------------------------------------
    # State display
    # ------------------------------------------------------------------

    def show_digits(self, digits: tuple[int, ...]) -> None:
        self.query_one(OdometerRow).set_digits(digits)
        value = int("".join(str(d) for d in reversed(digits)))
        self.query_one(StatusBar).update_value(value)

    def show_status(self, status: str) -> None:
        self.query_one(TotalsPanel).status = status

    def show_run_state(self, state: RunState) -> None:
        running = state in (RunState.RUNNING_UP, RunState.RUNNING_DOWN)
        for button_id in ("#run_up", "#run_down"):
            self.query_one(button_id, Button).disabled = running
        self.query_one(StatusBar).set_run_state(state)
