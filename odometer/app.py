"""Textual App for the odometer.

Builds the OdometerState from config and forwards its messages to the
active MainScreen.
"""

import logging
from typing import Optional

from textual.app import App
from textual.binding import Binding

from .config import ConfigManager
from .state import DigitsChanged, OdometerState, RunStateChanged, StatusChanged

_log = logging.getLogger(__name__)


class OdometerTUI(App):
    """The fullscreen Textual TUI for the odometer."""

    TITLE = "Odometer"

    BINDINGS = [
        Binding("ctrl+c", "exit_app", "Exit", show=False, priority=True),
    ]

    def __init__(
        self,
        config: Optional[ConfigManager] = None,
        start_value: Optional[int] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.config = config or ConfigManager()
        run_config = self.config.get_run_config()
        if start_value is None:
            start_value = self.config.get_start_value()
        self.state = OdometerState(start_value=start_value, **run_config)
        _log.debug("odometer starting at %06d with %s", start_value, run_config)

    def on_mount(self) -> None:
        self.state.bind(self)

        from .screens.main import MainScreen
        self.push_screen(MainScreen())

    def action_exit_app(self) -> None:
        self.state.cancel_run()
        self.exit()

    # ------------------------------------------------------------------
    # State messages
    # ------------------------------------------------------------------

    def on_digits_changed(self, message: DigitsChanged) -> None:
        screen = self.screen
        if hasattr(screen, "show_digits"):
            screen.show_digits(message.digits)

    def on_status_changed(self, message: StatusChanged) -> None:
        screen = self.screen
        if hasattr(screen, "show_status"):
            screen.show_status(message.status)

    def on_run_state_changed(self, message: RunStateChanged) -> None:
        screen = self.screen
        if hasattr(screen, "show_run_state"):
            screen.show_run_state(message.state)
