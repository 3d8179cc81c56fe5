"""Command-line rendering of the odometer card."""

from .card import animate_run, print_card, render_card, render_digits

__all__ = [
    "animate_run",
    "print_card",
    "render_card",
    "render_digits",
]
