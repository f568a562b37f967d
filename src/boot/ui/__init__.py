"""create-boot terminal UI."""

from boot.ui.theme import THEME, Symbols, make_console
from boot.ui.report import next_steps, print_next_steps, print_templates

__all__ = [
    "THEME",
    "Symbols",
    "make_console",
    "next_steps",
    "print_next_steps",
    "print_templates",
]
