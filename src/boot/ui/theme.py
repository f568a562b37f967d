"""Terminal theme for create-boot."""

from rich.console import Console
from rich.style import Style
from rich.theme import Theme


class Symbols:
    """Terminal symbols for status display."""
    SUCCESS = "✓"
    CANCEL = "✖"


THEME = Theme({
    "prompt": Style(bold=True),
    "success": Style(color="green"),
    "error": Style(color="red", bold=True),
    "command": Style(color="cyan"),
    "text.dim": Style(dim=True),
})


def make_console(**kwargs) -> Console:
    return Console(theme=THEME, **kwargs)
