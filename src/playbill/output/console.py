"""Rich Console factory and theme for playbill output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract. In non-TTY environments (tests, pipes) Rich
disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PLAYBILL_THEME = Theme(
    {
        "bill.ok": "bold green",
        "bill.error": "bold red",
        "bill.op": "bold cyan",
        "bill.key": "dim",
        "bill.play": "bold",
        "bill.amount": "green",
        "bill.credits": "magenta",
        "bill.type.tragedy": "red",
        "bill.type.comedy": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=PLAYBILL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_type(play_type: str) -> str:
    """Return the Rich style name for a play type, or "" if unstyled."""
    if play_type in ("tragedy", "comedy"):
        return f"bill.type.{play_type}"
    return ""
