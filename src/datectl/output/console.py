"""Rich Console factory and theme for datectl output.

Consoles render into a StringIO buffer so ``format_result()`` can return
a string. In non-TTY environments (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DATECTL_THEME = Theme(
    {
        "dt.ok": "bold green",
        "dt.error": "bold red",
        "dt.warning": "bold yellow",
        "dt.op": "bold cyan",
        "dt.key": "dim",
        "dt.date": "bold blue",
        "dt.value": "bold",
        "dt.true": "green",
        "dt.false": "red",
    }
)

# Payload keys whose values are ISO dates.
DATE_KEYS = frozenset({"date", "date1", "date2", "start", "end", "result", "today", "birth_date"})


def create_console(*, no_color: bool = False, width: int = 120) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=DATECTL_THEME,
        no_color=no_color,
        highlight=False,
        width=width,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a console made by :func:`create_console`."""
    if not isinstance(console.file, StringIO):
        msg = "console does not render to a StringIO buffer"
        raise TypeError(msg)
    return console.file.getvalue()


def style_for_field(key: str, value: object) -> str:
    """Theme style for one payload field: dates, booleans, then plain values."""
    if key in DATE_KEYS:
        return "dt.date"
    if value is True:
        return "dt.true"
    if value is False:
        return "dt.false"
    return "dt.value"
