"""Rich Console factory and theme for slugline output.

Consoles render into a StringIO buffer so formatters can keep returning
plain strings.  In non-TTY environments (tests, pipes) Rich drops color.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SLUG_THEME = Theme(
    {
        "slug.ok": "bold green",
        "slug.error": "bold red",
        "slug.warning": "bold yellow",
        "slug.op": "bold cyan",
        "slug.key": "dim",
        "slug.value": "bold blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=SLUG_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
