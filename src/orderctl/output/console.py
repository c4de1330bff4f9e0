"""Rich Console factory and theme for orderctl output.

Consoles render to a StringIO buffer, preserving the
``format_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ORDER_THEME = Theme(
    {
        "order.ok": "bold green",
        "order.error": "bold red",
        "order.warning": "bold yellow",
        "order.op": "bold cyan",
        "order.key": "dim",
        "order.id": "bold blue",
        "order.money": "bold magenta",
        "order.status": "yellow",
        "order.kind.physical": "green",
        "order.kind.digital": "blue",
    }
)

_KIND_STYLES: dict[str, str] = {
    "physical": "order.kind.physical",
    "digital": "order.kind.digital",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps table layout stable in tests).
    """
    return Console(
        file=StringIO(),
        theme=ORDER_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Return the Rich style name for a product kind."""
    return _KIND_STYLES.get(kind, "")
