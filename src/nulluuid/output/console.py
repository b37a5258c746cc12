"""Off-screen Rich rendering for nulluuid results.

Formatters draw onto a throwaway Console and get plain text back, so the
CLI decides where the text goes. Color is only emitted when forced;
output piped to another program stays free of escape codes.
"""

from __future__ import annotations

from collections.abc import Callable
from io import StringIO

from rich.console import Console
from rich.theme import Theme

# Styles referenced by output.formatters.
NULLUUID_THEME = Theme(
    {
        "nu.ok": "bold green",
        "nu.error": "bold red",
        "nu.op": "bold cyan",
        "nu.key": "dim",
        "nu.uuid": "bold blue",
        "nu.null": "italic magenta",
    }
)

DEFAULT_WIDTH = 120


def render_text(
    draw: Callable[[Console], None],
    *,
    width: int = DEFAULT_WIDTH,
    color: bool = False,
) -> str:
    """Run *draw* against a buffered Console and return what it printed.

    The trailing newline of the last line is stripped.
    """
    buffer = StringIO()
    console = Console(
        file=buffer,
        theme=NULLUUID_THEME,
        width=width,
        highlight=False,
        force_terminal=color,
        color_system="standard" if color else None,
    )
    draw(console)
    return buffer.getvalue().rstrip("\n")
