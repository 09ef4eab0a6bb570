"""Rich Console factory, theme, and terminal title helper.

Consoles render to a StringIO buffer, preserving the
``format_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich disables color codes.
"""

from __future__ import annotations

import logging
from io import StringIO

from rich.console import Console
from rich.theme import Theme

logger = logging.getLogger(__name__)

DK_THEME = Theme(
    {
        "dk.ok": "bold green",
        "dk.error": "bold red",
        "dk.warning": "bold yellow",
        "dk.op": "bold cyan",
        "dk.key": "dim",
        "dk.label": "bold",
        "dk.hint.Hidden": "dim",
        "dk.hint.Email": "blue",
        "dk.format": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=DK_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_hint(hint: str | None) -> str:
    """Return the Rich style name for a template hint."""
    if hint is None:
        return ""
    return f"dk.hint.{hint}"


def set_console_title(title: str, *, development: bool, console: Console | None = None) -> bool:
    """Set the terminal window title when running in development mode.

    Returns True when the title was written. Outside development mode, or
    when no terminal is attached (service, redirected output), nothing is
    written.
    """
    if not development or not title:
        return False
    target = console or Console(stderr=True)
    written = target.set_window_title(title)
    if not written:
        logger.debug("Console title not set: no terminal attached")
    return written
