"""Rendering surfaces for trace output.

A trace line is either written to an interactive console, where ANSI colour
escapes are used, or to a markup target such as an HTML debug page.
"""

import sys
from enum import Enum
from typing import Callable, Final

from typing_extensions import TypeAlias

__all__ = (
    "ANSI_GREEN",
    "ANSI_RED",
    "ANSI_RESET",
    "MARKUP_LINE_BREAK",
    "InteractiveDetector",
    "Surface",
    "is_interactive_session",
    "resolve_surface",
)

ANSI_GREEN: Final[str] = "\x1b[32m"
ANSI_RED: Final[str] = "\x1b[91m"
ANSI_RESET: Final[str] = "\x1b[39m"

MARKUP_LINE_BREAK: Final[str] = "<br />"

InteractiveDetector: TypeAlias = Callable[[], bool]


class Surface(str, Enum):
    """Target format of a rendered trace line."""

    INTERACTIVE = "interactive"
    MARKUP = "markup"

    def __str__(self) -> str:
        return self.value

    def wrap_slot(self, slot: str) -> str:
        """Highlight a canonical slot marker."""
        if self is Surface.INTERACTIVE:
            return f"{ANSI_GREEN}{slot}{ANSI_RESET}"
        return f'<b style="color:green">{slot}</b>'

    def format_line(self, line: str, highlight: bool) -> str:
        """Return ``line`` as it is written to the output stream.

        Args:
            line: The rendered statement.
            highlight: Whether the statement changes the schema.

        Returns:
            The decorated line including its terminator.
        """
        if self is Surface.INTERACTIVE:
            body = f"{ANSI_RED}{line}{ANSI_RESET}" if highlight else line
            return f"{body}\n"
        body = f'<b style="color:red">{line}</b>' if highlight else line
        return f"{body}{MARKUP_LINE_BREAK}"


def is_interactive_session() -> bool:
    """Check whether standard output is attached to a terminal."""
    stream = sys.stdout
    if stream is None:
        return False
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


def resolve_surface(detect_interactive: InteractiveDetector, override_interactive_output: bool) -> Surface:
    """Pick the surface for the next line.

    Args:
        detect_interactive: Reports whether the process runs on a console.
        override_interactive_output: Force markup output regardless of the console.

    Returns:
        ``Surface.INTERACTIVE`` only on a console without the override.
    """
    if override_interactive_output:
        return Surface.MARKUP
    try:
        interactive = bool(detect_interactive())
    except Exception:  # noqa: BLE001
        interactive = False
    return Surface.INTERACTIVE if interactive else Surface.MARKUP
