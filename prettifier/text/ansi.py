"""ANSI color palette for terminal output.

Each token kind is rendered in a fixed bold color followed by a reset.
"""

from __future__ import annotations

from ..domain.models import ResolvedSpan

GREEN = "\x1b[1;32m"
YELLOW = "\x1b[1;33m"
RED = "\x1b[1;31m"
BLUE = "\x1b[1;34m"
PURPLE = "\x1b[1;35m"
RESET = "\x1b[0m"


def colorize(text: str, color: str) -> str:
    """Wrap ``text`` in ``color`` and a reset sequence."""
    return f"{color}{text}{RESET}"


def render(span: ResolvedSpan, use_color: bool = True) -> str:
    """Return the replacement text of ``span``, colorized unless it is a passthrough."""
    if span.is_passthrough or not use_color:
        return span.text
    return colorize(span.text, span.color)  # type: ignore[arg-type]
