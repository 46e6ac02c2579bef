"""Whitespace cleanup applied to the rewritten itinerary."""

from __future__ import annotations

import re

_VERTICAL_BREAKS = re.compile(r"[\v\f\r]+")
_BLANK_RUN = re.compile(r"\n{3,}")


def normalize_whitespace(text: str) -> str:
    """Turn vertical tab/form feed/CR runs into a newline, then cap blank lines at one."""
    text = _VERTICAL_BREAKS.sub("\n", text)
    return _BLANK_RUN.sub("\n\n", text)
