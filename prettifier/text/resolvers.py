"""Resolvers turning recognized tokens into display strings.

Resolution is total: a code missing from the lookup table or a
timestamp that does not parse resolves to the token's original text,
uncolored. Nothing in this module raises for bad input.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta
from typing import Callable, Dict, Optional

from dateutil.parser import isoparse

from ..domain.models import LookupTable, ResolvedSpan, Token, TokenKind
from . import ansi

KIND_COLORS: Dict[TokenKind, str] = {
    TokenKind.LOCALITY: ansi.PURPLE,
    TokenKind.LONG_CODE: ansi.BLUE,
    TokenKind.SHORT_CODE: ansi.BLUE,
    TokenKind.DATE: ansi.YELLOW,
    TokenKind.LOCAL_TIME_12: ansi.RED,
    TokenKind.LOCAL_TIME_24: ansi.GREEN,
    TokenKind.UTC_TIME_12: ansi.PURPLE,
    TokenKind.UTC_TIME_24: ansi.BLUE,
}

# Fixed English abbreviations; output must not depend on the locale.
MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

UTC_OFFSET = "+00:00"
MAX_OFFSET = timedelta(hours=18)

# Shape gate: full date, 'T', hour 00-23, minutes, optional seconds and
# fraction, then 'Z' or a numeric offset. isoparse is more permissive.
TIMESTAMP_RE = re.compile(
    r"\d{4}-\d{2}-\d{2}T(?:[01]\d|2[0-3]):\d{2}"
    r"(?::\d{2}(?:\.\d{1,9})?)?"
    r"(?:Z|[+-]\d{2}:\d{2})"
)


def passthrough(token: Token) -> ResolvedSpan:
    return ResolvedSpan(token.text)


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse an offset date-time such as ``2031-12-03T13:15:30+01:00``.

    ``Z`` is the zero offset. Seconds and a fraction of up to nine
    digits are optional; the offset is mandatory and at most 18 hours.

    Returns:
        An aware datetime, or None if ``value`` is not a valid timestamp.
    """
    if TIMESTAMP_RE.fullmatch(value) is None:
        return None

    try:
        dt = isoparse(value)
    except (ValueError, OverflowError):
        return None

    offset = dt.utcoffset()
    if offset is None or abs(offset) > MAX_OFFSET:
        return None
    return dt


def format_offset(dt: datetime) -> str:
    """Numeric ``±HH:MM`` offset of an aware datetime."""
    total = int(dt.utcoffset().total_seconds())  # type: ignore[union-attr]
    sign = "-" if total < 0 else "+"
    minutes = abs(total) // 60
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def format_date(dt: datetime) -> str:
    return f"{dt.day:02d} {MONTHS[dt.month - 1]} {dt.year:04d}"


def format_clock_12(dt: datetime) -> str:
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{hour:02d}:{dt.minute:02d}{meridiem}"


def format_clock_24(dt: datetime) -> str:
    return f"{dt.hour:02d}:{dt.minute:02d}"


TIMESTAMP_LAYOUTS: Dict[TokenKind, Callable[[datetime], str]] = {
    TokenKind.DATE: format_date,
    TokenKind.LOCAL_TIME_12: lambda dt: f"{format_clock_12(dt)} ({format_offset(dt)})",
    TokenKind.LOCAL_TIME_24: lambda dt: f"{format_clock_24(dt)} ({format_offset(dt)})",
    TokenKind.UTC_TIME_12: lambda dt: f"{format_clock_12(dt)} ({UTC_OFFSET})",
    TokenKind.UTC_TIME_24: lambda dt: f"{format_clock_24(dt)} ({UTC_OFFSET})",
}


def quote(name: str) -> str:
    """Wrap ``name`` in double quotes unless it already carries one at either end."""
    if name.startswith('"') or name.endswith('"'):
        return name
    return f'"{name}"'


def resolve_code(token: Token, table: LookupTable) -> ResolvedSpan:
    """Resolve an IATA/ICAO code token to the quoted airport name."""
    name = table.name_for(token.payload)
    if name is None:
        return passthrough(token)
    return ResolvedSpan(quote(name), KIND_COLORS[token.kind])


def resolve_locality(token: Token, table: LookupTable) -> ResolvedSpan:
    """Resolve a ``*``-prefixed code token to the airport's municipality."""
    city = table.locality_for(token.payload)
    if city is None:
        return passthrough(token)
    return ResolvedSpan(city, KIND_COLORS[token.kind])


def resolve_timestamp(token: Token) -> ResolvedSpan:
    """Reformat a date or time token in the layout of its kind."""
    dt = parse_timestamp(token.payload)
    if dt is None:
        return passthrough(token)
    return ResolvedSpan(TIMESTAMP_LAYOUTS[token.kind](dt), KIND_COLORS[token.kind])


def resolve(token: Token, table: LookupTable) -> ResolvedSpan:
    """Resolve any token, dispatching on its kind."""
    if token.kind is TokenKind.LOCALITY:
        return resolve_locality(token, table)
    if token.kind.is_code:
        return resolve_code(token, table)
    return resolve_timestamp(token)
