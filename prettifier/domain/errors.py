"""Typed domain errors for the Itinerary Prettifier.

Only run-level failures are represented here: a missing input file, a
missing lookup file, or a malformed lookup table. Individual tokens that
cannot be resolved never raise; they are left in the text as written.

All errors inherit from PrettifierError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class PrettifierError(Exception):
    """Base error for the prettifier domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InputNotFoundError(PrettifierError):
    """The itinerary input file does not exist.

    Attributes:
        path: Path that was checked
    """

    path: Optional[str] = None


@dataclass
class LookupNotFoundError(PrettifierError):
    """The airport lookup file does not exist.

    Attributes:
        path: Path that was checked
    """

    path: Optional[str] = None


@dataclass
class MalformedLookupError(PrettifierError):
    """The airport lookup could not be loaded.

    Raised for an empty document, a missing required column, a short
    row, a blank required field, or a table with no data rows. The load
    is all-or-nothing, so one bad row rejects the whole file.

    Attributes:
        path: Path to the lookup file if known
        line_number: 1-based line of the offending row, if any
        reason: What was wrong with the file
    """

    path: Optional[str] = None
    line_number: Optional[int] = None
    reason: Optional[str] = None

    def __str__(self) -> str:
        text = self.message
        if self.reason:
            text = f"{text}: {self.reason}"
        if self.line_number is not None:
            text = f"{text} (line {self.line_number})"
        if self.cause:
            text = f"{text}: {self.cause}"
        return text
