"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    InputNotFoundError,
    LookupNotFoundError,
    MalformedLookupError,
    PrettifierError,
)
from .models import AirportRecord, LookupTable, ResolvedSpan, Token, TokenKind

__all__ = [
    # Models
    "AirportRecord",
    "LookupTable",
    "Token",
    "TokenKind",
    "ResolvedSpan",
    # Errors
    "PrettifierError",
    "InputNotFoundError",
    "LookupNotFoundError",
    "MalformedLookupError",
]
