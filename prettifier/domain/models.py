"""Immutable domain models for the Itinerary Prettifier.

All models are frozen dataclasses with slots. These models have no
external dependencies and represent the core concepts of the
application: airport records, the lookup table built from them, and
the tokens and replacements produced while rewriting a document.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Iterable, Mapping, Optional


class TokenKind(Enum):
    """Kind of markup token recognized in an itinerary.

    Members are declared in pass precedence order.
    """

    LOCALITY = auto()
    LONG_CODE = auto()
    SHORT_CODE = auto()
    DATE = auto()
    LOCAL_TIME_12 = auto()
    LOCAL_TIME_24 = auto()
    UTC_TIME_12 = auto()
    UTC_TIME_24 = auto()

    @property
    def is_code(self) -> bool:
        return self in (TokenKind.LONG_CODE, TokenKind.SHORT_CODE)


@dataclass(frozen=True, slots=True)
class AirportRecord:
    """One data row of the airport lookup.

    Attributes:
        name: Human-readable airport name (e.g., 'London Heathrow Airport')
        iata_code: Three-letter IATA code (e.g., 'LHR')
        icao_code: Four-letter ICAO code (e.g., 'EGLL')
        municipality: City served by the airport (e.g., 'London')
    """

    name: str
    iata_code: str
    icao_code: str
    municipality: str

    @property
    def codes(self) -> tuple[str, str]:
        return (self.iata_code, self.icao_code)


@dataclass(frozen=True, slots=True)
class LookupTable:
    """Code-keyed airport names and municipalities.

    Both mappings always share the same key set: every record registers
    its IATA and ICAO code in each of them. Instances are read-only and
    are built once per run; nothing is shared between runs.

    Attributes:
        name_of: code -> airport display name
        locality_of: code -> municipality name
    """

    name_of: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    locality_of: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_records(cls, records: Iterable[AirportRecord]) -> LookupTable:
        """Build a table from airport records.

        Later records win when two rows share a code.
        """
        names: dict[str, str] = {}
        localities: dict[str, str] = {}
        for record in records:
            for code in record.codes:
                names[code] = record.name
                localities[code] = record.municipality
        return cls(
            name_of=MappingProxyType(names),
            locality_of=MappingProxyType(localities),
        )

    def name_for(self, code: str) -> Optional[str]:
        return self.name_of.get(code)

    def locality_for(self, code: str) -> Optional[str]:
        return self.locality_of.get(code)

    def __contains__(self, code: object) -> bool:
        return code in self.name_of

    def __len__(self) -> int:
        return len(self.name_of)


@dataclass(frozen=True, slots=True)
class Token:
    """A markup token recognized in the text of one pass.

    Attributes:
        kind: Which matcher produced the token
        text: The full matched substring, markup included
        payload: The captured code or timestamp string
        start: Start offset of the match in the pass input
        end: End offset (exclusive) of the match in the pass input
    """

    kind: TokenKind
    text: str
    payload: str
    start: int
    end: int

    @property
    def span(self) -> tuple[int, int]:
        return (self.start, self.end)


@dataclass(frozen=True, slots=True)
class ResolvedSpan:
    """Replacement text for a token.

    A span without a color is a passthrough: the token's original text,
    written back untouched.

    Attributes:
        text: Replacement text, without color markup
        color: ANSI color sequence, or None for a passthrough
    """

    text: str
    color: Optional[str] = None

    @property
    def is_passthrough(self) -> bool:
        return self.color is None
