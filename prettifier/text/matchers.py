"""Token matchers for itinerary markup.

One matcher per token kind. Each recognizes a single lexical pattern
and yields the non-overlapping matches of a text from left to right.

Markup grammar (case-sensitive):

    #LHR                          short (IATA) code
    ##EGLL                        long (ICAO) code
    *#LHR, *##EGLL                municipality of a code
    D(2031-12-03T13:15:30+01:00)  calendar date
    T12(2031-12-03T13:15+01:00)   local time, 12-hour clock
    T24(2031-12-03T13:15+01:00)   local time, 24-hour clock
    T12(2031-12-03T13:15Z)        UTC time, 12-hour clock
    T24(2031-12-03T13:15Z)        UTC time, 24-hour clock
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Tuple

from ..domain.models import Token, TokenKind

_LOCAL_TIMESTAMP = r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}[+-]\d{2}:\d{2}"

PATTERNS = {
    # A code must not be glued to a longer run of hashes or letters,
    # so ##ABCD never yields #BCD and #ABCD yields nothing.
    TokenKind.LOCALITY: re.compile(r"\*(##[A-Z]{4}|#[A-Z]{3})(?![A-Z])"),
    TokenKind.LONG_CODE: re.compile(r"(?<!#)##([A-Z]{4})(?![A-Z])"),
    TokenKind.SHORT_CODE: re.compile(r"(?<!#)#([A-Z]{3})(?![A-Z])"),
    TokenKind.DATE: re.compile(r"D\(([^)\n]*)\)"),
    TokenKind.LOCAL_TIME_12: re.compile(rf"T12\(({_LOCAL_TIMESTAMP})\)"),
    TokenKind.LOCAL_TIME_24: re.compile(rf"T24\(({_LOCAL_TIMESTAMP})\)"),
    TokenKind.UTC_TIME_12: re.compile(r"T12\(([^)\n]*?Z)\)"),
    TokenKind.UTC_TIME_24: re.compile(r"T24\(([^)\n]*?Z)\)"),
}


@dataclass(frozen=True)
class TokenMatcher:
    """Recognizer for one token kind.

    Attributes:
        kind: The token kind this matcher produces
        pattern: Compiled pattern whose first group is the payload
    """

    kind: TokenKind
    pattern: re.Pattern[str]

    def scan(self, text: str, offset: int = 0) -> TokenScan:
        """Return the tokens of ``text``, lazily and restartably.

        Spans are shifted by ``offset`` so tokens found in one segment
        of a document carry positions in the whole document.
        """
        return TokenScan(self, text, offset)

    def iter_tokens(self, text: str, offset: int = 0) -> Iterator[Token]:
        """Yield tokens of ``text`` with spans shifted by ``offset``."""
        for match in self.pattern.finditer(text):
            payload = match.group(1)
            if self.kind is TokenKind.LOCALITY:
                payload = payload.lstrip("#")
            yield Token(
                kind=self.kind,
                text=match.group(0),
                payload=payload,
                start=match.start() + offset,
                end=match.end() + offset,
            )


@dataclass(frozen=True)
class TokenScan:
    """Iterable view over the matches of one matcher in one text.

    Every iteration scans the text again from the start.
    """

    matcher: TokenMatcher
    text: str
    offset: int = 0

    def __iter__(self) -> Iterator[Token]:
        return self.matcher.iter_tokens(self.text, self.offset)


MATCHERS: Tuple[TokenMatcher, ...] = tuple(
    TokenMatcher(kind, PATTERNS[kind]) for kind in TokenKind
)
"""All matchers in pass precedence order."""


def matcher_for(kind: TokenKind) -> TokenMatcher:
    """Return the matcher for one token kind, e.g. to run a single pass."""
    return MATCHERS[list(TokenKind).index(kind)]
