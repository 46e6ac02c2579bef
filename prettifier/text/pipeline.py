"""Rewrite pipeline for itinerary markup.

The pipeline applies one pass per token kind, in the fixed order of
``MATCHERS``: municipalities, ICAO codes, IATA codes, dates, local
times (12h, 24h), then UTC times (12h, 24h). Each pass scans the output
of the previous one. Text substituted by a pass is frozen: later passes
see it in the document but never match inside it. Whitespace is
normalized once all passes have run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from ..config import get_config
from ..domain.models import LookupTable, TokenKind
from .ansi import render
from .matchers import MATCHERS, TokenMatcher
from .resolvers import resolve
from .whitespace import normalize_whitespace


@dataclass(frozen=True, slots=True)
class Segment:
    """A run of document text.

    Attributes:
        text: The text of the run
        frozen: True if a previous pass produced it
    """

    text: str
    frozen: bool = False


@dataclass(frozen=True, slots=True)
class Document:
    """Document text split into scannable and frozen segments."""

    segments: Tuple[Segment, ...] = ()

    @classmethod
    def from_text(cls, text: str) -> Document:
        return cls((Segment(text),))

    @property
    def text(self) -> str:
        return "".join(segment.text for segment in self.segments)


@dataclass(frozen=True, slots=True)
class PassReport:
    """Counts gathered while running one pass."""

    kind: TokenKind
    substituted: int = 0
    passthrough: int = 0


@dataclass(frozen=True)
class RewritePass:
    """One scan-and-substitute sweep for a single token kind.

    Calling the pass maps text to text, treating the whole input as
    scannable; apply() works on a Document and keeps frozen segments.

    Attributes:
        matcher: Recognizer for the token kind of this pass
        table: Lookup table used to resolve codes
        use_color: Whether replacements are wrapped in ANSI colors
    """

    matcher: TokenMatcher
    table: LookupTable
    use_color: bool = True

    @property
    def kind(self) -> TokenKind:
        return self.matcher.kind

    def __call__(self, text: str) -> str:
        document, _ = self.apply(Document.from_text(text))
        return document.text

    def apply(self, document: Document) -> Tuple[Document, PassReport]:
        segments: List[Segment] = []
        substituted = passthrough = 0
        offset = 0

        for segment in document.segments:
            if segment.frozen:
                segments.append(segment)
                offset += len(segment.text)
                continue

            cursor = 0
            for token in self.matcher.scan(segment.text, offset):
                span = resolve(token, self.table)
                if span.is_passthrough:
                    passthrough += 1
                    continue

                start, end = token.start - offset, token.end - offset
                if start > cursor:
                    segments.append(Segment(segment.text[cursor:start]))
                segments.append(Segment(render(span, self.use_color), frozen=True))
                cursor = end
                substituted += 1

            if cursor < len(segment.text):
                segments.append(Segment(segment.text[cursor:]))
            offset += len(segment.text)

        report = PassReport(self.kind, substituted, passthrough)
        return Document(tuple(segments)), report


@dataclass
class RewritePipeline:
    """Ordered composition of rewrite passes plus whitespace cleanup.

    The pipeline reads the lookup table it was given and nothing else;
    build a new pipeline for each table.

    Attributes:
        table: Lookup table for code and municipality resolution
        matchers: Matchers in pass order
        use_color: Whether replacements are wrapped in ANSI colors
    """

    table: LookupTable
    matchers: Sequence[TokenMatcher] = MATCHERS
    use_color: bool = field(default_factory=lambda: get_config().render.color)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def passes(self) -> List[RewritePass]:
        return [RewritePass(m, self.table, self.use_color) for m in self.matchers]

    def run(self, text: str) -> str:
        """Rewrite every markup token of ``text`` and normalize whitespace.

        Args:
            text: Raw itinerary text.

        Returns:
            The prettified text. Tokens that cannot be resolved are kept
            as written.
        """
        document = Document.from_text(text)
        for rewrite_pass in self.passes:
            document, report = rewrite_pass.apply(document)
            self._logger.debug(
                "Rewrite pass done",
                extra={
                    "kind": report.kind.name,
                    "substituted": report.substituted,
                    "passthrough": report.passthrough,
                },
            )
        return normalize_whitespace(document.text)


def rewrite(text: str, table: LookupTable, *, use_color: bool = True) -> str:
    """Prettify ``text`` with a one-off pipeline over ``table``."""
    return RewritePipeline(table, use_color=use_color).run(text)
