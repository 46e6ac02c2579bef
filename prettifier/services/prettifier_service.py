"""Prettifier service - Main orchestrator.

Runs one itinerary through the whole flow: input check, lookup load,
rewrite, whitespace cleanup, and output write. The output is written
only once every step has succeeded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from ..adapters.document import FileDocumentSink, FileDocumentSource
from ..adapters.lookup import CSVLookupRepository
from ..config import AppConfig, get_config
from ..domain.errors import InputNotFoundError
from ..ports.document import DocumentSinkPort, DocumentSourcePort
from ..ports.lookup import LookupRepositoryPort
from ..text.pipeline import RewritePipeline

PathLike = Union[str, Path]


@dataclass
class PrettifierService:
    """Main service for prettifying itineraries.

    This service orchestrates the full run:
    1. Input existence check
    2. Lookup table load (all-or-nothing)
    3. Rewrite passes and whitespace normalization
    4. Output write

    Attributes:
        lookup_repository: Loads the airport lookup table
        source: Reads the raw itinerary
        sink: Writes the prettified itinerary
        use_color: Whether replacements are wrapped in ANSI colors
    """

    lookup_repository: LookupRepositoryPort
    source: DocumentSourcePort
    sink: DocumentSinkPort
    use_color: bool = True

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> PrettifierService:
        """Create a service wired to the file-system adapters."""
        config = config or get_config()
        return cls(
            lookup_repository=CSVLookupRepository(config.lookup),
            source=FileDocumentSource(encoding=config.render.encoding),
            sink=FileDocumentSink(config.render),
            use_color=config.render.color,
        )

    def prettify_text(self, text: str, lookup_path: PathLike) -> str:
        """Load the lookup table and rewrite ``text`` with it.

        Raises:
            LookupNotFoundError: If the lookup file does not exist.
            MalformedLookupError: If the lookup file cannot be parsed.
        """
        table = self.lookup_repository.load(lookup_path)
        return RewritePipeline(table, use_color=self.use_color).run(text)

    def prettify(
        self,
        input_path: PathLike,
        output_path: PathLike,
        lookup_path: PathLike,
    ) -> str:
        """Prettify an itinerary file into ``output_path``.

        Args:
            input_path: Raw itinerary text file.
            output_path: Destination of the prettified text.
            lookup_path: Airport lookup CSV file.

        Returns:
            The prettified text that was written.

        Raises:
            InputNotFoundError: If the input file does not exist.
            LookupNotFoundError: If the lookup file does not exist.
            MalformedLookupError: If the lookup file cannot be parsed.
        """
        self._logger.info(
            "Starting prettify run",
            extra={
                "input_path": str(input_path),
                "output_path": str(output_path),
                "lookup_path": str(lookup_path),
            },
        )

        if not self.source.exists(input_path):
            raise InputNotFoundError("Input not found", path=str(input_path))

        table = self.lookup_repository.load(lookup_path)
        text = self.source.read(input_path)
        result = RewritePipeline(table, use_color=self.use_color).run(text)

        self.sink.write(output_path, result)
        return result
