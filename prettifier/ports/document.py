"""Document ports - Abstractions for reading and writing itineraries.

These protocols decouple the rewrite pipeline from where the raw text
comes from and where the prettified text goes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Union


class DocumentSourcePort(Protocol):
    """Port for reading the raw itinerary text.

    Implementation: adapters/document/file_document.py
    """

    def exists(self, path: Union[str, Path]) -> bool:
        """Check whether a document exists at ``path``."""
        ...

    def read(self, path: Union[str, Path]) -> str:
        """Read the full document text.

        Raises:
            InputNotFoundError: If the document does not exist.
        """
        ...


class DocumentSinkPort(Protocol):
    """Port for writing the prettified text.

    Implementation: adapters/document/file_document.py
    """

    def write(self, path: Union[str, Path], text: str) -> Path:
        """Write the full text, replacing any previous content.

        Returns:
            Path of the written document.
        """
        ...
