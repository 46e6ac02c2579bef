"""File-system document adapter.

Reads itinerary text from disk and writes the prettified result back.
The writer only ever receives complete text, so a failed run never
leaves a partial output file behind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from ...config import RenderConfig, get_config
from ...domain.errors import InputNotFoundError


@dataclass
class FileDocumentSource:
    """Reads an itinerary from a text file.

    Line endings are normalized to ``\\n`` on read.

    Attributes:
        encoding: Text encoding of the input file
    """

    encoding: str = "utf-8"

    def exists(self, path: Union[str, Path]) -> bool:
        return Path(path).is_file()

    def read(self, path: Union[str, Path]) -> str:
        path = Path(path)
        try:
            return path.read_text(encoding=self.encoding)
        except FileNotFoundError as e:
            raise InputNotFoundError("Input not found", path=str(path), cause=e)


@dataclass
class FileDocumentSink:
    """Writes prettified text to a file.

    Attributes:
        config: Render configuration (output encoding)
    """

    config: RenderConfig = field(default_factory=lambda: get_config().render)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def write(self, path: Union[str, Path], text: str) -> Path:
        path = Path(path)
        path.write_text(text, encoding=self.config.encoding, newline="\n")
        self._logger.info(
            "Output written",
            extra={"output_path": str(path), "chars": len(text)},
        )
        return path
