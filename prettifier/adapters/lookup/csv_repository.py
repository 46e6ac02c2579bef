"""CSV lookup repository adapter.

This adapter loads the airport reference dataset and adds:
- Configuration injection (column names, delimiter, encoding)
- All-or-nothing validation of every data row
- Logging of the loaded table size
"""

from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from ...config import LookupConfig, get_config
from ...domain.errors import LookupNotFoundError, MalformedLookupError
from ...domain.models import AirportRecord, LookupTable

MALFORMED_MESSAGE = "Airport lookup malformed"


def _column_index(header: List[str]) -> Dict[str, int]:
    """Map lower-cased, trimmed header cells to their position."""
    return {cell.strip().lower(): i for i, cell in enumerate(header)}


def parse_records(
    text: str,
    config: Optional[LookupConfig] = None,
    *,
    source: Optional[str] = None,
) -> List[AirportRecord]:
    """Parse and validate every data row of a lookup CSV document.

    Args:
        text: Full CSV document, header row first.
        config: Column names and delimiter. Defaults to the app config.
        source: Path of the document, used in error reports.

    Returns:
        One AirportRecord per data row, in file order.

    Raises:
        MalformedLookupError: If the document is empty, a required column
            is missing, a row is shorter than the header, a required field
            is blank, a blank line precedes a data row, the CSV itself is
            unreadable, or no data rows were found.
    """
    config = config or get_config().lookup
    reader = csv.reader(io.StringIO(text), delimiter=config.delimiter)

    try:
        header = next(reader, None)
        if header is None:
            raise MalformedLookupError(
                MALFORMED_MESSAGE, path=source, reason="empty document"
            )

        columns = _column_index(header)
        missing = [name for name in config.required_columns if name not in columns]
        if missing:
            raise MalformedLookupError(
                MALFORMED_MESSAGE,
                path=source,
                line_number=1,
                reason=f"missing column(s) {', '.join(missing)}",
            )
        positions = [columns[name] for name in config.required_columns]

        records: List[AirportRecord] = []
        blank_line: Optional[int] = None
        for row in reader:
            # Blank lines are only allowed after the last data row.
            if not row:
                blank_line = blank_line or reader.line_num
                continue
            if blank_line is not None:
                raise MalformedLookupError(
                    MALFORMED_MESSAGE,
                    path=source,
                    line_number=blank_line,
                    reason=f"expected {len(header)} fields, got 0",
                )

            if len(row) < len(header):
                raise MalformedLookupError(
                    MALFORMED_MESSAGE,
                    path=source,
                    line_number=reader.line_num,
                    reason=f"expected {len(header)} fields, got {len(row)}",
                )

            name, iata, icao, municipality = (row[i].strip() for i in positions)
            if not (name and iata and icao and municipality):
                raise MalformedLookupError(
                    MALFORMED_MESSAGE,
                    path=source,
                    line_number=reader.line_num,
                    reason="empty required field",
                )

            records.append(
                AirportRecord(
                    name=name,
                    iata_code=iata,
                    icao_code=icao,
                    municipality=municipality,
                )
            )
    except csv.Error as e:
        raise MalformedLookupError(
            MALFORMED_MESSAGE,
            path=source,
            line_number=reader.line_num,
            reason="unreadable CSV",
            cause=e,
        )

    if not records:
        raise MalformedLookupError(MALFORMED_MESSAGE, path=source, reason="no data rows")

    return records


def parse_lookup(
    text: str,
    config: Optional[LookupConfig] = None,
    *,
    source: Optional[str] = None,
) -> LookupTable:
    """Build a LookupTable from CSV text. See parse_records()."""
    return LookupTable.from_records(parse_records(text, config, source=source))


@dataclass
class CSVLookupRepository:
    """Lookup repository that loads airport data from a CSV file.

    This adapter implements LookupRepositoryPort. Each call to load()
    discards the table held so far before parsing, so a failed load
    leaves no table behind rather than a stale one.

    Attributes:
        config: Lookup configuration (column names, delimiter, encoding)
    """

    config: LookupConfig = field(default_factory=lambda: get_config().lookup)
    _logger: logging.Logger = field(init=False, repr=False)

    _table: Optional[LookupTable] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def table(self) -> Optional[LookupTable]:
        return self._table

    def load(self, path: Union[str, Path]) -> LookupTable:
        """Load the airport lookup table from a CSV file.

        Args:
            path: Path to the CSV file.

        Returns:
            The newly built lookup table.

        Raises:
            LookupNotFoundError: If the file does not exist.
            MalformedLookupError: If the file cannot be decoded or parsed.
        """
        path = Path(path)
        self.clear()

        if not path.is_file():
            raise LookupNotFoundError("Airport lookup not found", path=str(path))

        self._logger.debug("Loading airport lookup", extra={"path": str(path)})

        try:
            text = path.read_text(encoding=self.config.encoding)
        except FileNotFoundError as e:
            raise LookupNotFoundError(
                "Airport lookup not found", path=str(path), cause=e
            )
        except (OSError, UnicodeDecodeError) as e:
            raise MalformedLookupError(MALFORMED_MESSAGE, path=str(path), cause=e)

        table = parse_lookup(text, self.config, source=str(path))
        self._table = table
        self._logger.info(
            "Airport lookup loaded",
            extra={"path": str(path), "codes": len(table)},
        )
        return table

    def clear(self) -> None:
        """Drop the currently held table."""
        self._table = None
