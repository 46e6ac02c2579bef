"""Lookup port - Abstraction for loading the airport lookup table."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional, Protocol, Union

if TYPE_CHECKING:
    from ..domain.models import LookupTable


class LookupRepositoryPort(Protocol):
    """Port for loading airport reference data.

    Implementation: adapters/lookup/csv_repository.py

    The repository builds a fresh LookupTable from persistent storage.
    Loading replaces any previously held table in full.
    """

    def load(self, path: Union[str, Path]) -> LookupTable:
        """Load the lookup table.

        Args:
            path: Location of the reference dataset.

        Returns:
            The newly built lookup table.

        Raises:
            LookupNotFoundError: If the dataset does not exist.
            MalformedLookupError: If the dataset cannot be parsed.
        """
        ...

    @property
    def table(self) -> Optional[LookupTable]:
        """The most recently loaded table, if any."""
        ...
