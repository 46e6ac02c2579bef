"""Lookup adapters - Implementations of the lookup port.

Available implementations:
- CSVLookupRepository: Loads the airport lookup from a CSV file
"""

from .csv_repository import CSVLookupRepository, parse_lookup, parse_records

__all__ = ["CSVLookupRepository", "parse_lookup", "parse_records"]
