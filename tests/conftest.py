"""Shared fixtures for the prettifier test suite."""

from pathlib import Path

import pytest

from prettifier.config import reset_config
from prettifier.domain.models import AirportRecord, LookupTable

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(autouse=True)
def fresh_config():
    """Make every test read the environment afresh."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def lookup_csv() -> Path:
    return DATA_DIR / "airport-lookup.csv"


@pytest.fixture
def table() -> LookupTable:
    return LookupTable.from_records(
        [
            AirportRecord("Heathrow", "LHR", "EGLL", "London"),
            AirportRecord("Lennart Meri Tallinn Airport", "TLL", "EETN", "Tallinn"),
            AirportRecord('"Quoted Field"', "QQQ", "QQQQ", "Quoteville"),
        ]
    )
