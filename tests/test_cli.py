"""Tests for the prettifier service and command-line front end."""

import pytest

from prettifier.cli import main
from prettifier.config import AppConfig
from prettifier.domain.errors import (
    InputNotFoundError,
    LookupNotFoundError,
    MalformedLookupError,
)
from prettifier.services import PrettifierService
from prettifier.text.ansi import BLUE, PURPLE, RED, RESET, colorize


@pytest.fixture
def itinerary(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(
        "Your flight departs from #LHR, and your destination is *##EETN.\n\n\n\n"
        "Departure: D(2031-12-03T13:15:30+01:00)\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def service():
    return PrettifierService.create_default(AppConfig())


class TestPrettifierService:
    def test_prettify_writes_output(self, service, itinerary, lookup_csv, tmp_path):
        output = tmp_path / "output.txt"
        result = service.prettify(itinerary, output, lookup_csv)

        assert output.read_text(encoding="utf-8") == result
        assert f'{BLUE}"London Heathrow Airport"{RESET}' in result
        assert f"{PURPLE}Tallinn{RESET}" in result
        assert "\n\n\n" not in result

    def test_missing_input(self, service, lookup_csv, tmp_path):
        output = tmp_path / "output.txt"
        with pytest.raises(InputNotFoundError):
            service.prettify(tmp_path / "nope.txt", output, lookup_csv)
        assert not output.exists()

    def test_missing_lookup(self, service, itinerary, tmp_path):
        output = tmp_path / "output.txt"
        with pytest.raises(LookupNotFoundError):
            service.prettify(itinerary, output, tmp_path / "nope.csv")
        assert not output.exists()

    def test_malformed_lookup_writes_nothing(self, service, itinerary, tmp_path):
        lookup = tmp_path / "lookup.csv"
        lookup.write_text("name,iata_code,icao_code\nHeathrow,LHR,EGLL\n")
        output = tmp_path / "output.txt"

        with pytest.raises(MalformedLookupError):
            service.prettify(itinerary, output, lookup)
        assert not output.exists()

    def test_prettify_text(self, service, lookup_csv):
        assert service.prettify_text("#LAX", lookup_csv) == (
            f'{BLUE}"Los Angeles International Airport"{RESET}'
        )


class TestMain:
    def test_success_with_print(self, itinerary, lookup_csv, tmp_path, capsys):
        output = tmp_path / "output.txt"
        code = main([str(itinerary), str(output), str(lookup_csv), "--print"])

        assert code == 0
        assert output.exists()
        assert output.read_text(encoding="utf-8") in capsys.readouterr().out

    def test_success_is_quiet_without_print(self, itinerary, lookup_csv, tmp_path, capsys):
        code = main([str(itinerary), str(tmp_path / "output.txt"), str(lookup_csv)])
        assert code == 0
        assert capsys.readouterr().out == ""

    def test_missing_arguments_prints_usage(self, capsys):
        assert main(["input.txt"]) == 2
        assert "itinerary usage" in capsys.readouterr().out

    def test_help(self, capsys):
        assert main(["--help"]) == 0
        out = capsys.readouterr().out
        assert "#LHR" in out
        assert "##EGLL" in out

    def test_input_not_found(self, lookup_csv, tmp_path, capsys):
        output = tmp_path / "output.txt"
        code = main([str(tmp_path / "nope.txt"), str(output), str(lookup_csv)])

        assert code == 1
        assert "Input not found" in capsys.readouterr().out
        assert not output.exists()

    def test_lookup_not_found(self, itinerary, tmp_path, capsys):
        code = main([str(itinerary), str(tmp_path / "output.txt"), str(tmp_path / "nope.csv")])
        assert code == 1
        assert "Airport lookup not found" in capsys.readouterr().out

    def test_lookup_malformed(self, itinerary, tmp_path, capsys):
        lookup = tmp_path / "lookup.csv"
        lookup.write_text("")
        code = main([str(itinerary), str(tmp_path / "output.txt"), str(lookup)])

        assert code == 1
        assert "Airport lookup malformed" in capsys.readouterr().out

    def test_malformed_message_omits_detail(self, itinerary, tmp_path, capsys):
        lookup = tmp_path / "lookup.csv"
        lookup.write_text("name,iata_code\nHeathrow,LHR\n")
        code = main([str(itinerary), str(tmp_path / "output.txt"), str(lookup)])

        assert code == 1
        assert capsys.readouterr().out == colorize("Airport lookup malformed", RED) + "\n"

    def test_oversized_lookup_field(self, itinerary, tmp_path, capsys):
        lookup = tmp_path / "lookup.csv"
        lookup.write_text(
            "name,iata_code,icao_code,municipality\n" + "x" * 200_000 + ",LHR,EGLL,London\n"
        )
        output = tmp_path / "output.txt"
        code = main([str(itinerary), str(output), str(lookup)])

        assert code == 1
        assert "Airport lookup malformed" in capsys.readouterr().out
        assert not output.exists()
