"""Tests for the rewrite pipeline and whitespace normalization."""

import pytest

from prettifier.domain.models import AirportRecord, LookupTable, TokenKind
from prettifier.text.ansi import BLUE, GREEN, PURPLE, RED, RESET, YELLOW
from prettifier.text.matchers import matcher_for
from prettifier.text.pipeline import Document, RewritePass, RewritePipeline, rewrite
from prettifier.text.whitespace import normalize_whitespace


def test_flight_line_example(table):
    text = "Flight from #LHR to ##EGLL, date D(2031-12-03T13:15:30+01:00)"

    assert rewrite(text, table) == (
        f'Flight from {BLUE}"Heathrow"{RESET} to {BLUE}"Heathrow"{RESET}, '
        f"date {YELLOW}03 Dec 2031{RESET}"
    )


def test_unmapped_code_is_left_untouched(table):
    assert rewrite("Transfer at #ZZZ.", table) == "Transfer at #ZZZ."
    assert rewrite("Transfer at ##ZZZZ.", table) == "Transfer at ##ZZZZ."
    assert rewrite("Welcome to *#ZZZ!", table) == "Welcome to *#ZZZ!"


def test_locality_before_codes(table):
    result = rewrite("Welcome to *#LHR via #LHR", table)
    assert result == f'Welcome to {PURPLE}London{RESET} via {BLUE}"Heathrow"{RESET}'


def test_long_code_is_never_read_as_short_code():
    table = LookupTable.from_records([AirportRecord("Bravo Field", "BCD", "WXYZ", "Bravo")])
    assert rewrite("Land at ##ABCD", table) == "Land at ##ABCD"
    assert rewrite("Land at *##ABCD", table) == "Land at *##ABCD"


def test_all_time_formats(table):
    text = (
        "T12(2031-12-03T13:15+01:00) | T24(2031-12-03T13:15+01:00) | "
        "T12(2031-12-03T21:40Z) | T24(2031-12-03T21:40Z)"
    )
    assert rewrite(text, table) == (
        f"{RED}01:15PM (+01:00){RESET} | {GREEN}13:15 (+01:00){RESET} | "
        f"{PURPLE}09:40PM (+00:00){RESET} | {BLUE}21:40 (+00:00){RESET}"
    )


def test_bad_timestamps_are_kept(table):
    text = "D(next tuesday) T12(2031-02-30T10:00+01:00) T24(sometime Z)"
    assert rewrite(text, table) == text


def test_substituted_text_is_not_rescanned():
    table = LookupTable.from_records(
        [AirportRecord("Gate #TLL", "ABC", "ABCD", "D(2031-12-03T13:15Z)"),
         AirportRecord("Tallinn", "TLL", "EETN", "Tallinn")]
    )
    result = rewrite("*#ABC and ##ABCD", table)
    assert result == f'{PURPLE}D(2031-12-03T13:15Z){RESET} and {BLUE}"Gate #TLL"{RESET}'


def test_output_without_color(table):
    assert rewrite("#LHR on D(2031-12-03T13:15Z)", table, use_color=False) == (
        '"Heathrow" on 03 Dec 2031'
    )


def test_color_setting_from_environment(table, monkeypatch):
    monkeypatch.setenv("PRETTIFIER_RENDER_COLOR", "false")
    assert RewritePipeline(table).run("#LHR") == '"Heathrow"'


def test_pipeline_normalizes_whitespace(table):
    assert rewrite("#LHR\n\n\n\n\r\nD(2031-12-03T13:15Z)", table, use_color=False) == (
        '"Heathrow"\n\n03 Dec 2031'
    )


def test_passes_follow_matcher_order(table):
    kinds = [p.kind for p in RewritePipeline(table).passes]
    assert kinds == list(TokenKind)


class TestRewritePass:
    def test_single_pass_is_text_to_text(self, table):
        short_pass = RewritePass(matcher_for(TokenKind.SHORT_CODE), table, use_color=False)
        assert short_pass("#LHR *#TLL ##EETN") == '"Heathrow" *"Lennart Meri Tallinn Airport" ##EETN'

    def test_apply_reports_counts(self, table):
        short_pass = RewritePass(matcher_for(TokenKind.SHORT_CODE), table)
        document, report = short_pass.apply(Document.from_text("#LHR #ZZZ #TLL"))

        assert report.kind is TokenKind.SHORT_CODE
        assert (report.substituted, report.passthrough) == (2, 1)
        assert [s.frozen for s in document.segments] == [True, False, True]

    def test_apply_skips_frozen_segments(self, table):
        long_pass = RewritePass(matcher_for(TokenKind.LONG_CODE), table, use_color=False)
        document = Document.from_text("##EGLL")
        document, _ = long_pass.apply(document)
        document, _ = long_pass.apply(document)
        assert document.text == '"Heathrow"'


class TestNormalizeWhitespace:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("a\n\n\nb", "a\n\nb"),
            ("a\n\n\n\n\n\nb", "a\n\nb"),
            ("a\n\nb", "a\n\nb"),
            ("a\x0bb", "a\nb"),
            ("a\x0c\x0c\rb", "a\nb"),
            ("a\r\n\r\nb", "a\n\nb"),
            ("", ""),
        ],
    )
    def test_normalize(self, text, expected):
        assert normalize_whitespace(text) == expected
