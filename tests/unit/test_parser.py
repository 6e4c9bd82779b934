"""Unit tests for the measurement parser."""

import math

import pytest

from perfcompare.measurements import (
    MeasurementParser,
    SkipReason,
    extract_measurements,
    parse_number,
)


class TestExtractMeasurements:
    """Test extract_measurements on well-formed and malformed input."""

    def test_parses_well_formed_lines(self, baseline_output):
        """Test names and values are recovered from each line."""
        measurements = extract_measurements(baseline_output)
        assert measurements == {
            "Instructions executed for test case A": 123456789.0,
            "Instructions executed for test case B": 2345678.0,
            "Code Size": 34567.0,
        }

    def test_last_colon_is_delimiter(self):
        """Test names may contain colons."""
        assert extract_measurements("suite:case:metric: 1.5") == {"suite:case:metric": 1.5}

    def test_strips_whitespace_around_name_and_value(self):
        """Test surrounding whitespace is trimmed."""
        assert extract_measurements("   Code Size  :\t 42  ") == {"Code Size": 42.0}

    def test_duplicate_name_last_wins(self):
        """Test later lines overwrite earlier ones with the same name."""
        assert extract_measurements("A: 1\nA: 2\nA: 3") == {"A": 3.0}

    def test_empty_input(self, capsys):
        """Test empty input yields an empty mapping without diagnostics."""
        assert extract_measurements("") == {}
        assert capsys.readouterr().err == ""

    def test_blank_lines_are_ignored_silently(self, capsys):
        """Test empty lines produce neither entries nor diagnostics."""
        assert extract_measurements("\nA: 1\n\n\nB: 2\n") == {"A": 1.0, "B": 2.0}
        assert capsys.readouterr().err == ""

    def test_crlf_line_endings(self):
        """Test carriage returns are stripped with the value."""
        assert extract_measurements("A: 1\r\nB: 2\r\n") == {"A": 1.0, "B": 2.0}

    def test_line_without_colon_is_skipped(self, capsys):
        """Test a line without colon is reported and the rest still parsed."""
        measurements = extract_measurements("A: 1\nmalformed line no colon\nB: 2")

        assert measurements == {"A": 1.0, "B": 2.0}
        err = capsys.readouterr().err
        assert "doesn't contain a colon: malformed line no colon" in err

    def test_non_numeric_value_is_skipped(self, capsys):
        """Test a line with a non-numeric value is reported and skipped."""
        measurements = extract_measurements("A: fast\nB: 2")

        assert measurements == {"B": 2.0}
        err = capsys.readouterr().err
        assert "can't be parsed as a number: A: fast" in err

    def test_empty_value_is_skipped(self):
        """Test a trailing colon with no value is not a measurement."""
        assert extract_measurements("A:", on_skip=None) == {}

    def test_diagnostic_keeps_brackets_verbatim(self, capsys):
        """Test diagnostics print the raw line without markup processing."""
        extract_measurements("[bold]no colon here[/bold]")
        assert "[bold]no colon here[/bold]" in capsys.readouterr().err

    def test_diagnostic_keeps_tabs_and_control_characters(self, capsys):
        """Test diagnostics reproduce the skipped line exactly."""
        extract_measurements("a\tb\x1b[0m")
        err = capsys.readouterr().err
        assert err == (
            "Ignoring following measurement line because it doesn't contain a colon: "
            "a\tb\x1b[0m\n"
        )

    def test_on_skip_none_silences_diagnostics(self, capsys):
        """Test diagnostics can be disabled."""
        assert extract_measurements("garbage\nA: 1", on_skip=None) == {"A": 1.0}
        assert capsys.readouterr().err == ""


class TestMeasurementParser:
    """Test MeasurementParser bookkeeping."""

    def test_records_skipped_lines(self, collected_skips):
        """Test skipped lines are kept with their reason."""
        parser = MeasurementParser(on_skip=collected_skips.append)
        parser.parse("no colon\nA: x\nB: 1")

        assert [s.reason for s in parser.skipped] == [
            SkipReason.MISSING_COLON,
            SkipReason.INVALID_VALUE,
        ]
        assert [s.line for s in collected_skips] == ["no colon", "A: x"]

    def test_skipped_reset_between_parses(self):
        """Test each parse starts with a fresh skipped list."""
        parser = MeasurementParser(on_skip=None)
        parser.parse("bad line")
        parser.parse("A: 1")
        assert parser.skipped == []

    def test_whitespace_only_line_is_reported(self, collected_skips):
        """Test a whitespace-only line is not treated as empty."""
        parser = MeasurementParser(on_skip=collected_skips.append)
        assert parser.parse("   ") == {}
        assert collected_skips[0].reason == SkipReason.MISSING_COLON


class TestParseNumber:
    """Test measurement value parsing."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("42", 42.0),
            ("-2.5", -2.5),
            ("+3", 3.0),
            ("1e3", 1000.0),
            ("2.5E-2", 0.025),
            (".5", 0.5),
            ("7.", 7.0),
        ],
    )
    def test_valid_numbers(self, text, expected):
        assert parse_number(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "1_000", "1,000", "12ms", "0x10", "1 2"])
    def test_invalid_numbers(self, text):
        assert parse_number(text) is None

    def test_special_values(self):
        """Test inf and nan are accepted."""
        assert parse_number("inf") == math.inf
        assert parse_number("-Infinity") == -math.inf
        assert math.isnan(parse_number("nan"))
