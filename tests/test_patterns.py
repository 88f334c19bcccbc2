"""Tests for the pattern library and the date parser."""

from datetime import date

import pytest

from statusvault.infrastructure.rules.date_parser import clean_line, parse_date_from_line
from statusvault.infrastructure.rules.patterns import (
    as_lines,
    date_near,
    find_first,
    line_after_label,
    value_after_label,
)


class TestAsLines:

    def test_string(self):
        assert as_lines("a\nb") == ["a", "b"]

    def test_sequence_is_flattened(self):
        assert as_lines(["a\nb", "", "c"]) == ["a", "b", "", "c"]

    @pytest.mark.parametrize("text", [None, 42, b"bytes", {"a": 1}])
    def test_non_text_is_empty(self, text):
        assert as_lines(text) == []


class TestFindFirst:

    def test_first_match(self):
        assert find_first("ids N0000000001 and N0000000002", r"N\d{10}") == "N0000000001"

    def test_no_match(self):
        assert find_first("nothing here", r"N\d{10}") is None

    def test_case_sensitive(self):
        assert find_first("n0000000001", r"N\d{10}") is None

    def test_bad_pattern(self):
        assert find_first("text", r"(") is None


class TestValueAfterLabel:

    def test_inline_value(self):
        assert value_after_label("Name: John Smith", "Name") == "John Smith"

    def test_next_line_value(self):
        assert value_after_label("Name:\nJohn Smith", "Name") == "John Smith"

    def test_inline_line_before_next_line_label(self):
        text = "Name: Jane Doe\nName:\nJohn Smith"
        assert value_after_label(text, "Name") == "Jane Doe"

    def test_earlier_next_line_value_wins(self):
        text = "Student Name\nJANE DOE\nSchool Name: State University"
        assert value_after_label(text, "Name") == "JANE DOE"

    def test_empty_label_line_falls_through(self):
        assert value_after_label("Name:\n\nName: Jane Doe", "Name") == "Jane Doe"

    def test_first_inline_wins(self):
        assert value_after_label("Name: A\nName: B", "Name") == "A"

    def test_label_is_case_insensitive(self):
        assert value_after_label("SURNAME: DOE", "Surname") == "DOE"

    def test_value_stops_at_second_colon(self):
        assert value_after_label("Time: 10:30", "Time") == "10"

    def test_label_on_last_line(self):
        assert value_after_label("Name:", "Name") is None

    def test_blank_next_line(self):
        assert value_after_label("Name\n   \nJohn", "Name") is None

    def test_missing_label(self):
        assert value_after_label("Surname: Doe", "Beneficiary") is None


class TestLineAfterLabel:

    def test_skips_blank_lines(self):
        assert line_after_label(["Name", "", "  JANE DOE  "], "name") == "JANE DOE"

    def test_only_first_label_line(self):
        assert line_after_label(["Name", "Name"], "name") == "Name"

    def test_nothing_below(self):
        assert line_after_label(["Name"], "name") is None


class TestDateNear:

    def test_same_line(self):
        assert date_near("Issue Date: 08/01/2024", "Issue Date") == date(2024, 8, 1)

    def test_next_line(self):
        assert date_near("Issue Date\n08/01/2024", "issue date") == date(2024, 8, 1)

    def test_only_first_label_line_is_used(self):
        text = "Issue Date\nunknown\nIssue Date: 08/01/2024"
        assert date_near(text, "Issue Date") is None

    def test_missing_label(self):
        assert date_near("08/01/2024", "Issue Date") is None


class TestParseDateFromLine:

    @pytest.mark.parametrize("line, expected", [
        ("Valid Until: 01/14/2027", date(2027, 1, 14)),
        ("01-14-2027", date(2027, 1, 14)),
        ("Expires 14/01/2027", date(2027, 1, 14)),
        ("Expires 14-01-2027", date(2027, 1, 14)),
        ("Jan 5, 2026", date(2026, 1, 5)),
        ("January 5, 2026", date(2026, 1, 5)),
        ("Date of issue 05 JAN 2026", date(2026, 1, 5)),
        ("5 January 2026", date(2026, 1, 5)),
        ("Notice Date 2026-01-05", date(2026, 1, 5)),
    ])
    def test_formats(self, line, expected):
        assert parse_date_from_line(line) == expected

    def test_numeric_dates_read_month_first(self):
        assert parse_date_from_line("03/04/2025") == date(2025, 3, 4)

    def test_noise_is_stripped(self):
        assert clean_line("Exp.* 01/14/2027!") == "Exp 01/14/2027"
        assert parse_date_from_line("Exp.* 01/14/2027!") == date(2027, 1, 14)

    def test_first_date_in_line(self):
        assert parse_date_from_line("04/01/2025 to 03/31/2028") == date(2025, 4, 1)

    @pytest.mark.parametrize("line", ["", "no date here", "13/45/2025", None, 20250101])
    def test_unparseable(self, line):
        assert parse_date_from_line(line) is None

    def test_reparses_own_output(self):
        parsed = parse_date_from_line("Card Expires: 01/14/2027")
        assert parse_date_from_line(parsed.strftime("%m/%d/%Y")) == parsed
        assert parse_date_from_line(parsed.isoformat()) == parsed
