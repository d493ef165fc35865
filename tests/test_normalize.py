"""
Tests for text normalization helpers

Test coverage:
- Whitespace cleaning and HTML stripping
- Slug generation
- Timestamp and human date parsing
- Pretty date formatting
"""

import time
from datetime import datetime
from types import MappingProxyType

import pytest

from rumor_agent.processors.normalize import (
    clean,
    clean_html_to_text,
    format_pretty_date,
    parse_human_date,
    parse_timestamp_date,
    slugify,
)


# =============================================================================
# CLEAN
# =============================================================================

class TestClean:

    def test_collapses_whitespace_runs(self):
        assert clean("  Jalen \n\t Brunson   ") == "Jalen Brunson"

    def test_none_is_empty(self):
        assert clean(None) == ""

    def test_idempotent(self):
        once = clean(" a  b\n c ")
        assert clean(once) == once

    def test_html_to_text_strips_tags_and_entities(self):
        assert clean_html_to_text("<p>Knicks &amp; <b>Brunson</b></p>") == "Knicks & Brunson"


# =============================================================================
# SLUGIFY
# =============================================================================

class TestSlugify:

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Jalen Brunson", "jalen_brunson"),
            ("New York Knicks", "new_york_knicks"),
            ("76ers", "76ers"),
            ("Nikola Jokić", "nikola_jokic"),
            ("Luka Dončić", "luka_doncic"),
            ("  Shai Gilgeous-Alexander ", "shai_gilgeous_alexander"),
            ("Rock & Roll", "rock_and_roll"),
            ("--weird__input!!", "weird_input"),
        ],
    )
    def test_examples(self, raw, expected):
        assert slugify(raw) == expected

    @pytest.mark.parametrize("raw", ["Jalen Brunson", "Nikola Jokić", "A&B", "76ers", "", "__x__"])
    def test_idempotent(self, raw):
        assert slugify(slugify(raw)) == slugify(raw)

    def test_empty(self):
        assert slugify(None) == ""


# =============================================================================
# DATES
# =============================================================================

class TestParseHumanDate:

    def test_full_month_name(self):
        assert parse_human_date("October 15, 2025") == "2025-10-15"

    def test_embedded_in_text_and_zero_padded(self):
        assert parse_human_date("Updated March 3, 2024 at noon") == "2024-03-03"

    def test_abbreviated_month_with_period(self):
        assert parse_human_date("Oct. 9, 2025") == "2025-10-09"

    def test_unparseable_is_empty(self):
        assert parse_human_date("not a date at all") == ""

    def test_unknown_month_is_empty(self):
        assert parse_human_date("Smarch 12, 2025") == ""

    def test_impossible_day_is_empty(self):
        assert parse_human_date("February 30, 2025") == ""

    def test_none_is_empty(self):
        assert parse_human_date(None) == ""

    def test_skips_candidates_with_unknown_month(self):
        assert parse_human_date("Season 3, 2025 recap, posted October 15, 2025") == "2025-10-15"

    def test_skips_impossible_day_for_later_candidate(self):
        assert parse_human_date("February 30, 2025 (typo) fixed: March 1, 2025") == "2025-03-01"

    def test_month_table_is_injectable(self):
        months = MappingProxyType({"lokakuu": 10})
        assert parse_human_date("Lokakuu 15, 2025", months) == "2025-10-15"
        assert parse_human_date("October 15, 2025", months) == ""


class TestParseTimestampDate:

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2025-10-15T14:30:00-04:00", "2025-10-15"),
            ("Wed, 15 Oct 2025 14:00:00 +0000", "2025-10-15"),
            ("2025-10-15", "2025-10-15"),
        ],
    )
    def test_strings(self, value, expected):
        assert parse_timestamp_date(value) == expected

    def test_datetime_and_struct_time(self):
        assert parse_timestamp_date(datetime(2025, 1, 2, 3, 4)) == "2025-01-02"
        assert parse_timestamp_date(time.strptime("2025-02-03", "%Y-%m-%d")) == "2025-02-03"

    @pytest.mark.parametrize("value", ["", None, "garbage text", "99/99/9999"])
    def test_failures_are_empty(self, value):
        assert parse_timestamp_date(value) == ""


class TestFormatPrettyDate:

    def test_abbreviates_month(self):
        assert format_pretty_date("2025-10-05") == "Oct. 5, 2025"

    def test_may_has_no_period(self):
        assert format_pretty_date("2025-05-20") == "May 20, 2025"

    @pytest.mark.parametrize("value", ["", None, "2025-13-01", "October 5"])
    def test_invalid_is_empty(self, value):
        assert format_pretty_date(value) == ""
