from __future__ import annotations

import html
import re
import time
import unicodedata
from datetime import date, datetime
from types import MappingProxyType
from typing import Mapping

from bs4 import BeautifulSoup
from dateutil import parser as date_parser

from ..utils.logging import get_logger

_whitespace_re = re.compile(r"\s+")
_non_slug_re = re.compile(r"[^a-z0-9]+")
# "October 15, 2025", "Oct. 15, 2025", "Sept 3, 2024"
_human_date_re = re.compile(r"([A-Za-z]+)\.?\s+(\d{1,2}),\s+(\d{4})")

_logger = get_logger("rumors.processors.normalize")

MONTHS: Mapping[str, int] = MappingProxyType(
    {
        "january": 1, "february": 2, "march": 3, "april": 4,
        "may": 5, "june": 6, "july": 7, "august": 8,
        "september": 9, "october": 10, "november": 11, "december": 12,
        "jan": 1, "feb": 2, "mar": 3, "apr": 4, "jun": 6, "jul": 7,
        "aug": 8, "sep": 9, "sept": 9, "oct": 10, "nov": 11, "dec": 12,
    }
)

_PRETTY_MONTHS = ("Jan.", "Feb.", "Mar.", "Apr.", "May", "Jun.", "Jul.", "Aug.", "Sep.", "Oct.", "Nov.", "Dec.")


def clean(text: str | None) -> str:
    """Collapse whitespace runs to a single space and trim."""
    if not text:
        return ""
    return _whitespace_re.sub(" ", text).strip()


def clean_html_to_text(raw_html: str | None) -> str:
    """Clean HTML to normalized plain text.

    - Strip tags
    - Unescape HTML entities
    - Collapse whitespace
    """
    if not raw_html:
        return ""

    soup = BeautifulSoup(raw_html, "html.parser")
    text = soup.get_text(" ")
    text = html.unescape(text)
    return clean(text)


def slugify(text: str | None) -> str:
    """Build the tag slug used by the source site, e.g. ``jalen_brunson``.

    Diacritics are dropped, ``&`` becomes ``and`` and every run of other
    characters collapses into one underscore.
    """
    value = unicodedata.normalize("NFD", clean(text))
    value = "".join(ch for ch in value if not unicodedata.combining(ch))
    value = value.lower().replace("&", " and ")
    return _non_slug_re.sub("_", value).strip("_")


def parse_timestamp_date(value: str | datetime | date | time.struct_time | None) -> str:
    """Return the ISO calendar date of a timestamp, or "" when it cannot be parsed."""
    if value is None or value == "":
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, time.struct_time):
        try:
            return date(value.tm_year, value.tm_mon, value.tm_mday).isoformat()
        except ValueError:
            return ""
    try:
        return date_parser.parse(str(value).strip()).date().isoformat()
    except (ValueError, OverflowError, TypeError) as exc:
        _logger.debug("Unparseable timestamp %r: %s", value, exc)
        return ""


def parse_human_date(text: str | None, months: Mapping[str, int] = MONTHS) -> str:
    """Find a ``Month DD, YYYY`` date anywhere in ``text`` and return it as ISO.

    The first candidate with a known month name and a real calendar day wins;
    "" when there is none.
    """
    for match in _human_date_re.finditer(text or ""):
        month = months.get(match.group(1).lower())
        if not month:
            continue
        try:
            return date(int(match.group(3)), month, int(match.group(2))).isoformat()
        except ValueError:
            continue
    return ""


def format_pretty_date(iso: str | None) -> str:
    """``2025-10-15`` -> ``Oct. 15, 2025``."""
    match = re.fullmatch(r"(\d{4})-(\d{2})-(\d{2})", iso or "")
    if not match:
        return ""
    month = int(match.group(2))
    if not 1 <= month <= 12:
        return ""
    return f"{_PRETTY_MONTHS[month - 1]} {int(match.group(3))}, {match.group(1)}"
