from __future__ import annotations

import re

from ..models.rumor import DEFAULT_SOURCE
from .normalize import clean, clean_html_to_text

_WORD = r"[A-Z][\w.&'’-]*"
# "via ESPN", "via The Athletic's Shams Charania"; only "via" is case-insensitive
_via_re = re.compile(rf"\b(?i:via)\s+({_WORD}(?:\s+{_WORD})*)")
# "... - New York Post" at the very end
_dash_re = re.compile(rf"\s[-–—]\s*({_WORD}(?:\s+{_WORD})*)\s*$")


def infer_source(text: str | None, default: str = DEFAULT_SOURCE) -> str:
    """Guess the outlet credited in a rumor blurb.

    Accepts plain text or raw markup. Tries a ``via <Outlet>`` mention first,
    then a trailing dash attribution, then returns ``default``.
    """
    if not text:
        return default
    plain = clean_html_to_text(text) if "<" in text else clean(text)

    match = _via_re.search(plain)
    if match:
        return match.group(1).rstrip(".")

    match = _dash_re.search(plain)
    if match:
        return match.group(1).rstrip(".")

    return default
