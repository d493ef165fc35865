from __future__ import annotations

import re
from typing import Callable, Mapping, Optional, Sequence

from .teams import TEAM_ALIASES

Matcher = Callable[[str], bool]

_compact_re = re.compile(r"[^a-z0-9]+")


def _is_team_code(alias: str) -> bool:
    return len(alias) <= 3 and alias.isupper()


def team_key(subject: str) -> str:
    """Compact lookup key: ``"Trail Blazers"`` -> ``"trailblazers"``."""
    return _compact_re.sub("", (subject or "").lower())


def team_aliases_for(subject: str, aliases: Mapping[str, Sequence[str]] = TEAM_ALIASES) -> Sequence[str]:
    """Resolve the surface forms for a team subject.

    Tries the whole subject, then its last word (so "New York Knicks" finds
    "knicks"); an unknown team is its own only alias.
    """
    key = team_key(subject)
    if key in aliases:
        return aliases[key]
    words = (subject or "").split()
    if words:
        last = team_key(words[-1])
        if last in aliases:
            return aliases[last]
    return (subject.strip(),)


def build_matcher(
    subject: str,
    mode: Optional[str] = None,
    *,
    aliases: Optional[Mapping[str, Sequence[str]]] = None,
) -> Matcher:
    """Build a pure predicate telling whether a text mentions ``subject``.

    - ``team``: any alias from the table; short all-caps codes ("LAL") must
      appear as a whole word in capitals, longer forms as a case-insensitive
      substring
    - ``player``: any name part (or the last name alone) as a whole word
    - anything else: case-insensitive substring of the raw subject
    """
    subject = (subject or "").strip()
    if not subject:
        return lambda text: False

    if mode == "team":
        forms = [a for a in team_aliases_for(subject, aliases or TEAM_ALIASES) if a]
        codes = [re.escape(a) for a in forms if _is_team_code(a)]
        code_re = re.compile(r"\b(?:" + "|".join(codes) + r")\b") if codes else None
        needles = tuple(a.lower() for a in forms if not _is_team_code(a))

        def match_team(text: str) -> bool:
            text = text or ""
            if code_re is not None and code_re.search(text):
                return True
            hay = text.lower()
            return any(n in hay for n in needles)

        return match_team

    if mode == "player":
        parts = subject.split()
        alternatives = [re.escape(p) for p in parts + [parts[-1]]]
        pattern = re.compile(r"\b(?:" + "|".join(alternatives) + r")\b", re.IGNORECASE)
        return lambda text: bool(pattern.search(text or ""))

    needle = subject.lower()
    return lambda text: needle in (text or "").lower()


def build_any_matcher(
    subjects: Sequence[str],
    mode: Optional[str] = None,
    *,
    aliases: Optional[Mapping[str, Sequence[str]]] = None,
) -> Matcher:
    """Matcher accepting text that mentions any one of ``subjects``."""
    matchers = [build_matcher(s, mode, aliases=aliases) for s in subjects if s]
    if len(matchers) == 1:
        return matchers[0]
    return lambda text: any(m(text) for m in matchers)
