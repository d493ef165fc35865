from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

DEFAULT_SOURCE = "HoopsHype"
PLACEHOLDER_TITLE = "Untitled rumor"


@dataclass(slots=True)
class RumorItem:
    title: str
    url: str
    date: str = ""  # YYYY-MM-DD or empty
    source: str = DEFAULT_SOURCE
    snippet: str = ""
    # Sanitized excerpt that keeps inline <a href> links only
    snippet_html: str = ""

    def __post_init__(self) -> None:
        if not (self.title or "").strip():
            self.title = PLACEHOLDER_TITLE
        if not (self.source or "").strip():
            self.source = DEFAULT_SOURCE

    def to_dict(self) -> Dict[str, Any]:
        from ..processors.normalize import format_pretty_date  # local import to avoid circular import

        payload: Dict[str, Any] = {
            "title": self.title,
            "url": self.url,
            "date": self.date,
            "date_pretty": format_pretty_date(self.date),
            "source": self.source,
            "snippet": self.snippet,
        }
        if self.snippet_html:
            payload["snippet_html"] = self.snippet_html
        return payload
