from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional

import feedparser

from ..processors.normalize import clean, parse_timestamp_date
from ..utils.logging import get_logger
from .http import Fetcher

logger = get_logger("rumors.fetchers.rss")


@dataclass(slots=True)
class FeedItem:
    title: str
    link: str
    published: str  # ISO date or ""
    description: str

    @property
    def text(self) -> str:
        return f"{self.title} {self.description}".strip()


def _published_date(entry) -> str:
    # feedparser may provide 'published_parsed' or 'updated_parsed'
    for key in ("published_parsed", "updated_parsed"):
        iso = parse_timestamp_date(entry.get(key))
        if iso:
            return iso
    return parse_timestamp_date(entry.get("published") or entry.get("updated") or "")


def parse_feed_items(body: str | bytes) -> List[FeedItem]:
    """Parse RSS/Atom entries; missing sub-fields become empty strings."""
    if isinstance(body, str):
        body = body.encode("utf-8")
    parsed = feedparser.parse(body)
    if getattr(parsed, "bozo", False):
        # feedparser sets bozo when it encounters a feed error but may still parse entries
        logger.debug("Feed 'bozo' flagged: %s", getattr(parsed, "bozo_exception", None))

    items: List[FeedItem] = []
    for entry in getattr(parsed, "entries", []) or []:
        items.append(
            FeedItem(
                title=clean(entry.get("title") or ""),
                link=(entry.get("link") or "").strip(),
                published=_published_date(entry),
                description=entry.get("summary") or entry.get("description") or "",
            )
        )
    return items


def fetch_feed_items(
    fetcher: Fetcher,
    url: str,
    *,
    headers: Optional[Mapping[str, str]] = None,
) -> List[FeedItem]:
    """Fetch a feed and parse its entries. Transport failures propagate as ``FetchError``."""
    logger.debug("Fetching feed from %s", url)
    result = fetcher.fetch_ok(url, headers)
    items = parse_feed_items(result.raw)
    logger.info("Fetched %d feed entries from %s", len(items), url)
    return items
