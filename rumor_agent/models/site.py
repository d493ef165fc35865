from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Sequence

from ..processors.teams import TEAM_ALIASES
from .rumor import DEFAULT_SOURCE


@dataclass(slots=True)
class SiteConfig:
    """Endpoints and crawl caps for the rumor source site (HoopsHype)."""

    feed_url: str = "https://hoopshype.com/rumors/feed/"
    # {query} is replaced by the URL-encoded subject
    search_feed_url: str = "https://hoopshype.com/?s={query}&feed=rss2"
    search_page_url: str = "https://hoopshype.com/?s={query}"
    index_url: str = "https://hoopshype.com/rumors/"
    preview_origin: str = "http://preview.hoopshype.com"
    # {slug} is replaced by the subject slug
    tag_path: str = "/rumors/tag/{slug}/"
    rumor_marker: str = "/rumors/"
    index_pages: int = 3
    tag_pages: int = 10
    max_candidates: int = 12
    index_max_candidates: int = 30
    max_results: int = 5
    tag_max_items: int = 150
    default_source: str = DEFAULT_SOURCE
    team_aliases: Mapping[str, Sequence[str]] = field(default_factory=lambda: TEAM_ALIASES)

    def search_feed(self, query: str) -> str:
        return self.search_feed_url.format(query=query)

    def search_page(self, query: str) -> str:
        return self.search_page_url.format(query=query)

    def index_page(self, page: int) -> str:
        base = self.index_url if self.index_url.endswith("/") else self.index_url + "/"
        return base if page <= 1 else f"{base}page/{page}/"

    def tag_page(self, slug: str, page: int) -> str:
        base = self.preview_origin.rstrip("/") + self.tag_path.format(slug=slug)
        return base if page <= 1 else f"{base}page/{page}/"
