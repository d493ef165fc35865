from __future__ import annotations

from functools import partial
from typing import List

from ..extractors.article import parse_article
from ..extractors.links import extract_links, normalize_url
from ..fetchers import FetchError
from ..models import DebugTrace, RumorItem, SubjectQuery
from ..utils.logging import get_logger
from .base import Strategy
from .hydrate import hydrate_articles

logger = get_logger("rumors.strategies.index")


class IndexCrawlStrategy(Strategy):
    """Walk the first few rumor index pages and filter after hydration.

    Index pages mix every team and player, so no subject filtering happens
    while links are collected.
    """

    name = "index"

    def _collect_links(self, trace: DebugTrace) -> List[str]:
        links: List[str] = []
        seen: set[str] = set()
        for page in range(1, self.site.index_pages + 1):
            url = self.site.index_page(page)
            try:
                markup = self.fetcher.fetch_text(url)
            except FetchError as exc:
                if page == 1:
                    raise
                logger.info("Index page %d unavailable: %s", page, exc)
                trace.note(f"page{page}_error", exc)
                break
            trace.incr("pages_scanned")
            for link in extract_links(
                markup,
                url,
                marker=self.site.rumor_marker,
                exclude_url=self.site.index_url,
            ):
                key = normalize_url(link)
                if key not in seen:
                    seen.add(key)
                    links.append(link)
        return links

    def collect(self, query: SubjectQuery, trace: DebugTrace) -> List[RumorItem]:
        links = self._collect_links(trace)
        trace.incr("index_links", len(links))
        return hydrate_articles(
            self.fetcher,
            links,
            query.matcher,
            trace=trace,
            max_candidates=self.site.index_max_candidates,
            max_results=self.site.max_results,
            parser=partial(parse_article, default_source=self.site.default_source),
        )
