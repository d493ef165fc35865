from __future__ import annotations

from functools import partial
from typing import List
from urllib.parse import quote_plus

from ..extractors.article import parse_article
from ..extractors.links import extract_links
from ..fetchers import FetchError, fetch_feed_items
from ..models import DebugTrace, RumorItem, SubjectQuery
from ..utils.logging import get_logger
from .base import Strategy
from .hydrate import hydrate_articles

logger = get_logger("rumors.strategies.search")


class SearchStrategy(Strategy):
    """Site search: the feed form first, the rendered results page when that is empty."""

    name = "search"

    def _feed_links(self, encoded: str, trace: DebugTrace) -> List[str]:
        url = self.site.search_feed(encoded)
        try:
            entries = fetch_feed_items(self.fetcher, url)
        except FetchError as exc:
            logger.info("Search feed unavailable (%s); trying results page", exc)
            trace.note("feed_error", exc)
            return []
        return [e.link for e in entries if e.link]

    def _page_links(self, encoded: str, trace: DebugTrace) -> List[str]:
        url = self.site.search_page(encoded)
        markup = self.fetcher.fetch_text(url)
        return extract_links(
            markup,
            url,
            marker=self.site.rumor_marker,
            exclude_url=self.site.index_url,
        )

    def collect(self, query: SubjectQuery, trace: DebugTrace) -> List[RumorItem]:
        encoded = quote_plus(query.primary)
        links = self._feed_links(encoded, trace)
        trace.incr("feed_links", len(links))
        if not links:
            links = self._page_links(encoded, trace)
            trace.incr("page_links", len(links))

        return hydrate_articles(
            self.fetcher,
            links,
            query.matcher,
            trace=trace,
            max_candidates=self.site.max_candidates,
            max_results=self.site.max_results,
            parser=partial(parse_article, default_source=self.site.default_source),
        )
