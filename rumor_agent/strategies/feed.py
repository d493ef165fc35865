from __future__ import annotations

from functools import partial
from typing import List

from ..extractors.article import parse_article
from ..fetchers import fetch_feed_items
from ..models import DebugTrace, RumorItem, SubjectQuery
from ..processors.normalize import clean_html_to_text
from .base import Strategy
from .hydrate import hydrate_articles


class FeedStrategy(Strategy):
    """Category feed, pre-filtered on entry text, confirmed on the full article."""

    name = "feed"

    def collect(self, query: SubjectQuery, trace: DebugTrace) -> List[RumorItem]:
        entries = fetch_feed_items(self.fetcher, self.site.feed_url)
        trace.incr("feed_entries", len(entries))

        # cheap pre-filter; the hydrated body is matched again below
        candidates = [e.link for e in entries if e.link and query.matcher(clean_html_to_text(e.text))]
        trace.incr("prefiltered", len(candidates))

        return hydrate_articles(
            self.fetcher,
            candidates,
            query.matcher,
            trace=trace,
            max_candidates=self.site.max_candidates,
            max_results=self.site.max_results,
            parser=partial(parse_article, default_source=self.site.default_source),
        )
