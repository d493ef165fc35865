from __future__ import annotations

from typing import Dict, List

from ..extractors.blocks import extract_dated_blocks
from ..fetchers import Fetcher, FetchError, basic_auth_header
from ..models import DebugTrace, RumorItem, SiteConfig, SubjectQuery
from ..processors.dedup import dedup_key
from ..utils.logging import get_logger
from ..utils.pipeline_config import DEFAULT_PREVIEW_AUTH
from .base import Strategy

logger = get_logger("rumors.strategies.tag")


class TagCrawlStrategy(Strategy):
    """Crawl the per-subject tag stream on the password-protected preview site.

    Tag pages already carry the date sections, rumor text and outlet credit,
    so items are built straight from the index pages without hydration.
    """

    name = "tag"

    def __init__(self, fetcher: Fetcher, site: SiteConfig, *, auth_pair: str = DEFAULT_PREVIEW_AUTH) -> None:
        super().__init__(fetcher, site)
        self.headers: Dict[str, str] = {"Authorization": basic_auth_header(auth_pair)}

    def collect_tag(self, slug: str, trace: DebugTrace) -> List[RumorItem]:
        items: List[RumorItem] = []
        seen: set = set()
        trace.record("slugs", slug)

        for page in range(1, self.site.tag_pages + 1):
            url = self.site.tag_page(slug, page)
            try:
                markup = self.fetcher.fetch_text(url, self.headers)
            except FetchError as exc:
                # missing page means the stream has ended
                trace.note(f"page{page}_error_{slug}", exc)
                break

            blocks = extract_dated_blocks(markup, base_url=url, default_source=self.site.default_source)
            trace.incr("pages_scanned")
            trace.incr("parsed_blocks", len(blocks))
            for block in blocks:
                item = RumorItem(
                    title=block.text,
                    url=block.url,
                    date=block.date,
                    source=block.source,
                    snippet=block.text,
                    snippet_html=block.html,
                )
                key = dedup_key(item)
                if key in seen:
                    continue
                seen.add(key)
                items.append(item)

            if len(items) >= self.site.tag_max_items:
                break

        items = items[: self.site.tag_max_items]
        logger.debug("Tag %s yielded %d item(s)", slug, len(items))
        return items

    def collect(self, query: SubjectQuery, trace: DebugTrace) -> List[RumorItem]:
        items: List[RumorItem] = []
        for slug in query.slugs:
            if slug:
                items.extend(self.collect_tag(slug, trace))
        return items
