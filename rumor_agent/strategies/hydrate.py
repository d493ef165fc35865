from __future__ import annotations

from typing import Callable, Iterable, List

from ..extractors.article import ArticleFields, parse_article
from ..fetchers import Fetcher, FetchError
from ..models import DebugTrace, RumorItem
from ..processors.matcher import Matcher
from ..utils.logging import get_logger

logger = get_logger("rumors.strategies.hydrate")

ArticleParser = Callable[[str, str], ArticleFields]


def hydrate_articles(
    fetcher: Fetcher,
    urls: Iterable[str],
    matcher: Matcher,
    *,
    trace: DebugTrace,
    max_candidates: int,
    max_results: int,
    parser: ArticleParser = parse_article,
) -> List[RumorItem]:
    """Fetch candidate articles one at a time and keep those about the subject.

    At most ``max_candidates`` URLs are examined. An article is accepted only
    when the matcher accepts its full text and it carries a machine-readable
    publish date. A failed fetch or parse skips that URL.
    """
    results: List[RumorItem] = []
    for examined, url in enumerate(urls):
        if examined >= max_candidates or len(results) >= max_results:
            break
        trace.incr("hydrated")
        try:
            markup = fetcher.fetch_text(url)
        except FetchError as exc:
            logger.warning("Skipping article %s: %s", url, exc)
            trace.incr("hydrate_errors")
            continue

        try:
            article = parser(markup, url)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Skipping unparseable article %s: %s", url, exc)
            trace.incr("hydrate_errors")
            continue

        if not matcher(article.match_text):
            trace.incr("rejected_no_match")
            continue
        if not article.date:
            trace.incr("rejected_no_date")
            continue
        trace.record("accepted_urls", url)
        results.append(article.to_item())
    return results
