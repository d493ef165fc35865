from __future__ import annotations

from typing import List, Sequence

from ..fetchers import Fetcher
from ..models import SiteConfig
from ..utils.pipeline_config import PipelineConfig
from .base import Strategy
from .feed import FeedStrategy
from .index_crawl import IndexCrawlStrategy
from .search import SearchStrategy
from .tag_crawl import TagCrawlStrategy


def create_strategy(name: str, fetcher: Fetcher, site: SiteConfig, config: PipelineConfig) -> Strategy:
    """Create a strategy by name.

    Supported values: "feed", "search", "index", "tag".
    """
    selected = name.strip().lower()
    if selected == "feed":
        return FeedStrategy(fetcher, site)
    if selected == "search":
        return SearchStrategy(fetcher, site)
    if selected == "index":
        return IndexCrawlStrategy(fetcher, site)
    if selected == "tag":
        return TagCrawlStrategy(fetcher, site, auth_pair=config.preview_auth)

    raise ValueError(f"Unsupported strategy '{name}'. Use 'feed', 'search', 'index' or 'tag'.")


def create_strategies(
    names: Sequence[str], fetcher: Fetcher, site: SiteConfig, config: PipelineConfig
) -> List[Strategy]:
    return [create_strategy(n, fetcher, site, config) for n in names]
