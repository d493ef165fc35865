"""Acquisition strategies tried by the fallback orchestrator."""

from .base import Strategy
from .hydrate import hydrate_articles
from .feed import FeedStrategy
from .search import SearchStrategy
from .index_crawl import IndexCrawlStrategy
from .tag_crawl import TagCrawlStrategy
from .factory import create_strategy, create_strategies

__all__ = [
    "Strategy",
    "hydrate_articles",
    "FeedStrategy",
    "SearchStrategy",
    "IndexCrawlStrategy",
    "TagCrawlStrategy",
    "create_strategy",
    "create_strategies",
]
