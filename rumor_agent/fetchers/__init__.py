"""Content fetching layer: HTTP transport and feed parsing."""

from .http import Fetcher, FetchError, FetchResult, HttpFetcher, basic_auth_header
from .rss import FeedItem, fetch_feed_items, parse_feed_items

__all__ = [
    "Fetcher",
    "FetchError",
    "FetchResult",
    "HttpFetcher",
    "basic_auth_header",
    "FeedItem",
    "fetch_feed_items",
    "parse_feed_items",
]
