"""
Pytest Configuration and Fixtures

Provides a recording fake fetcher and builders for the feed, search, index,
tag and article documents the strategies consume. No test touches the network.
"""

from typing import Dict, List, Mapping, Optional, Tuple

import pytest

from rumor_agent.fetchers import Fetcher, FetchError, FetchResult
from rumor_agent.models import SiteConfig
from rumor_agent.utils.pipeline_config import PipelineConfig


# =============================================================================
# FAKE TRANSPORT
# =============================================================================

class FakeFetcher(Fetcher):
    """Serves canned bodies by URL and records every request.

    Unknown URLs answer 404. A route mapped to an exception instance raises it.
    """

    def __init__(self, routes: Optional[Dict[str, object]] = None) -> None:
        self.routes: Dict[str, object] = dict(routes or {})
        self.calls: List[Tuple[str, Dict[str, str]]] = []

    def add(self, url: str, body: object, status: int = 200) -> None:
        self.routes[url] = body if isinstance(body, Exception) else (status, body)

    def fetch(self, url: str, headers: Optional[Mapping[str, str]] = None) -> FetchResult:
        self.calls.append((url, dict(headers or {})))
        route = self.routes.get(url)
        if isinstance(route, Exception):
            raise route
        if route is None:
            return FetchResult(url=url, status=404, body="")
        if isinstance(route, tuple):
            status, body = route
        else:
            status, body = 200, route
        return FetchResult(url=url, status=status, body=str(body))

    @property
    def urls(self) -> List[str]:
        return [u for u, _ in self.calls]


# =============================================================================
# DOCUMENT BUILDERS
# =============================================================================

def make_feed(entries) -> str:
    """RSS 2.0 document; each entry is a dict with title/link/description/pub_date."""
    items = []
    for e in entries:
        parts = []
        if "title" in e:
            parts.append(f"<title>{e['title']}</title>")
        if "link" in e:
            parts.append(f"<link>{e['link']}</link>")
        if "pub_date" in e:
            parts.append(f"<pubDate>{e['pub_date']}</pubDate>")
        if "description" in e:
            parts.append(f"<description><![CDATA[{e['description']}]]></description>")
        items.append("<item>" + "".join(parts) + "</item>")
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0"><channel><title>HoopsHype Rumors</title>'
        '<link>https://hoopshype.com/rumors/</link>'
        + "".join(items)
        + "</channel></rss>"
    )


def make_article(title: str, paragraphs, published: Optional[str] = "2025-10-15T14:30:00-04:00") -> str:
    time_tag = f'<time class="published" datetime="{published}">Oct. 15</time>' if published else ""
    body = "".join(f"<p>{p}</p>" for p in paragraphs)
    return (
        f"<html><head><title>{title} | HoopsHype</title></head><body>"
        f'<nav><a href="/">HoopsHype</a></nav>'
        f'<article><h1 class="entry-title">{title}</h1>{time_tag}'
        f'<div class="entry-content">{body}</div></article>'
        f"</body></html>"
    )


def make_listing(hrefs) -> str:
    cards = "".join(
        f'<article><h2 class="entry-title"><a href="{h}">Story {i}</a></h2></article>'
        for i, h in enumerate(hrefs)
    )
    return f'<html><body><main>{cards}</main><nav><a href="/rumors/page/2/">Next</a></nav></body></html>'


def make_tag_page(sections) -> str:
    """Tag index page; ``sections`` is a list of (date heading, [paragraph html]) pairs."""
    chunks = []
    for heading, paragraphs in sections:
        chunks.append(f"<h2>{heading}</h2>")
        chunks.extend(f"<p>{p}</p>" for p in paragraphs)
    return (
        '<html><body><header><a href="/">HoopsHype</a> Rumors archive</header>'
        "<main>" + "".join(chunks) + "</main></body></html>"
    )


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def site():
    return SiteConfig()


@pytest.fixture
def config():
    """Deterministic runtime settings, independent of the environment."""
    return PipelineConfig(
        strategy_order_csv="feed,search,index,tag",
        max_items=5,
        skip_newest=False,
        merge_max_items=5,
        merge_skip_newest=True,
        http_timeout=5,
        preview_auth="preview:hhpreview",
    )


@pytest.fixture
def transport_error():
    return FetchError("connection reset", url="https://hoopshype.com/")
