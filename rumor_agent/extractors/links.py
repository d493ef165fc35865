from __future__ import annotations

import re
from typing import Iterable, List, Sequence
from urllib.parse import urljoin, urlparse

from ..utils.logging import get_logger
from .rules import SelectorRule, first_match, parse_document, rules

logger = get_logger("rumors.extractors.links")

# Headline/card containers seen across search and index templates
LINK_SCOPES: Sequence[SelectorRule] = rules(
    "h2.entry-title a[href]",
    "h3.entry-title a[href]",
    "article h2 a[href]",
    "article h3 a[href]",
    ".search-results a[href]",
    "article a[href]",
)

DEFAULT_EXCLUDES: Sequence[re.Pattern[str]] = (
    re.compile(r"/page/\d+/?$"),
    re.compile(r"/tag/"),
)


def normalize_url(url: str) -> str:
    """Scheme-less, lower-cased host, no trailing slash; used only for comparisons."""
    parsed = urlparse((url or "").strip())
    path = parsed.path.rstrip("/")
    query = f"?{parsed.query}" if parsed.query else ""
    return f"{parsed.netloc.lower()}{path}{query}"


def extract_links(
    markup: str,
    base_url: str,
    *,
    marker: str = "/rumors/",
    exclude_url: str = "",
    exclude_patterns: Iterable[re.Pattern[str]] = DEFAULT_EXCLUDES,
    scopes: Sequence[SelectorRule] = LINK_SCOPES,
) -> List[str]:
    """Collect article links from a search or index page, in document order.

    Anchors come from the first scope rule that matches; when none does, every
    anchor on the page is considered. A link is kept when its path contains
    ``marker``, it is not the ``exclude_url`` landing page and it matches none
    of ``exclude_patterns``.
    """
    soup = parse_document(markup)
    rule, anchors = first_match(soup, scopes)
    if rule is None:
        anchors = soup.find_all("a", href=True)
    logger.debug("Link scope %s yielded %d anchors", rule.name if rule else "<all>", len(anchors))

    excluded = normalize_url(exclude_url) if exclude_url else ""
    patterns = list(exclude_patterns)
    seen: set[str] = set()
    links: List[str] = []
    for anchor in anchors:
        href = urljoin(base_url, (anchor.get("href") or "").strip())
        path = urlparse(href).path
        if marker and marker not in path:
            continue
        key = normalize_url(href)
        if excluded and key == excluded:
            continue
        if any(p.search(path) for p in patterns):
            continue
        if key in seen:
            continue
        seen.add(key)
        links.append(href)
    return links
