from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from bs4 import Tag

from ..models.rumor import DEFAULT_SOURCE, PLACEHOLDER_TITLE, RumorItem
from ..processors.attribution import infer_source
from ..processors.normalize import clean, parse_timestamp_date
from .rules import SelectorRule, first_element, parse_document, rules

TITLE_RULES: Sequence[SelectorRule] = rules("h1.entry-title", "h1", "h2", "title")
CONTENT_RULES: Sequence[SelectorRule] = rules(
    ".entry-content",
    "article .content",
    "article",
    "main",
    "#content",
)


@dataclass(slots=True)
class ArticleFields:
    url: str
    title: str
    date: str
    snippet: str
    source: str
    body_text: str

    @property
    def match_text(self) -> str:
        return f"{self.title} {self.body_text}"

    def to_item(self) -> RumorItem:
        return RumorItem(
            title=self.title,
            url=self.url,
            date=self.date,
            source=self.source,
            snippet=self.snippet,
        )


def _published_date(soup) -> str:
    # machine-readable timestamps only; visible text is not trusted here
    for node in soup.select("time[datetime]"):
        iso = parse_timestamp_date(node.get("datetime"))
        if iso:
            return iso
    meta = soup.find("meta", attrs={"property": "article:published_time"})
    if meta and meta.get("content"):
        return parse_timestamp_date(meta["content"])
    return ""


def parse_article(markup: str, url: str, *, default_source: str = DEFAULT_SOURCE) -> ArticleFields:
    """Pull title, authoritative date, lead paragraph and body text from an article page."""
    soup = parse_document(markup)

    heading = first_element(soup, TITLE_RULES)
    title = clean(heading.get_text(" ")) if heading is not None else ""
    title = title or PLACEHOLDER_TITLE

    region = first_element(soup, CONTENT_RULES) or soup.body or soup
    lead: Optional[Tag] = None
    for p in region.find_all("p"):
        if clean(p.get_text(" ")):
            lead = p
            break

    snippet = clean(lead.get_text(" ")) if lead is not None else ""
    source = infer_source(str(lead), default_source) if lead is not None else default_source
    return ArticleFields(
        url=url,
        title=title,
        date=_published_date(soup),
        snippet=snippet or title,
        source=source,
        body_text=clean(region.get_text(" ")),
    )
