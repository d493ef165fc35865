from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import List, Mapping, Sequence
from urllib.parse import urljoin

from bs4 import Tag

from ..models.rumor import DEFAULT_SOURCE
from ..processors.attribution import infer_source
from ..processors.normalize import MONTHS, clean, parse_human_date
from ..utils.logging import get_logger
from .rules import SelectorRule, first_element, parse_document, rules

logger = get_logger("rumors.extractors.blocks")

CONTAINER_RULES: Sequence[SelectorRule] = rules("main", "#content", ".content", ".container")
BLOCK_TAGS = frozenset({"p", "li"})
MIN_BLOCK_LENGTH = 15
MAX_BLOCKS_PER_PAGE = 80


@dataclass(slots=True)
class DatedBlock:
    text: str
    html: str
    date: str
    url: str
    source: str


def snippet_html(element: Tag) -> str:
    """Serialize ``element``'s content keeping only ``<a href>`` markup.

    Every other descendant is unwrapped to its text and anchors lose all
    attributes except ``href``. The element itself is not modified.
    """
    clone = copy.copy(element)
    for tag in clone.find_all(True):
        if tag.name == "a":
            href = tag.get("href")
            tag.attrs = {"href": href} if href else {}
        else:
            tag.unwrap()
    return clean(clone.decode_contents())


def _container(soup) -> Tag:
    return first_element(soup, CONTAINER_RULES) or soup.body or soup


def extract_dated_blocks(
    markup: str,
    *,
    base_url: str = "",
    min_length: int = MIN_BLOCK_LENGTH,
    max_blocks: int = MAX_BLOCKS_PER_PAGE,
    months: Mapping[str, int] = MONTHS,
    default_source: str = DEFAULT_SOURCE,
) -> List[DatedBlock]:
    """Extract rumor paragraphs from a date-sectioned tag index page.

    Elements are walked in document order. Any element whose text carries a
    ``Month DD, YYYY`` date moves the current-date cursor; ``p``/``li``
    elements seen while a date is set become rumor blocks. The last anchor in
    a block is the outlet credit and provides both source name and URL.
    """
    soup = parse_document(markup)
    container = _container(soup)

    out: List[DatedBlock] = []
    current_date = ""
    for el in container.find_all(True):
        text = clean(el.get_text(" "))

        iso = parse_human_date(text, months)
        if iso:
            current_date = iso
            continue

        if el.name not in BLOCK_TAGS or not current_date:
            continue
        if len(text) < min_length:
            continue

        anchors = el.find_all("a")
        last = anchors[-1] if anchors else None
        href = (last.get("href") or "").strip() if last is not None else ""
        url = urljoin(base_url, href) if href and base_url else href
        source = clean(last.get_text(" ")) if last is not None else ""

        out.append(
            DatedBlock(
                text=text,
                html=snippet_html(el),
                date=current_date,
                url=url,
                source=source or infer_source(str(el), default_source),
            )
        )
        if len(out) >= max_blocks:
            break

    logger.debug("Parsed %d dated blocks", len(out))
    return out
