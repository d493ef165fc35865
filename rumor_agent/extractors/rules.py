"""Ordered CSS selector rules.

Template variations of the source site are tolerated by listing alternative
selectors in priority order; the first rule that matches anything wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from bs4 import BeautifulSoup, Tag


@dataclass(frozen=True, slots=True)
class SelectorRule:
    name: str
    selector: str

    def apply(self, root: Tag) -> List[Tag]:
        return root.select(self.selector)


def rules(*selectors: str) -> Tuple[SelectorRule, ...]:
    return tuple(SelectorRule(name=s, selector=s) for s in selectors)


def first_match(root: Tag, candidates: Sequence[SelectorRule]) -> Tuple[Optional[SelectorRule], List[Tag]]:
    """Return the first rule producing elements, with those elements; ``(None, [])`` if none do."""
    for rule in candidates:
        found = rule.apply(root)
        if found:
            return rule, found
    return None, []


def first_element(root: Tag, candidates: Sequence[SelectorRule]) -> Optional[Tag]:
    _, found = first_match(root, candidates)
    return found[0] if found else None


def parse_document(markup: str | bytes) -> BeautifulSoup:
    return BeautifulSoup(markup or "", "html.parser")
