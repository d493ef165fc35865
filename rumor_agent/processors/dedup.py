from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from ..models import RumorItem

TITLE_KEY_LENGTH = 120

DedupKey = Tuple[str, str, str]


def dedup_key(item: RumorItem, *, title_length: int = TITLE_KEY_LENGTH) -> DedupKey:
    """Composite identity of a rumor: (date, title prefix, url)."""
    return (item.date or "", (item.title or "")[:title_length], item.url or "")


@dataclass(slots=True)
class DedupStats:
    total: int
    kept: int
    duplicates: int
    reasons: dict[str, int]


@dataclass(slots=True)
class WindowPolicy:
    """Which slice of the ranked list is returned.

    ``skip_newest`` drops the single most recent item, which may still be
    being edited on the source site.
    """

    limit: int = 5
    skip_newest: bool = False


def remove_duplicates(
    items: Iterable[RumorItem],
    *,
    title_length: int = TITLE_KEY_LENGTH,
    return_stats: bool = False,
):
    """Drop items whose composite key was already seen; first occurrence wins.

    Returns a list of unique items by default. If ``return_stats`` is True,
    returns a tuple of (unique_items, DedupStats).
    """
    seen: set[DedupKey] = set()
    unique: List[RumorItem] = []
    reasons = defaultdict(int)
    total = 0
    for item in items:
        total += 1
        key = dedup_key(item, title_length=title_length)
        if key in seen:
            reasons["key"] += 1
            continue
        seen.add(key)
        unique.append(item)
    stats = DedupStats(total=total, kept=len(unique), duplicates=total - len(unique), reasons=dict(reasons))
    return (unique, stats) if return_stats else unique


def rank_newest_first(items: Iterable[RumorItem]) -> List[RumorItem]:
    """Sort by ISO date descending; undated items sink to the end, ties keep arrival order."""
    return sorted(items, key=lambda it: it.date or "", reverse=True)


def select_window(items: Sequence[RumorItem], policy: WindowPolicy) -> List[RumorItem]:
    start = 1 if policy.skip_newest else 0
    return list(items[start : start + max(0, policy.limit)])


def merge_rank_select(
    candidate_lists: Iterable[Iterable[RumorItem]],
    policy: WindowPolicy,
    *,
    return_stats: bool = False,
):
    """Merge candidate lists, dedupe, rank newest-first and cut the output window."""
    merged: List[RumorItem] = [item for items in candidate_lists for item in items]
    unique, stats = remove_duplicates(merged, return_stats=True)
    window = select_window(rank_newest_first(unique), policy)
    return (window, stats) if return_stats else window
