from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from ..fetchers import Fetcher, FetchError
from ..models import DebugTrace, RumorItem, SiteConfig, SubjectQuery
from ..utils.logging import get_logger

logger = get_logger("rumors.strategies")


class Strategy(ABC):
    """One independent way of acquiring rumor items for a subject."""

    name: str = "strategy"

    def __init__(self, fetcher: Fetcher, site: SiteConfig) -> None:
        self.fetcher = fetcher
        self.site = site

    @abstractmethod
    def collect(self, query: SubjectQuery, trace: DebugTrace) -> List[RumorItem]:
        """Return hydrated items for ``query``; may raise."""

    def run(self, query: SubjectQuery, trace: DebugTrace) -> List[RumorItem]:
        """Run ``collect`` and contain its failures; a failed strategy yields no items."""
        try:
            items = self.collect(query, trace)
        except FetchError as exc:
            logger.warning("Strategy %s: primary request failed: %s", self.name, exc)
            trace.note("error", exc)
            return []
        except Exception as exc:  # noqa: BLE001 - a broken strategy must not fail the request
            logger.exception("Strategy %s failed: %s", self.name, exc)
            trace.note("error", exc)
            return []
        trace.incr("returned", len(items))
        logger.info("Strategy %s returned %d item(s) for %r", self.name, len(items), query.raw)
        return items
