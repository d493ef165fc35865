from __future__ import annotations

from typing import List, Optional

from ..fetchers import Fetcher, HttpFetcher
from ..models import DebugTrace, RumorItem, SiteConfig, SubjectQuery
from ..orchestrator import FallbackOrchestrator
from ..processors.dedup import merge_rank_select
from ..strategies import TagCrawlStrategy, create_strategies
from ..utils.logging import get_logger
from ..utils.pipeline_config import PipelineConfig

logger = get_logger("rumors.pipeline")


class RumorPipeline:
    """Turn a subject query into the final, windowed rumor list.

    A single subject goes through the fallback chain of strategies. A
    comma-separated list of subjects is served from the tag streams only:
    every subject's tag items are concatenated before dedup and ranking.
    """

    def __init__(
        self,
        *,
        fetcher: Optional[Fetcher] = None,
        site: Optional[SiteConfig] = None,
        config: Optional[PipelineConfig] = None,
    ) -> None:
        self.config = config or PipelineConfig()
        self.site = site or SiteConfig()
        self.fetcher = fetcher or HttpFetcher(timeout=self.config.http_timeout)

    def parse_query(self, raw: str, mode: Optional[str] = None) -> SubjectQuery:
        return SubjectQuery.from_raw(raw, mode, aliases=self.site.team_aliases)

    def run(self, query: SubjectQuery, trace: DebugTrace) -> List[RumorItem]:
        trace.record("subjects", *query.subjects)
        if query.is_multi:
            candidate_lists = self._collect_tags(query, trace)
            policy = self.config.merge_window
        else:
            orchestrator = FallbackOrchestrator(
                create_strategies(self.config.strategy_order, self.fetcher, self.site, self.config)
            )
            candidate_lists = [orchestrator.run(query, trace)]
            policy = self.config.chain_window

        window, stats = merge_rank_select(candidate_lists, policy, return_stats=True)
        trace.incr("total_merged", stats.total)
        trace.incr("total_after_dedup", stats.kept)
        trace.incr("returning", len(window))
        logger.info(
            "Rumors for %r: merged=%d, unique=%d, returning=%d",
            query.raw,
            stats.total,
            stats.kept,
            len(window),
        )
        return window

    def _collect_tags(self, query: SubjectQuery, trace: DebugTrace) -> List[List[RumorItem]]:
        strategy = TagCrawlStrategy(self.fetcher, self.site, auth_pair=self.config.preview_auth)
        lists: List[List[RumorItem]] = []
        for subject in query.subjects:
            single = SubjectQuery.from_raw(subject, query.mode, aliases=self.site.team_aliases)
            scoped = DebugTrace()
            lists.append(strategy.run(single, scoped))
            trace.merge(scoped, prefix=strategy.name)
        return lists
