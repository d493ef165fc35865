from __future__ import annotations

from enum import Enum
from typing import List, Sequence

from .models import DebugTrace, RumorItem, SubjectQuery
from .strategies import Strategy
from .utils.logging import get_logger

logger = get_logger("rumors.orchestrator")


class OrchestratorState(str, Enum):
    NOT_STARTED = "not_started"
    TRYING = "trying"
    DONE = "done"


class FallbackOrchestrator:
    """Try strategies in priority order and keep the first non-empty result.

    A strategy that fails or finds nothing hands over to the next one. Running
    out of strategies is a normal outcome and produces an empty list.
    """

    def __init__(self, strategies: Sequence[Strategy]) -> None:
        self.strategies = list(strategies)
        self.state = OrchestratorState.NOT_STARTED
        self.current_index = -1

    def run(self, query: SubjectQuery, trace: DebugTrace) -> List[RumorItem]:
        self.state = OrchestratorState.NOT_STARTED
        for index, strategy in enumerate(self.strategies):
            self.state = OrchestratorState.TRYING
            self.current_index = index
            logger.debug("Trying strategy %d/%d: %s", index + 1, len(self.strategies), strategy.name)

            scoped = DebugTrace()
            items = strategy.run(query, scoped)
            trace.merge(scoped, prefix=strategy.name)
            trace.record("strategies_tried", strategy.name)

            if items:
                self.state = OrchestratorState.DONE
                trace.note("strategy", strategy.name)
                return items

        self.state = OrchestratorState.DONE
        logger.info("No strategy produced rumors for %r", query.raw)
        return []
