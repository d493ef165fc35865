from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List

from ..processors.dedup import WindowPolicy

DEFAULT_PREVIEW_AUTH = "preview:hhpreview"  # placeholder credentials, not for production


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes"}


@dataclass(slots=True)
class PipelineConfig:
    strategy_order_csv: str = field(default_factory=lambda: os.getenv("RUMORS_STRATEGY_ORDER", "feed,search,index,tag"))
    max_items: int = field(default_factory=lambda: int(os.getenv("RUMORS_MAX_ITEMS", "5")))
    skip_newest: bool = field(default_factory=lambda: _env_flag("RUMORS_SKIP_NEWEST", "0"))
    merge_max_items: int = field(default_factory=lambda: int(os.getenv("RUMORS_MERGE_MAX_ITEMS", "5")))
    merge_skip_newest: bool = field(default_factory=lambda: _env_flag("RUMORS_MERGE_SKIP_NEWEST", "1"))
    http_timeout: float = field(default_factory=lambda: float(os.getenv("RUMORS_HTTP_TIMEOUT", "20")))
    preview_auth: str = field(default_factory=lambda: os.getenv("PREVIEW_BASIC_AUTH") or DEFAULT_PREVIEW_AUTH)

    @property
    def strategy_order(self) -> List[str]:
        return [s.strip().lower() for s in self.strategy_order_csv.split(",") if s.strip()]

    @property
    def chain_window(self) -> WindowPolicy:
        return WindowPolicy(limit=self.max_items, skip_newest=self.skip_newest)

    @property
    def merge_window(self) -> WindowPolicy:
        return WindowPolicy(limit=self.merge_max_items, skip_newest=self.merge_skip_newest)
