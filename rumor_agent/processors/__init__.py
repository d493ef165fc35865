"""Processing: text normalization, attribution, subject matching, dedup and ranking."""

from .normalize import (
    MONTHS,
    clean,
    clean_html_to_text,
    slugify,
    parse_timestamp_date,
    parse_human_date,
    format_pretty_date,
)
from .attribution import infer_source
from .teams import TEAM_ALIASES
from .matcher import Matcher, build_matcher, build_any_matcher
from .dedup import (
    DedupStats,
    WindowPolicy,
    dedup_key,
    remove_duplicates,
    rank_newest_first,
    select_window,
    merge_rank_select,
)

__all__ = [
    "MONTHS",
    "clean",
    "clean_html_to_text",
    "slugify",
    "parse_timestamp_date",
    "parse_human_date",
    "format_pretty_date",
    "infer_source",
    "TEAM_ALIASES",
    "Matcher",
    "build_matcher",
    "build_any_matcher",
    "DedupStats",
    "WindowPolicy",
    "dedup_key",
    "remove_duplicates",
    "rank_newest_first",
    "select_window",
    "merge_rank_select",
]
