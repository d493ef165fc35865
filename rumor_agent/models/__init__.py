"""Typed models used across the application."""

from .rumor import RumorItem, DEFAULT_SOURCE, PLACEHOLDER_TITLE
from .trace import DebugTrace
from .query import SubjectQuery, MatchMode
from .site import SiteConfig

__all__ = ["RumorItem", "DEFAULT_SOURCE", "PLACEHOLDER_TITLE", "DebugTrace", "SubjectQuery", "MatchMode", "SiteConfig"]
