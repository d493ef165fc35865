"""Structured-field extraction from feeds, search/index pages and articles."""

from .rules import SelectorRule, first_match, first_element, parse_document
from .links import extract_links, normalize_url
from .blocks import DatedBlock, extract_dated_blocks, snippet_html
from .article import ArticleFields, parse_article

__all__ = [
    "SelectorRule",
    "first_match",
    "first_element",
    "parse_document",
    "extract_links",
    "normalize_url",
    "DatedBlock",
    "extract_dated_blocks",
    "snippet_html",
    "ArticleFields",
    "parse_article",
]
