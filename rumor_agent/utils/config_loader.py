from __future__ import annotations

from dataclasses import fields
from pathlib import Path
from typing import Any, Dict
from urllib.parse import urlparse

import yaml

from ..models import SiteConfig
from ..processors.teams import TEAM_ALIASES


class ConfigError(Exception):
    """Raised when the configuration file is invalid or missing required fields."""


URL_FIELDS = {"feed_url", "search_feed_url", "search_page_url", "index_url", "preview_origin"}
INT_FIELDS = {
    "index_pages",
    "tag_pages",
    "max_candidates",
    "index_max_candidates",
    "max_results",
    "tag_max_items",
}
STR_FIELDS = {"tag_path", "rumor_marker", "default_source"}
# per-subject templates and the placeholder each must carry
PLACEHOLDERS = {"search_feed_url": "{query}", "search_page_url": "{query}", "tag_path": "{slug}"}
KNOWN_FIELDS = {f.name for f in fields(SiteConfig)}


def _validate_url(key: str, value: Any) -> str:
    url_str = str(value).strip()
    # templates are checked with placeholder values filled in
    probe = url_str.replace("{query}", "q").replace("{slug}", "s")
    parsed = urlparse(probe)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"Invalid URL '{url_str}' for '{key}'. Must be absolute http(s) URL.")
    return url_str


def _validate_aliases(value: Any) -> Dict[str, tuple]:
    if not isinstance(value, dict):
        raise ConfigError("'team_aliases' must be a mapping of team keys to lists of strings")
    out: Dict[str, tuple] = {}
    for key, aliases in value.items():
        if not isinstance(aliases, list) or not all(isinstance(a, str) for a in aliases):
            raise ConfigError(f"'team_aliases.{key}' must be a list of strings")
        out[str(key).strip().lower()] = tuple(a.strip() for a in aliases if a.strip())
    return out


def _coerce_site(section: dict) -> SiteConfig:
    """Validate one ``site`` mapping and build a ``SiteConfig``.

    URL fields must be absolute http(s) URLs (``{query}``/``{slug}``
    placeholders allowed), caps must be positive integers and
    ``team_aliases`` entries extend or replace the built-in table.
    Templates must keep their ``{query}``/``{slug}`` placeholder and
    ``tag_path`` must start and end with a slash.
    """
    unknown = set(section) - KNOWN_FIELDS
    if unknown:
        raise ConfigError(f"Unknown site settings: {sorted(unknown)}")

    values: Dict[str, Any] = {}
    for key, raw in section.items():
        if raw is None:
            continue
        if key in URL_FIELDS:
            values[key] = _validate_url(key, raw)
        elif key in INT_FIELDS:
            if isinstance(raw, bool) or not isinstance(raw, int) or raw <= 0:
                raise ConfigError(f"'{key}' must be a positive integer, got {raw!r}")
            values[key] = raw
        elif key in STR_FIELDS:
            if not isinstance(raw, str) or not raw.strip():
                raise ConfigError(f"'{key}' must be a non-empty string")
            values[key] = raw.strip()
        elif key == "team_aliases":
            values[key] = {**TEAM_ALIASES, **_validate_aliases(raw)}

        placeholder = PLACEHOLDERS.get(key)
        if placeholder and placeholder not in values[key]:
            raise ConfigError(f"'{key}' must contain the {placeholder} placeholder")

    tag_path = values.get("tag_path")
    if tag_path is not None and not (tag_path.startswith("/") and tag_path.endswith("/")):
        raise ConfigError(f"'tag_path' must start and end with '/', got {tag_path!r}")
    return SiteConfig(**values)


def load_site_config(path: Path | str) -> SiteConfig:
    """Load ``site.yaml`` into a typed ``SiteConfig``.

    YAML structure:
      - Top-level mapping
      - Key ``site``: mapping of ``SiteConfig`` field names to values, e.g.
          - feed_url: http/https URL
          - search_feed_url / search_page_url: URL templates with ``{query}``
          - tag_path: path template with ``{slug}``
          - index_pages, tag_pages, max_candidates, max_results: positive ints
          - team_aliases: mapping[str, list[str]]

    Unknown top-level keys are ignored for forward compatibility.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Top level of the site configuration must be a mapping")
    section = data.get("site") or {}
    if not isinstance(section, dict):
        raise ConfigError("'site' must be a mapping in the YAML configuration")
    return _coerce_site(section)
