"""Command-line entrypoint for the rumor agent.

Loads configuration, runs one rumor request and prints the JSON envelope
body to stdout.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from dotenv import load_dotenv

from .handler import handle_request
from .models import SiteConfig
from .pipeline import RumorPipeline
from .utils.config_loader import ConfigError, load_site_config
from .utils.logging import configure_logging, get_logger
from .utils.pipeline_config import PipelineConfig

_EXIT_CODES = {200: 0, 400: 2}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch the latest NBA rumors for a player or team")
    parser.add_argument(
        "--q",
        default="",
        help='Subject, or comma-separated subjects (e.g. "Jalen Brunson, New York Knicks")',
    )
    parser.add_argument(
        "--mode",
        choices=["player", "team"],
        default=None,
        help="How the subject is matched against article text",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Attach the diagnostic trace to the response",
    )
    parser.add_argument(
        "--config",
        default="config/site.yaml",
        help="Path to the site configuration file (YAML); built-in defaults when absent",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (defaults to LOG_LEVEL, then INFO)",
    )
    return parser.parse_args(argv)


def _load_site(config_path: Path) -> SiteConfig:
    logger = get_logger("rumors.agent")
    if not config_path.exists():
        logger.info("No site configuration at %s; using defaults", config_path)
        return SiteConfig()
    logger.info("Loading site configuration from %s", config_path)
    return load_site_config(config_path)


def main(argv: list[str] | None = None) -> int:
    load_dotenv(override=False)
    args = parse_args(argv)
    configure_logging(level=args.log_level)
    logger = get_logger("rumors.agent")

    try:
        site = _load_site(Path(args.config))
        # env values are parsed here; a malformed number raises ValueError
        config = PipelineConfig()
    except (ConfigError, ValueError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    pipeline = RumorPipeline(site=site, config=config)
    params = {"q": args.q, "mode": args.mode, "debug": "1" if args.debug else ""}
    response = handle_request(params, pipeline=pipeline)
    print(response.to_json())
    return _EXIT_CODES.get(response.status_code, 1)


if __name__ == "__main__":  # pragma: no cover - script entrypoint
    raise SystemExit(main())
