"""CLI entry point for the relay.

Usage:
    # Relay yesterday's data (reads .env and the environment)
    webstats-ga-reporter

    # Same, with debug logging
    python -m webstats_ga -v
"""
import argparse
import asyncio
import logging
from typing import Optional, Sequence

from . import actions
from .config import load_settings
from .exceptions import ConfigError
from .relay import GoogleAnalyticsRelay


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one relay pass; return the process exit status."""
    parser = argparse.ArgumentParser(
        description="Relay yesterday's Google Analytics page metrics to Webstats"
    )
    parser.add_argument(
        "--env-file",
        type=str,
        default=None,
        help="Path to a .env file (defaults to searching from the working directory)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        settings = load_settings(args.env_file)
    except ConfigError as exc:
        actions.set_failed(str(exc))
        return 1

    result = asyncio.run(GoogleAnalyticsRelay(settings).run())
    return 0 if result.succeeded else 1
