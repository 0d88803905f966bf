#!/usr/bin/env python3
"""CLI entry point for the Google Analytics relay.

Usage:
    # Relay yesterday's data
    python scripts/run_relay.py

    # Use an explicit .env file and debug logging
    python scripts/run_relay.py --env-file config/.env -v
"""
import sys

from webstats_ga.cli import main


if __name__ == "__main__":
    sys.exit(main())
