#!/usr/bin/env python3
"""
Swimming Pool Usage Monitor - Main Entry Point

Scrapes the current Lazdynai swimming pool occupancy, stores it in the
database and reports it to a Telegram chat. Meant to be run on a schedule
(e.g. cron); each invocation performs exactly one check.

Usage:
    python main.py               # scrape, store and notify
    python main.py --no-notify   # scrape and store only
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

from config.settings import load_settings
from services.pool_monitor import run_once
from utils.exceptions import ConfigError
from utils.logging_config import LOG_LEVELS, configure_logging

logger = logging.getLogger(__name__)

def main(argv=None):
    parser = argparse.ArgumentParser(description="Swimming Pool Usage Monitor")
    parser.add_argument("--no-notify", dest="notify", action="store_false",
                        help="Store the reading without sending a Telegram message")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=None,
                        help="Logging level (defaults to LOG_LEVEL or INFO)")

    args = parser.parse_args(argv)

    load_dotenv()
    configure_logging(args.log_level)

    try:
        settings = load_settings(require_telegram=args.notify)
    except ConfigError as e:
        logger.critical(str(e))
        sys.exit(1)

    result = run_once(settings, notify=args.notify)
    if not result.ok:
        logger.warning(f"Run finished with {len(result.errors)} error(s)")
    return 0

if __name__ == "__main__":
    sys.exit(main())
