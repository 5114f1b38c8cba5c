"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time

from citypage_weather import __version__
from citypage_weather.config import configure_logging, get_settings
from citypage_weather.datasources.envcanada import fetch_citypage
from citypage_weather.flows.poll import get_normalizer, poll_citypage

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="citypage-weather",
        description="Normalized current, daily and hourly weather from Environment Canada",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    # 'refresh' command - one poll, saved to the store
    subparsers.add_parser("refresh", help="Fetch, normalize and save the feed once")

    # 'show' command - print normalized records without saving
    subparsers.add_parser("show", help="Print normalized weather as JSON")

    # 'watch' command - poll on an interval
    watch_parser = subparsers.add_parser("watch", help="Poll the feed on an interval")
    watch_parser.add_argument(
        "--interval",
        type=int,
        default=None,
        help="Minutes between polls (default: poll_interval_minutes from settings)",
    )

    return parser


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Site: {settings.prov_code}/{settings.site_code}")
    print(f"Units: {settings.units}")
    print(f"Temperature units: {settings.temperature_units}")
    print(f"Wind units: {settings.wind_units}")
    print(f"Debug: {settings.debug}")
    return 0


def cmd_refresh(_args: argparse.Namespace) -> int:
    """Handle the 'refresh' command: one poll cycle."""
    result = poll_citypage()
    print("Done.")
    return 1 if result["errors"] else 0


def cmd_show(_args: argparse.Namespace) -> int:
    """Handle the 'show' command: fetch and print normalized records."""
    settings = get_settings()
    document = fetch_citypage(settings.prov_code, settings.site_code, base_url=settings.base_url)
    feed = get_normalizer().normalize(document)
    print(json.dumps(feed.model_dump(mode="json"), indent=2))
    return 0 if feed.ok else 1


def cmd_watch(args: argparse.Namespace) -> int:
    """Handle the 'watch' command: poll until interrupted, one cycle at a time."""
    settings = get_settings()
    interval = args.interval if args.interval is not None else settings.poll_interval_minutes
    print(f"Polling {settings.prov_code}/{settings.site_code} every {interval} min (Ctrl+C to stop)")
    try:
        while True:
            try:
                poll_citypage()
            except Exception:
                logger.exception("Poll failed, retrying next interval")
            time.sleep(interval * 60)
    except KeyboardInterrupt:
        print("\nStopped.")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    configure_logging(logging.DEBUG if args.debug else None)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "refresh": cmd_refresh,
        "show": cmd_show,
        "watch": cmd_watch,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
