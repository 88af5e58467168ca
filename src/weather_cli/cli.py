"""
Command-line interface for the application.

This module provides the main entry point for the ``weather`` CLI.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from datetime import date, datetime
from pathlib import Path

from weather_cli import __version__
from weather_cli.app import WeatherApp
from weather_cli.config import (
    DEFAULT_SETTINGS_PATH,
    Settings,
    api_key_lookup,
    get_settings,
    save_settings,
)
from weather_cli.errors import WeatherError
from weather_cli.log import setup_logging
from weather_cli.registry import build_registry
from weather_cli.renderers.report import build_report_text

logger = logging.getLogger(__name__)

# Tried in order after RFC 3339; first match wins
DATE_FORMATS = ("%Y-%m-%d %H:%M:%S", "%Y-%m-%d")


def parse_date(value: str) -> date:
    """
    Parse a ``--date`` argument into a calendar date.

    Accepted forms, first match wins:
      - RFC 3339 (``2025-12-03T14:15:00+01:00``), converted to the local date
      - ``YYYY-MM-DD HH:MM:SS``
      - ``YYYY-MM-DD``
    """
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        pass
    else:
        if parsed.tzinfo is not None:
            return parsed.astimezone().date()

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue

    raise argparse.ArgumentTypeError(f"Invalid datetime format: {value}")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather",
        description="Look up current or historical weather from configurable providers",
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
    parser.add_argument(
        "-c",
        "--config-path",
        type=Path,
        default=DEFAULT_SETTINGS_PATH,
        metavar="CONF_FILE",
        help=f"Settings file (default: {DEFAULT_SETTINGS_PATH})",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    configure_parser = subparsers.add_parser(
        "configure", help="Show providers or set the default provider"
    )
    configure_parser.add_argument(
        "provider",
        nargs="?",
        default=None,
        help="Provider to save as default (omit to list providers)",
    )

    get_parser = subparsers.add_parser("get", help="Get weather for an address")
    get_parser.add_argument("address", help="City, 'city,country' or 'lat,lon'")
    get_parser.add_argument(
        "--date",
        type=parse_date,
        default=None,
        help="Historical date (RFC 3339, 'YYYY-MM-DD HH:MM:SS' or 'YYYY-MM-DD')",
    )
    get_parser.add_argument(
        "-p",
        "--provider",
        default=None,
        help="Provider to use (default: default_provider from settings)",
    )

    subparsers.add_parser("providers", help="List configured providers")

    return parser


def build_app(settings: Settings) -> WeatherApp:
    """Build the registry from settings (with env key overrides) and wrap it."""
    registry = build_registry(settings, api_key_lookup(settings))
    return WeatherApp(registry)


def cmd_configure(args: argparse.Namespace) -> int:
    """Handle the 'configure' command."""
    settings = get_settings(args.config_path)
    app = build_app(settings)

    if args.provider is None:
        print(f"Default provider: {settings.default_provider}")
        print("Available providers:")
        for name in app.list_providers():
            print(f"  {name}")
        return 0

    name = args.provider.lower()
    if not app.provider_exists(name):
        print(f"Provider `{args.provider}` not supported", file=sys.stderr)
        return 1

    settings.default_provider = name
    path = save_settings(settings, args.config_path)
    print(f"Default provider saved to {path}")
    return 0


def cmd_get(args: argparse.Namespace) -> int:
    """Handle the 'get' command."""
    settings = get_settings(args.config_path)
    app = build_app(settings)
    provider = (args.provider or settings.default_provider).lower()

    record = asyncio.run(app.run(provider, args.address, args.date))
    print(build_report_text(record))
    return 0


def cmd_providers(args: argparse.Namespace) -> int:
    """Handle the 'providers' command."""
    settings = get_settings(args.config_path)
    app = build_app(settings)
    for name in app.list_providers():
        marker = "*" if name == settings.default_provider else " "
        print(f"{marker} {name}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()
    setup_logging(debug=args.debug)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "configure": cmd_configure,
        "get": cmd_get,
        "providers": cmd_providers,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except WeatherError as exc:
        logger.debug("Command %s failed", args.command, exc_info=exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
