"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import http.server
import logging
import sys
from datetime import date, timedelta
from functools import partial
from urllib.parse import urlparse

import requests

from weather_viewer import __version__
from weather_viewer.analysis.schedule import Frequency
from weather_viewer.config import get_settings
from weather_viewer.datasources.openweather.client import CURRENT_API
from weather_viewer.flows.build import build_site
from weather_viewer.flows.current import build_current

DEFAULT_RANGE_DAYS = 7
OPENWEATHER_HOST = urlparse(CURRENT_API).netloc


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-viewer",
        description="Current weather, forecasts and statistics charts for a city",
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
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    # 'current' command - print current conditions
    current_parser = subparsers.add_parser("current", help="Show current weather for a city")
    current_parser.add_argument("--city", type=str, default="", help="City name")

    # 'build' command - fetch data and build the tabbed page
    today = date.today()
    build_parser = subparsers.add_parser("build", help="Fetch data and build the chart page")
    build_parser.add_argument("--city", type=str, default="", help="City name")
    build_parser.add_argument(
        "--start",
        type=date.fromisoformat,
        default=today - timedelta(days=DEFAULT_RANGE_DAYS),
        help="First day, YYYY-MM-DD (default: a week ago)",
    )
    build_parser.add_argument(
        "--end",
        type=date.fromisoformat,
        default=today,
        help="Last day, YYYY-MM-DD (default: today)",
    )
    build_parser.add_argument(
        "--freq",
        choices=[f.value for f in Frequency],
        default=Frequency.HOURLY.value,
        help="Sampling frequency (default: 1h)",
    )

    # 'serve' command - serve built site locally
    serve_parser = subparsers.add_parser("serve", help="Serve site locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def request_error_message(exc: requests.RequestException) -> str:
    """User-facing message for a failed request: which service refused it."""
    response = exc.response
    if response is not None and urlparse(response.url).netloc == OPENWEATHER_HOST:
        return "City not found."
    return "Failed to fetch data."


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Site directory: {settings.site_dir}")
    return 0


def cmd_current(args: argparse.Namespace) -> int:
    """Handle the 'current' command."""
    city = args.city.strip()
    if not city:
        print("Error: Enter a city name!", file=sys.stderr)
        return 1

    try:
        result = build_current(city)
    except requests.RequestException:
        print("Error: City not found.", file=sys.stderr)
        return 1

    print(result["summary"])
    return 0


def cmd_build(args: argparse.Namespace) -> int:
    """Handle the 'build' command: fetch data and write the page."""
    city = args.city.strip()
    if not city:
        print("Error: Enter a city name!", file=sys.stderr)
        return 1

    try:
        result = build_site(city, args.start, args.end, args.freq)
    except requests.RequestException as e:
        print(f"Error: {request_error_message(e)}", file=sys.stderr)
        return 1

    print(f"Page written to {result['output']}")
    exit_code = 0
    if "current_error" in result:
        print("Error: City not found.", file=sys.stderr)
        exit_code = 1
    if "error" in result:
        print("Error: No data to display.", file=sys.stderr)
        exit_code = 1
    return exit_code


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built site locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = settings.site_dir

    if not site_dir.exists():
        print("No site directory found. Run 'weather-viewer build' first.", file=sys.stderr)
        return 1

    handler = partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.debug or get_settings().debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "current": cmd_current,
        "build": cmd_build,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
