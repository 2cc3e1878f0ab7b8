#!/usr/bin/env python3
"""
utilkit – command line demo of the utilities.

**Usage**:
    From project root:
    ```bash
    python main.py add 2 3
    python main.py multiply 4 5
    python main.py greet Alice --locale fr
    python main.py filter-even 1 2 3 4 5 6
    python main.py fetch 100
    ```

Prints the result on stdout. Exits with status 2 and prints the error on
stderr when a utility rejects its input; invalid options or UTILKIT_*
environment values are reported as usage errors with the same status.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from utilkit.config.settings import get_settings
from utilkit.fetch.simulated import SimulatedFetcher, fetch_data
from utilkit.utils.arithmetic import add, multiply
from utilkit.utils.errors import UtilityError
from utilkit.utils.logging import configure_logging
from utilkit.utils.messages import SUPPORTED_LOCALES
from utilkit.utils.sequences import filter_even
from utilkit.utils.text import greet

logger = logging.getLogger("utilkit.cli")


def _number(text: str):
    """Parse "3" as int and "2.5" as float; anything else stays text."""
    for cast in (int, float):
        try:
            return cast(text)
        except ValueError:
            continue
    return text


def _add_common_options(parser: argparse.ArgumentParser, default) -> None:
    parser.add_argument(
        "--locale",
        choices=SUPPORTED_LOCALES,
        default=default,
        help="Message locale. Default: UTILKIT_LOCALE or 'en'.",
    )
    parser.add_argument(
        "--log-level",
        default=default,
        help="Console log level (e.g. DEBUG). Default: UTILKIT_LOG_LEVEL or WARNING.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run one of the utilkit utilities and print the result.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    _add_common_options(parser, default=None)

    # Same options after the subcommand; SUPPRESS keeps values given before it
    common = argparse.ArgumentParser(add_help=False)
    _add_common_options(common, default=argparse.SUPPRESS)

    commands = parser.add_subparsers(dest="command", required=True)

    for name in ("add", "multiply"):
        sub = commands.add_parser(name, parents=[common], help=f"{name} two numbers")
        sub.add_argument("a", type=_number)
        sub.add_argument("b", type=_number)

    sub = commands.add_parser("greet", parents=[common], help="greet someone")
    sub.add_argument("name", nargs="?", default=None)

    sub = commands.add_parser("filter-even", parents=[common], help="keep the even numbers")
    sub.add_argument("values", nargs="*", type=_number)

    sub = commands.add_parser("fetch", parents=[common], help="run the simulated delayed fetch")
    sub.add_argument(
        "delay_ms",
        nargs="?",
        type=_number,
        default=None,
        help="Delay in milliseconds. Default: UTILKIT_DEFAULT_DELAY_MS or 100.",
    )

    return parser


def run(args: argparse.Namespace):
    """Dispatch parsed arguments to the matching utility and return its result."""
    if args.command == "add":
        return add(args.a, args.b)
    if args.command == "multiply":
        return multiply(args.a, args.b, locale=args.locale)
    if args.command == "greet":
        return greet(args.name, locale=args.locale)
    if args.command == "filter-even":
        return filter_even(args.values, locale=args.locale)
    if args.command == "fetch":
        delay_ms = args.delay_ms
        if delay_ms is None:
            delay_ms = get_settings().utility.default_delay_ms
        fetcher = SimulatedFetcher(locale=args.locale)
        return asyncio.run(fetch_data(delay_ms, fetcher=fetcher))
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entrypoint.

    Returns:
        Process exit status (0 on success, 2 on a rejected input).

    Raises:
        SystemExit: With status 2 for invalid options or UTILKIT_* values.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # Bad --log-level or UTILKIT_* values are usage errors (exit status 2)
    try:
        configure_logging(args.log_level)
        get_settings()
    except ValueError as e:
        parser.error(str(e))

    try:
        result = run(args)
    except UtilityError as e:
        logger.debug("%s failed: %s", args.command, e, exc_info=True)
        print(f"ERROR ({e.kind}): {e}", file=sys.stderr)
        return 2

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
