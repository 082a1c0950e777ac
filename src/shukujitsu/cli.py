#!/usr/bin/env python3
"""
Shukujitsu CLI

Command-line lookups against the Japanese national holiday calendar.

Usage:
    shukujitsu name 2024-01-01
    shukujitsu check 2024/09/16
    shukujitsu month 2024 9
    shukujitsu year 2024
    shukujitsu between 2024-04-27 2024-05-06 [--exclusive]
    shukujitsu rules
    shukujitsu serve --port 8000

Exit Codes:
    0   OK              - Command succeeded (for `name`: the date is a holiday)
    1   NOT_HOLIDAY     - `name`: the date is not a holiday
    10  INPUT_INVALID   - Invalid date, range or settings
    20  INTERNAL_ERROR  - Unexpected internal error
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from datetime import timedelta
from typing import Any, Optional

from . import __version__
from .calendars import (
    HOLIDAY_RULES,
    HolidayResult,
    holiday_name,
    holidays_between,
    holidays_in_month,
    holidays_in_year,
    is_non_working_day,
)
from .config import Settings, load_settings
from .dates import parse_date
from .exceptions import InvalidRangeError, ShukujitsuError
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


class ExitCode:
    """Deterministic exit codes for scripting."""
    OK = 0
    NOT_HOLIDAY = 1
    INPUT_INVALID = 10
    INTERNAL_ERROR = 20


class Colors:
    """ANSI color codes for terminal output."""
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    BOLD = '\033[1m'
    END = '\033[0m'

    @classmethod
    def disable(cls):
        cls.CYAN = ''
        cls.GREEN = ''
        cls.YELLOW = ''
        cls.RED = ''
        cls.BOLD = ''
        cls.END = ''


def print_error(text: str):
    print(f"{Colors.RED}[ERROR] {text}{Colors.END}", file=sys.stderr)


def print_json(data: Any):
    print(json.dumps(data, ensure_ascii=False, indent=2))


def print_holidays(holidays: list[HolidayResult], as_json: bool):
    if as_json:
        print_json([h.to_dict() for h in holidays])
        return
    for h in holidays:
        print(f"{Colors.CYAN}{h.date.isoformat()}{Colors.END}\t{h.name}")


# ============================================================================
# COMMANDS
# ============================================================================

def cmd_name(args, settings: Settings) -> int:
    """Print the holiday name of a date."""
    d = parse_date(args.date)
    name = holiday_name(d)
    if args.json:
        print_json({"date": d.isoformat(), "name": name})
    else:
        print(name if name is not None else "-")
    return ExitCode.OK if name is not None else ExitCode.NOT_HOLIDAY


def cmd_check(args, settings: Settings) -> int:
    """Classify a date as holiday / non-working / working."""
    d = parse_date(args.date)
    name = holiday_name(d)
    if name is not None:
        status = "holiday"
    elif is_non_working_day(d):
        status = "non-working"
    else:
        status = "working"

    if args.json:
        print_json({"date": d.isoformat(), "status": status, "name": name})
    elif name is not None:
        print(f"{Colors.GREEN}{status}{Colors.END}\t{name}")
    else:
        print(status)
    return ExitCode.OK


def cmd_month(args, settings: Settings) -> int:
    if not 1 <= args.month <= 12:
        raise InvalidRangeError(message="Month must be between 1 and 12", value=str(args.month))
    print_holidays(holidays_in_month(args.year, args.month), args.json)
    return ExitCode.OK


def cmd_year(args, settings: Settings) -> int:
    print_holidays(holidays_in_year(args.year), args.json)
    return ExitCode.OK


def cmd_between(args, settings: Settings) -> int:
    start = parse_date(args.start)
    end = parse_date(args.end)
    if start > end:
        raise InvalidRangeError(
            message="START must not be after END",
            details={"start": start.isoformat(), "end": end.isoformat()},
        )
    if end - start > timedelta(days=settings.max_range_days):
        raise InvalidRangeError(
            message=f"Range exceeds {settings.max_range_days} days",
            details={"max_range_days": settings.max_range_days},
        )
    print_holidays(holidays_between(start, end, inclusive=not args.exclusive), args.json)
    return ExitCode.OK


def cmd_rules(args, settings: Settings) -> int:
    """List the named holiday rules."""
    if args.json:
        print_json([{"key": rule.key, "name": rule.name} for rule in HOLIDAY_RULES])
        return ExitCode.OK
    print(f"{Colors.BOLD}Rules ({len(HOLIDAY_RULES)}):{Colors.END}")
    for rule in HOLIDAY_RULES:
        print(f"  {rule.key}: {rule.name}")
    return ExitCode.OK


def cmd_serve(args, settings: Settings) -> int:
    """Run the HTTP API."""
    from .api.main import run

    overrides = {}
    if args.host:
        overrides["host"] = args.host
    if args.port:
        overrides["port"] = args.port
    run(replace(settings, **overrides))
    return ExitCode.OK


# ============================================================================
# MAIN
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shukujitsu",
        description="Japanese national holiday (祝日) lookups",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit Codes:
  0   OK              Success / date is a holiday
  1   NOT_HOLIDAY     Date is not a holiday (name)
  10  INPUT_INVALID   Invalid date, range or settings
  20  INTERNAL_ERROR  Unexpected error

Examples:
  shukujitsu name 2019-05-01
  shukujitsu month 2024 9 --json
  shukujitsu between 2024-04-27 2024-05-06
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    parser.add_argument("--config", help="YAML settings file")

    # Global options are also accepted after the subcommand; SUPPRESS keeps
    # a subparser from resetting a value given before it
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", default=argparse.SUPPRESS,
                        help="Machine-readable JSON output")
    common.add_argument("--config", default=argparse.SUPPRESS, help="YAML settings file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    name_parser = subparsers.add_parser("name", parents=[common], help="Print the holiday name of a date")
    name_parser.add_argument("date", help="YYYY-MM-DD or YYYY/MM/DD")
    name_parser.set_defaults(func=cmd_name)

    check_parser = subparsers.add_parser("check", parents=[common], help="Holiday / non-working / working")
    check_parser.add_argument("date", help="YYYY-MM-DD or YYYY/MM/DD")
    check_parser.set_defaults(func=cmd_check)

    month_parser = subparsers.add_parser("month", parents=[common], help="List holidays of a month")
    month_parser.add_argument("year", type=int)
    month_parser.add_argument("month", type=int)
    month_parser.set_defaults(func=cmd_month)

    year_parser = subparsers.add_parser("year", parents=[common], help="List holidays of a year")
    year_parser.add_argument("year", type=int)
    year_parser.set_defaults(func=cmd_year)

    between_parser = subparsers.add_parser("between", parents=[common], help="List holidays between two dates")
    between_parser.add_argument("start", help="First date (included)")
    between_parser.add_argument("end", help="Last date (included unless --exclusive)")
    between_parser.add_argument("--exclusive", action="store_true", help="Exclude END")
    between_parser.set_defaults(func=cmd_between)

    rules_parser = subparsers.add_parser("rules", parents=[common], help="List named holiday rules")
    rules_parser.set_defaults(func=cmd_rules)

    serve_parser = subparsers.add_parser("serve", parents=[common], help="Run the HTTP API")
    serve_parser.add_argument("--host", help="Bind address")
    serve_parser.add_argument("--port", type=int, help="Port")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    if not sys.stdout.isatty():
        Colors.disable()

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return ExitCode.INPUT_INVALID

    try:
        settings = load_settings(args.config)
        configure_logging(settings, stream=sys.stderr)
        return args.func(args, settings)
    except ShukujitsuError as e:
        logger.debug(f"Command {args.command} rejected: {e}")
        print_error(str(e))
        return ExitCode.INPUT_INVALID
    except Exception as e:
        logger.exception(f"Command {args.command} failed")
        print_error(f"Unexpected error: {e}")
        return ExitCode.INTERNAL_ERROR


if __name__ == "__main__":
    sys.exit(main())
