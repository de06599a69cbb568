#!/usr/bin/env python3
"""
datez command line interface

Write the time in ISO 8601 / RFC 3339 format without a UTC offset, and list
as many tz database zone names as you want. The time is read in the first
zone, then printed in UTC, in every zone listed, and in the local zone when
it can be discovered.
"""
import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import CONFIG
from .converter import convert, get_time, parse_tz
from .localzone import localzone
from .time_utils import current_time, format_line

logger = logging.getLogger(__name__)

USAGE = "datez <datetime> <tz>..."


class UsageError(Exception):
    """Not enough arguments to know the time and its zone."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="datez",
        usage=USAGE,
        description="Convert a time without a UTC offset to UTC and other time zones",
    )
    parser.add_argument("time", nargs="?", help="Date-time, e.g. 2021-07-21.16:00:00")
    parser.add_argument("zones", nargs="*", metavar="tz", help="tz database zone names; the first is the input zone")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log local zone discovery")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(time: Optional[str], zones: List[str], local: Optional[str]) -> List[str]:
    """Resolve arguments and return the output lines."""
    zones = list(zones)
    if local is not None:
        zones.append(local)
    if not zones or (time is None and local is None):
        raise UsageError(f"usage: {USAGE}")

    for zone in zones:
        parse_tz(zone)
    if time is None:
        dt = current_time(parse_tz(local))
    else:
        dt = get_time(time, zones[0], parse_tz(zones[0]))
    return [format_line(converted, zone) for zone, converted in convert(dt, zones)]


def configure_logging(verbose: bool) -> None:
    name = "DEBUG" if verbose else CONFIG["LOG_LEVEL"]
    level = logging.getLevelName(name)
    known = isinstance(level, int)
    if not known:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s", stream=sys.stderr)
    if not known:
        logger.warning("Unknown log level %r, using WARNING", name)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)
    configure_logging(args.verbose)

    try:
        local = localzone()
    except (LookupError, ValueError) as e:
        logger.debug("No local time zone: %s", e)
        local = None

    try:
        lines = run(args.time, args.zones or [], local)
    except UsageError:
        parser.print_usage(sys.stderr)
        return 2
    except ValueError as e:
        print(f"datez: error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
