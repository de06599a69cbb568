#!/usr/bin/env python3
"""
datez converter - time-zone lookup and conversion over the pytz database.
"""
from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Iterable, List, Tuple

import pytz

from .time_utils import format_time, parse_time


def parse_tz(zone: str) -> tzinfo:
    """Look up a tz database zone, raising ValueError for unknown names."""
    try:
        return pytz.timezone(zone)
    except pytz.UnknownTimeZoneError:
        raise ValueError(f"unknown time zone: {zone}") from None


def tz_ok(zone) -> str:
    """Validate a zone name and return it unchanged."""
    if not isinstance(zone, str) or not zone:
        raise ValueError(f"not a time zone name: {zone!r}")
    parse_tz(zone)
    return zone


def get_time(text: str, zone: str, tz: tzinfo) -> datetime:
    """
    Read a naive time string as wall-clock time in tz.

    Args:
        text: Naive date-time string
        zone: Name of tz, used in error messages
        tz: pytz zone the time is read in

    Returns:
        Aware datetime

    Raises:
        ValueError: if text does not parse, or the wall-clock time is
            ambiguous, does not exist in tz, or falls outside the
            representable range once its offset is applied
    """
    naive = parse_time(text)
    try:
        return tz.localize(naive, is_dst=None)
    except (pytz.AmbiguousTimeError, pytz.NonExistentTimeError, OverflowError):
        raise ValueError(f"could not convert {text} to {zone} timezone") from None


def to_timezone(dt: datetime, tz_name: str) -> datetime:
    """Converts a datetime object to a specific timezone."""
    tz = parse_tz(tz_name)
    try:
        return tz.normalize(dt.astimezone(tz))
    except OverflowError:
        raise ValueError(f"could not convert {format_time(dt)} to {tz_name} timezone") from None


def convert(dt: datetime, zones: Iterable[str]) -> List[Tuple[str, datetime]]:
    """Convert dt into UTC and each zone, in order, skipping repeated names."""
    seen = set()
    results = []
    for zone in ["UTC", *zones]:
        if zone in seen:
            continue
        seen.add(zone)
        results.append((zone, to_timezone(dt, zone)))
    return results
