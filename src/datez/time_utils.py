#!/usr/bin/env python3
"""
datez time utilities - naive time parsing and offset-qualified formatting.
"""
from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Tuple

TIME_FORMATS: Tuple[str, ...] = (
    "%Y-%m-%d.%H:%M:%S",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%Y%m%d%H%M%S",
    "%Y%m%d.%H%M%S",
    "%Y%m%dT%H%M%S",
    "%Y%m%d %H%M%S",
)

OUTPUT_FORMAT = "-%m-%d.%H:%M:%S%z"


def parse_time(text: str) -> datetime:
    """
    Parse a naive date-time, trying each of TIME_FORMATS in order.

    Args:
        text: Date-time without a UTC offset, e.g. "2021-07-21.16:00:00"

    Returns:
        Naive datetime

    Raises:
        ValueError: if no format matches
    """
    text = text.strip()
    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise ValueError("time must be in RFC 3339 / ISO 8601 format, without a UTC offset")


def format_time(dt: datetime) -> str:
    """Render an aware datetime with its numeric UTC offset."""
    # %Y is not zero-padded below year 1000 on glibc
    return f"{dt.year:04d}{dt.strftime(OUTPUT_FORMAT)}"


def format_line(dt: datetime, zone: str) -> str:
    return f"{format_time(dt)} ({zone})"


def current_time(tz: tzinfo) -> datetime:
    """Current time in tz, truncated to whole seconds."""
    return datetime.now(tz).replace(microsecond=0)
