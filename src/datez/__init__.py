"""
datez - convert a time without a UTC offset to UTC and other time zones.
"""

from __future__ import annotations

__all__ = [
    "parse_time",
    "format_time",
    "parse_tz",
    "tz_ok",
    "get_time",
    "to_timezone",
    "convert",
    "localzone",
]

__author__ = "datez developers"
__version__ = "1.0.0"

from .converter import convert, get_time, parse_tz, to_timezone, tz_ok
from .localzone import localzone
from .time_utils import format_time, parse_time
