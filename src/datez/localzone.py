#!/usr/bin/env python3
"""
Local time-zone discovery.

On Unix the zone comes from the TZ environment variable, or from the target
of the /etc/localtime symlink. On Windows the system setting is read through
tzlocal, with TZ as the fallback.
"""
from __future__ import annotations

import logging
import os
import sys
from pathlib import PurePath
from typing import Mapping, Optional

from tzlocal import get_localzone_name

from .config import CONFIG
from .converter import tz_ok

logger = logging.getLogger(__name__)


def zone_from_link(target: str) -> str:
    """
    Canonicalize a localtime symlink target to a zone name.

    Everything after a "zoneinfo" directory is tried first
    ("/usr/share/zoneinfo/America/Argentina/Salta"), then the last two
    components ("../Europe/Paris"), then the last one alone ("UTC").
    """
    parts = PurePath(target).parts
    if "zoneinfo" in parts[:-1]:
        idx = len(parts) - 1 - parts[::-1].index("zoneinfo")
        try:
            return tz_ok("/".join(parts[idx + 1:]))
        except ValueError:
            pass
    if len(parts) >= 2:
        try:
            return tz_ok("/".join(parts[-2:]))
        except ValueError:
            pass
    if parts:
        return tz_ok(parts[-1])
    raise LookupError("could not find local timezone")


def _from_environ(environ: Mapping[str, str]) -> Optional[str]:
    zone = environ.get("TZ")
    if zone is None:
        return None
    # POSIX allows ":Area/Location"
    return tz_ok(zone[1:] if zone.startswith(":") else zone)


def _unix_localzone(environ: Mapping[str, str], localtime_path: str) -> str:
    zone = _from_environ(environ)
    if zone is not None:
        logger.debug("Local zone %s from TZ", zone)
        return zone
    try:
        target = os.readlink(localtime_path)
    except OSError as e:
        raise LookupError(f"could not read {localtime_path}: {e}") from e
    zone = zone_from_link(target)
    logger.debug("Local zone %s from %s -> %s", zone, localtime_path, target)
    return zone


def _windows_localzone(environ: Mapping[str, str]) -> str:
    try:
        zone = tz_ok(get_localzone_name())
        logger.debug("Local zone %s from the Windows registry", zone)
        return zone
    except (LookupError, OSError, ValueError) as e:
        logger.debug("Windows time zone lookup failed: %s", e)
    zone = _from_environ(environ)
    if zone is None:
        raise LookupError("bad TZ")
    logger.debug("Local zone %s from TZ", zone)
    return zone


def localzone(
    environ: Optional[Mapping[str, str]] = None,
    localtime_path: Optional[str] = None,
    platform: Optional[str] = None,
) -> str:
    """
    Return the name of the local time zone.

    Raises:
        LookupError: if no strategy finds a zone
        ValueError: if TZ is set to something that is not a zone name
    """
    if environ is None:
        environ = os.environ
    if localtime_path is None:
        localtime_path = CONFIG["LOCALTIME_PATH"]
    if platform is None:
        platform = sys.platform

    if platform.startswith("win"):
        return _windows_localzone(environ)
    return _unix_localzone(environ, localtime_path)
