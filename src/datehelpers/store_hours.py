"""Store opening-hours check.

`is_store_opened()` compares hours only. Minutes in the opening and closing
times are parsed (so malformed input is rejected) but play no part in the
decision: a store open "09h30"-"17h45" counts as open from 09:00 to 16:59.

Ranges whose closing hour is not after the opening hour cross midnight: the
closing hour is pushed by 24. The current hour is not shifted, so for
"22h00"-"02h00" the store is open from 22:00 to 23:59 and reported closed
between midnight and 02:00.

The optional target zone is applied as a fixed offset shift of "now" (the
difference between the two zones' UTC offsets at that instant), not as a
full zoned recalculation.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, tzinfo
from enum import Enum

from .global_config import DEFAULT_TIMEZONE
from .patterns import ENGLISH_TIME_PATTERN, FRENCH_TIME_PATTERN, DatePattern
from .utils.time import ZoneLike, find_zone, resolve_zone, to_zone, utc_now

logger = logging.getLogger(__name__)


class TimeFormatConvention(str, Enum):
    """How opening and closing times are written."""

    ENGLISH = "english"  # "09:00 AM"
    FRENCH = "french"  # "09h00"

    @property
    def pattern(self) -> DatePattern:
        return FRENCH_TIME_PATTERN if self is TimeFormatConvention.FRENCH else ENGLISH_TIME_PATTERN


def _utc_offset(zone: tzinfo, at: datetime) -> timedelta:
    return at.astimezone(zone).utcoffset() or timedelta(0)


def shift_to_timezone(dt: datetime, source: ZoneLike, destination: ZoneLike) -> datetime:
    """Shift dt's wall clock from source to destination by their offset difference.

    Both offsets are evaluated at dt. The result keeps source's tzinfo, so
    its fields read as the wall time in destination.

    Args:
        dt: Aware datetime.
        source: Zone dt is expressed in.
        destination: Zone whose wall time is wanted.

    Returns:
        dt expressed in source, moved by (destination offset - source offset).
    """
    source_zone = resolve_zone(source)
    destination_zone = resolve_zone(destination)
    delta = _utc_offset(destination_zone, dt) - _utc_offset(source_zone, dt)
    return to_zone(dt, source_zone) + delta


def is_store_opened(
    begin_time: str,
    end_time: str,
    convention: TimeFormatConvention,
    timezone_identifier: str | None = None,
    *,
    tz: ZoneLike = DEFAULT_TIMEZONE,
    now: datetime | None = None,
) -> bool:
    """Return True if the current hour is within the opening hours.

    Args:
        begin_time: Opening time, written per convention.
        end_time: Closing time, written per convention.
        convention: Time format of begin_time and end_time.
        timezone_identifier: IANA zone the hours are expressed in. Ignored
            when missing or unknown.
        tz: System zone "now" is read in.
        now: Current time. Defaults to the system clock.

    Returns:
        True if begin_hour <= current_hour < end_hour (end_hour + 24 when the
        range crosses midnight).

    Raises:
        TimeParseError: If begin_time or end_time does not match the pattern.
    """
    pattern = TimeFormatConvention(convention).pattern
    end = pattern.parse_time(end_time)
    begin = pattern.parse_time(begin_time)

    current = to_zone(now or utc_now(), tz)
    target = find_zone(timezone_identifier)
    if target is not None:
        current = shift_to_timezone(current, tz, target)
    elif timezone_identifier:
        logger.debug("Unknown timezone %r, using system zone", timezone_identifier)

    begin_hour = begin.hour
    end_hour = end.hour
    if begin_hour >= end_hour:
        end_hour += 24

    is_open = begin_hour <= current.hour < end_hour
    logger.debug(
        "Store hours %s-%s at hour %d: %s",
        begin_time,
        end_time,
        current.hour,
        "open" if is_open else "closed",
    )
    return is_open
