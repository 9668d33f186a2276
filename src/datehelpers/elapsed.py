"""Relative "time ago" phrases.

The phrase reports a single unit: the largest one with a non-zero count in
the calendar difference between the datetime and now. Two months and three
weeks is "2 months ago", never "11 weeks ago".

When every unit is zero (less than a minute has passed, or the datetime lies
in the future) the result is a medium date instead, with today, yesterday
and tomorrow replaced by their relative-day words.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Final, NamedTuple

from dateutil.relativedelta import relativedelta

from .global_config import DEFAULT_LOCALE, DEFAULT_TIMEZONE
from .locales import is_french, locale_identifier, names_for
from .patterns import DatePattern
from .utils.time import ZoneLike, to_zone, utc_now

logger = logging.getLogger(__name__)

# Largest unit first; the first non-zero one is reported
UNIT_ORDER: Final = ("year", "month", "week", "day", "hour", "minute")


class ElapsedComponents(NamedTuple):
    """Calendar difference split into the reported units."""

    year: int
    month: int
    week: int
    day: int
    hour: int
    minute: int

    def largest_unit(self) -> tuple[str, int] | None:
        """Return the first unit with a positive count, or None if all are zero."""
        for unit in UNIT_ORDER:
            value = getattr(self, unit)
            if value > 0:
                return unit, value
        return None


def elapsed_components(dt: datetime, now: datetime, tz: ZoneLike = DEFAULT_TIMEZONE) -> ElapsedComponents:
    """Compute the calendar difference from dt to now in tz.

    Months and years follow calendar lengths (via relativedelta); weeks are
    the whole weeks of the remaining days. Across a UTC offset change the
    start is moved by the offset difference, so hours and minutes count real
    elapsed time while days stay on the local calendar.

    Args:
        dt: Earlier datetime.
        now: Reference datetime.
        tz: Zone whose calendar is used.

    Returns:
        ElapsedComponents. Counts are negative when dt is after now.
    """
    local_start = to_zone(dt, tz)
    local_end = to_zone(now, tz)
    start = local_start.replace(tzinfo=None) + (local_end.utcoffset() - local_start.utcoffset())
    end = local_end.replace(tzinfo=None)
    delta = relativedelta(end, start)
    weeks = int(delta.days / 7)
    return ElapsedComponents(
        year=delta.years,
        month=delta.months,
        week=weeks,
        day=delta.days - weeks * 7,
        hour=delta.hours,
        minute=delta.minutes,
    )


def format_duration(unit: str, count: int, locale: str = DEFAULT_LOCALE) -> str:
    """Render "<count> <unit>" in full words, e.g. "2 months" or "1 semaine"."""
    singular, plural = names_for(locale).units[unit]
    return f"{count} {singular if count == 1 else plural}"


def relative_date(
    dt: datetime,
    *,
    locale: str = DEFAULT_LOCALE,
    tz: ZoneLike = DEFAULT_TIMEZONE,
    now: datetime | None = None,
) -> str:
    """Render a medium date, using "Today"/"Yesterday"/"Tomorrow" when they apply."""
    names = names_for(locale)
    local = to_zone(dt, tz)
    today = to_zone(now or utc_now(), tz).date()
    relative = {
        today: names.today,
        today - timedelta(days=1): names.yesterday,
        today + timedelta(days=1): names.tomorrow,
    }
    word = relative.get(local.date())
    if word is not None:
        return word
    return DatePattern(names.date_medium, locale).format(local)


def elapsed_interval(
    dt: datetime,
    *,
    locale: str = DEFAULT_LOCALE,
    tz: ZoneLike = DEFAULT_TIMEZONE,
    now: datetime | None = None,
) -> str:
    """Describe how long ago dt was, e.g. "3 days ago" or "Il y a 3 jours".

    Args:
        dt: Past datetime.
        locale: Locale tag; French locales get the "Il y a" form.
        tz: Zone whose calendar is used for the difference.
        now: Reference time. Defaults to the current time.

    Returns:
        A single-unit phrase, or a relative medium date when less than a
        minute separates dt from now.
    """
    now = now or utc_now()
    largest = elapsed_components(dt, now, tz).largest_unit()
    if largest is None:
        logger.debug("No whole minute elapsed since %s, falling back to relative date", dt)
        return relative_date(dt, locale=locale, tz=tz, now=now)

    unit, count = largest
    duration = format_duration(unit, count, locale_identifier(locale))
    if is_french(locale):
        return "Il y a " + duration
    return duration + " ago"
