"""Human-readable date and time formatting.

Every function takes the locale, display zone and current time as explicit
keyword arguments. `fixed=True` renders the fields the datetime already
carries instead of converting it to the display zone.

Only French and English are distinguished. Note the two ways French is
detected: `day_and_month()` and `month_and_year()` require the language
subtag to be exactly "fr", while `time_of_day()` and `localized_time()` use
the looser `is_french()` containment test.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Final

from .global_config import DEFAULT_LOCALE, DEFAULT_TIMEZONE, ISO_EXPORT_TZ, POSIX_LOCALE
from .locales import Language, current_language, is_french, language_code
from .patterns import ENGLISH_TIME_PATTERN, FRENCH_TIME_PATTERN, DatePattern
from .utils.time import ZoneLike, to_zone, utc_now

# Placeholder rendered between hour and minute, then replaced by "h"
_HOUR_SEPARATOR: Final = "#*#"


def _localize(dt: datetime, fixed: bool, tz: ZoneLike) -> datetime:
    return dt if fixed else to_zone(dt, tz)


def _local_date(dt: datetime, tz: ZoneLike) -> date:
    return to_zone(dt, tz).date()


def _today(tz: ZoneLike, now: datetime | None) -> date:
    return _local_date(now or utc_now(), tz)


def is_today(dt: datetime, *, tz: ZoneLike = DEFAULT_TIMEZONE, now: datetime | None = None) -> bool:
    """Return True if dt falls on the current calendar day in tz."""
    return _local_date(dt, tz) == _today(tz, now)


def is_tomorrow(dt: datetime, *, tz: ZoneLike = DEFAULT_TIMEZONE, now: datetime | None = None) -> bool:
    """Return True if dt falls on the calendar day after the current one in tz."""
    return _local_date(dt, tz) == _today(tz, now) + timedelta(days=1)


def day_and_month(
    dt: datetime,
    fixed: bool = False,
    tz: ZoneLike = DEFAULT_TIMEZONE,
    short_format: bool = False,
    *,
    locale: str = DEFAULT_LOCALE,
) -> str:
    """Format day and month, e.g. "14 mars" or "March 14".

    Args:
        dt: Datetime to format.
        fixed: Render dt's own fields, ignoring tz.
        tz: Display zone.
        short_format: Use abbreviated month names.
        locale: Locale tag.

    Returns:
        "d MMMM" / "d MMM" for French, "MMMM dd" / "MMM dd" otherwise.
    """
    if current_language(locale) is Language.FRENCH:
        pattern = "d MMM" if short_format else "d MMMM"
    else:
        pattern = "MMM dd" if short_format else "MMMM dd"
    return DatePattern(pattern, language_code(locale)).format(_localize(dt, fixed, tz))


def time_of_day(
    dt: datetime,
    fixed: bool = False,
    *,
    locale: str = DEFAULT_LOCALE,
    tz: ZoneLike = DEFAULT_TIMEZONE,
) -> str:
    """Format the time with the shared French or English time pattern.

    French locales get "14h05", everything else "02:05 PM".
    """
    pattern = FRENCH_TIME_PATTERN if is_french(locale) else ENGLISH_TIME_PATTERN
    return pattern.format(_localize(dt, fixed, tz))


def month_and_year(
    dt: datetime,
    fixed: bool = False,
    *,
    locale: str = DEFAULT_LOCALE,
    tz: ZoneLike = DEFAULT_TIMEZONE,
) -> str:
    """Format a full date, e.g. "Le 14 mars 2024" or "March 14, 2024"."""
    local = _localize(dt, fixed, tz)
    if current_language(locale) is Language.FRENCH:
        return "Le " + DatePattern("d MMMM yyyy", language_code(locale)).format(local)
    return DatePattern("MMMM d, yyyy", language_code(locale)).format(local)


def localized_time(
    dt: datetime,
    fixed: bool = False,
    *,
    locale: str = DEFAULT_LOCALE,
    tz: ZoneLike = DEFAULT_TIMEZONE,
) -> str:
    """Format the time in Canadian French or English style.

    French renders "14h05", English "2:05pm". With fixed=True the time is
    shown in UTC rather than in tz.
    """
    local = to_zone(dt, "UTC" if fixed else tz)
    if is_french(locale):
        text = DatePattern(f"H{_HOUR_SEPARATOR}mm", "fr_CA").format(local)
        return text.replace(_HOUR_SEPARATOR, "h")
    return DatePattern("h:mma", "en_CA").format(local)


def month_name(dt: datetime, *, locale: str = DEFAULT_LOCALE, tz: ZoneLike = DEFAULT_TIMEZONE) -> str:
    """Return the full month name in the locale's language."""
    return DatePattern("MMMM", language_code(locale)).format(to_zone(dt, tz))


def day_of_month(dt: datetime, *, tz: ZoneLike = DEFAULT_TIMEZONE) -> str:
    """Return the day of the month without leading zero."""
    return DatePattern("d").format(to_zone(dt, tz))


def iso_date(dt: datetime) -> str:
    """Return YYYY-MM-DD as seen in America/New_York, whatever the caller's zone."""
    return DatePattern("yyyy-MM-dd", POSIX_LOCALE).format(to_zone(dt, ISO_EXPORT_TZ))


def month_number(dt: datetime, *, tz: ZoneLike = DEFAULT_TIMEZONE) -> int:
    return to_zone(dt, tz).month


def month_year_short(dt: datetime, *, tz: ZoneLike = DEFAULT_TIMEZONE) -> str:
    """Format "MMMM yyyy" with the formatter's default locale.

    Unlike its siblings this takes no locale: month names always come from
    DEFAULT_LOCALE.
    """
    return DatePattern("MMMM yyyy", DEFAULT_LOCALE).format(to_zone(dt, tz))


def is_between(dt: datetime, first: datetime, second: datetime) -> bool:
    """Return True if dt lies in the closed interval spanned by the two bounds.

    The bounds may be given in either order.
    """
    return min(first, second) <= dt <= max(first, second)


def formatted_string(dt: datetime, pattern: str, *, tz: ZoneLike = DEFAULT_TIMEZONE) -> str:
    """Format dt with a caller-supplied pattern, default locale."""
    return DatePattern(pattern, DEFAULT_LOCALE).format(to_zone(dt, tz))


def current_timestamp(now: datetime | None = None) -> float:
    """Return the current time as seconds since the epoch."""
    return (now or utc_now()).timestamp()


def current_day_string(
    *,
    locale: str = DEFAULT_LOCALE,
    tz: ZoneLike = DEFAULT_TIMEZONE,
    now: datetime | None = None,
) -> str:
    """Return the full weekday name of today, e.g. "Monday" or "lundi"."""
    return DatePattern("EEEE", locale).format(to_zone(now or utc_now(), tz))


def short_weekday_string(*, tz: ZoneLike = DEFAULT_TIMEZONE, now: datetime | None = None) -> str:
    """Return today's weekday with the "EE" pattern and the default locale."""
    return DatePattern("EE", DEFAULT_LOCALE).format(to_zone(now or utc_now(), tz))


def days_between(start: datetime, end: datetime, *, tz: ZoneLike = DEFAULT_TIMEZONE) -> int:
    """Count calendar days from start's day to end's day in tz.

    Both datetimes are reduced to the start of their day first, so 23:59 to
    00:01 the next day is one day.

    Returns:
        Day count, negative when end's day comes before start's.
    """
    return (_local_date(end, tz) - _local_date(start, tz)).days
