"""
datehelpers core package.

Small, pure helpers for human-readable dates and times in English and French:
- Formatting functions (`datehelpers.formatting`): day/month strings, times,
  ISO export, weekday names, day counts
- Relative "time ago" phrases (`datehelpers.elapsed`)
- Opening-hours check (`datehelpers.store_hours`)
- Locale classification (`datehelpers.locales`)
- A minimal Typer-based CLI (`datehelpers.cli`)

Configuration:
- Shared defaults live in `datehelpers.global_config`.
- `datehelpers.context.FormatContext` bundles locale, timezone and clock so
  callers pass them explicitly instead of relying on process-wide state.
"""

from .context import FormatContext
from .elapsed import elapsed_interval
from .errors import DateHelpersError, TimeParseError
from .formatting import (
    current_day_string,
    current_timestamp,
    day_and_month,
    day_of_month,
    days_between,
    formatted_string,
    is_between,
    is_today,
    is_tomorrow,
    iso_date,
    localized_time,
    month_and_year,
    month_name,
    month_number,
    month_year_short,
    short_weekday_string,
    time_of_day,
)
from .locales import Language, current_language, is_english, is_french, locale_identifier
from .patterns import ENGLISH_TIME_PATTERN, FRENCH_TIME_PATTERN, DatePattern
from .store_hours import TimeFormatConvention, is_store_opened, shift_to_timezone

__all__ = [
    "DateHelpersError",
    "DatePattern",
    "ENGLISH_TIME_PATTERN",
    "FRENCH_TIME_PATTERN",
    "FormatContext",
    "Language",
    "TimeFormatConvention",
    "TimeParseError",
    "current_day_string",
    "current_language",
    "current_timestamp",
    "day_and_month",
    "day_of_month",
    "days_between",
    "elapsed_interval",
    "formatted_string",
    "is_between",
    "is_english",
    "is_french",
    "is_store_opened",
    "is_today",
    "is_tomorrow",
    "iso_date",
    "locale_identifier",
    "localized_time",
    "month_and_year",
    "month_name",
    "month_number",
    "month_year_short",
    "shift_to_timezone",
    "short_weekday_string",
    "time_of_day",
]
