"""Locale classification and per-language name tables.

Only two languages are distinguished, French and English. Anything that is
not recognized falls back to English.

Classification comes in two flavours that are deliberately not equivalent:
- `current_language()` matches the language subtag exactly ("fr")
- `is_french()` / `is_english()` test substring containment, so any subtag
  embedding "fr" or "en" matches
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Final

from .global_config import POSIX_LOCALE

_SUBTAG_SPLIT = re.compile(r"[-_.@]")


class Language(str, Enum):
    """Languages the formatters know how to render."""

    FRENCH = "fr"
    ENGLISH = "en"


@dataclass(frozen=True)
class LocaleNames:
    """Names and default patterns of one locale.

    Attributes:
        months_wide: Full month names, January first.
        months_abbreviated: Abbreviated month names, January first.
        days_wide: Full weekday names, Monday first (matches datetime.weekday()).
        days_abbreviated: Abbreviated weekday names, Monday first.
        am: Ante meridiem symbol.
        pm: Post meridiem symbol.
        date_medium: Medium date pattern.
        today / yesterday / tomorrow: Relative-day words.
        units: Duration unit words as (singular, plural), keyed by unit name.
    """

    months_wide: tuple[str, ...]
    months_abbreviated: tuple[str, ...]
    days_wide: tuple[str, ...]
    days_abbreviated: tuple[str, ...]
    am: str = "AM"
    pm: str = "PM"
    date_medium: str = "MMM d, y"
    today: str = "Today"
    yesterday: str = "Yesterday"
    tomorrow: str = "Tomorrow"
    units: dict[str, tuple[str, str]] = field(default_factory=dict)


_ENGLISH_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_ENGLISH_MONTHS_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_ENGLISH_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_ENGLISH_DAYS_ABBR = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_ENGLISH_UNITS = {
    "year": ("year", "years"),
    "month": ("month", "months"),
    "week": ("week", "weeks"),
    "day": ("day", "days"),
    "hour": ("hour", "hours"),
    "minute": ("minute", "minutes"),
}

_FRENCH_MONTHS = (
    "janvier", "février", "mars", "avril", "mai", "juin",
    "juillet", "août", "septembre", "octobre", "novembre", "décembre",
)
_FRENCH_MONTHS_ABBR = (
    "janv.", "févr.", "mars", "avr.", "mai", "juin",
    "juil.", "août", "sept.", "oct.", "nov.", "déc.",
)
_FRENCH_DAYS = ("lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche")
_FRENCH_DAYS_ABBR = ("lun.", "mar.", "mer.", "jeu.", "ven.", "sam.", "dim.")
_FRENCH_UNITS = {
    "year": ("an", "ans"),
    "month": ("mois", "mois"),
    "week": ("semaine", "semaines"),
    "day": ("jour", "jours"),
    "hour": ("heure", "heures"),
    "minute": ("minute", "minutes"),
}

ENGLISH_NAMES: Final = LocaleNames(
    months_wide=_ENGLISH_MONTHS,
    months_abbreviated=_ENGLISH_MONTHS_ABBR,
    days_wide=_ENGLISH_DAYS,
    days_abbreviated=_ENGLISH_DAYS_ABBR,
    units=_ENGLISH_UNITS,
)

FRENCH_NAMES: Final = LocaleNames(
    months_wide=_FRENCH_MONTHS,
    months_abbreviated=_FRENCH_MONTHS_ABBR,
    days_wide=_FRENCH_DAYS,
    days_abbreviated=_FRENCH_DAYS_ABBR,
    date_medium="d MMM y",
    today="aujourd’hui",
    yesterday="hier",
    tomorrow="demain",
    units=_FRENCH_UNITS,
)

# Keys are normalized tags: lower-case language, "_" separator
LOCALE_NAMES: Final[dict[str, LocaleNames]] = {
    "en": ENGLISH_NAMES,
    "en_ca": LocaleNames(
        months_wide=_ENGLISH_MONTHS,
        months_abbreviated=_ENGLISH_MONTHS_ABBR,
        days_wide=_ENGLISH_DAYS,
        days_abbreviated=_ENGLISH_DAYS_ABBR,
        am="am",
        pm="pm",
        units=_ENGLISH_UNITS,
    ),
    "en_us_posix": ENGLISH_NAMES,
    "fr": FRENCH_NAMES,
    "fr_ca": LocaleNames(
        months_wide=_FRENCH_MONTHS,
        months_abbreviated=_FRENCH_MONTHS_ABBR,
        days_wide=_FRENCH_DAYS,
        days_abbreviated=_FRENCH_DAYS_ABBR,
        am="a.m.",
        pm="p.m.",
        date_medium="d MMM y",
        today="aujourd’hui",
        yesterday="hier",
        tomorrow="demain",
        units=_FRENCH_UNITS,
    ),
}


def language_code(locale: str | None) -> str | None:
    """Return the lower-cased language subtag of a locale tag.

    Args:
        locale: Tag such as "fr", "fr_CA", "en-US" or "fr_CA.UTF-8".

    Returns:
        The language subtag ("fr"), or None for an empty or missing tag.
    """
    if not locale:
        return None
    code = _SUBTAG_SPLIT.split(locale.strip(), maxsplit=1)[0].lower()
    return code or None


def current_language(locale: str | None) -> Language:
    """Map a locale to French or English, defaulting to English."""
    code = language_code(locale) or Language.ENGLISH.value
    try:
        return Language(code)
    except ValueError:
        return Language.ENGLISH


def is_french(locale: str | None) -> bool:
    code = language_code(locale)
    return code is not None and "fr" in code


def is_english(locale: str | None) -> bool:
    code = language_code(locale)
    return code is not None and "en" in code


def locale_identifier(locale: str | None) -> str:
    """Return "fr" for French locales and "en" for everything else."""
    return Language.FRENCH.value if is_french(locale) else Language.ENGLISH.value


def names_for(locale: str | None) -> LocaleNames:
    """Return the name table for a locale.

    Looks up the full tag first ("fr_CA"), then the language subtag ("fr").
    Unknown locales get the English table.

    Args:
        locale: Locale tag, or None for the POSIX names.

    Returns:
        LocaleNames for the locale.
    """
    if not locale:
        locale = POSIX_LOCALE
    key = locale.strip().split(".", 1)[0].replace("-", "_").lower()
    if key in LOCALE_NAMES:
        return LOCALE_NAMES[key]
    return LOCALE_NAMES.get(language_code(locale) or "", ENGLISH_NAMES)
