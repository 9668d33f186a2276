"""Pattern-based date formatting and time parsing.

Patterns use the CLDR field letters, a subset of them:

    y / yyyy   full year            yy   two-digit year
    M / MM     month number         MMM  abbreviated month   MMMM  full month
    L..LLLL    standalone month, same names as M
    d / dd     day of month         w / ww  ISO week of year
    E..EEE     abbreviated weekday  EEEE full weekday        EEEEE narrow weekday
    H / HH     hour 0-23            h / hh  hour 1-12
    k / kk     hour 1-24            K / KK  hour 0-11
    m / mm     minute               s / ss  second
    S..SSSSSS  fraction of a second, truncated
    a          AM/PM symbol
    Z..ZZZ     offset "-0500"       ZZZZ GMT-05:00           ZZZZZ "-05:00" or "Z"
    x..xxxxx   offset "-05", "-0500", "-05:00" (X uses "Z" for zero)
    z..zzzz    zone abbreviation from tzname()

Text inside single quotes is literal ('' is a quote); any other character
that is not a letter is literal as well.

Formatting works on whatever fields the datetime carries: callers convert to
the display zone first. Parsing only supports time fields (H, h, m, s, a),
which is all the store-hours check needs.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, time
from functools import cached_property
from typing import Final, NamedTuple

from .errors import TimeParseError
from .global_config import POSIX_LOCALE
from .locales import LocaleNames, names_for


class Token(NamedTuple):
    """One pattern element: a field run ("MMMM") or literal text."""

    field: str | None
    width: int
    text: str


def tokenize(pattern: str) -> list[Token]:
    """Split a pattern into field and literal tokens.

    Args:
        pattern: Pattern string, e.g. "d MMMM yyyy" or "H'h'mm".

    Returns:
        List of tokens in pattern order. Adjacent literal characters are merged.

    Raises:
        ValueError: If a quoted literal is not closed.
    """
    tokens: list[Token] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            tokens.append(Token(None, 0, "".join(literal)))
            literal.clear()

    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue
            end = pattern.find("'", i + 1)
            while end != -1 and end + 1 < n and pattern[end + 1] == "'":
                end = pattern.find("'", end + 2)
            if end == -1:
                raise ValueError(f"Unterminated quoted literal in pattern: {pattern!r}")
            literal.append(pattern[i + 1 : end].replace("''", "'"))
            i = end + 1
        elif ch.isascii() and ch.isalpha():
            flush()
            j = i
            while j < n and pattern[j] == ch:
                j += 1
            tokens.append(Token(ch, j - i, pattern[i:j]))
            i = j
        else:
            literal.append(ch)
            i += 1
    flush()
    return tokens


def _format_offset(dt: datetime, width: int, *, zulu: bool, extended: bool) -> str:
    offset = dt.utcoffset()
    if offset is None:
        raise ValueError(f"Offset fields need an aware datetime, got {dt!r}")
    if zulu and not offset:
        return "Z"
    minutes = int(offset.total_seconds()) // 60
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    if width == 1:
        return f"{sign}{hours:02d}" + (f"{minutes:02d}" if minutes else "")
    separator = ":" if extended else ""
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def _format_field(token: Token, dt: datetime, names: LocaleNames, am: str, pm: str) -> str:
    letter, width = token.field, token.width

    if letter == "y":
        return f"{dt.year % 100:02d}" if width == 2 else f"{dt.year:0{width}d}"
    if letter in ("M", "L"):
        if width >= 4:
            return names.months_wide[dt.month - 1]
        if width == 3:
            return names.months_abbreviated[dt.month - 1]
        return f"{dt.month:0{width}d}"
    if letter == "d":
        return f"{dt.day:0{width}d}"
    if letter == "w":
        return f"{dt.isocalendar().week:0{width}d}"
    if letter == "E":
        if width == 4:
            return names.days_wide[dt.weekday()]
        if width == 5:
            return names.days_wide[dt.weekday()][:1].upper()
        if width >= 6:
            return names.days_wide[dt.weekday()][:2]
        return names.days_abbreviated[dt.weekday()]
    if letter == "H":
        return f"{dt.hour:0{width}d}"
    if letter == "k":
        return f"{dt.hour or 24:0{width}d}"
    if letter == "h":
        return f"{dt.hour % 12 or 12:0{width}d}"
    if letter == "K":
        return f"{dt.hour % 12:0{width}d}"
    if letter == "m":
        return f"{dt.minute:0{width}d}"
    if letter == "s":
        return f"{dt.second:0{width}d}"
    if letter == "S":
        # Truncated, not rounded
        return f"{dt.microsecond:06d}"[:width].ljust(width, "0")
    if letter == "a":
        return am if dt.hour < 12 else pm
    if letter == "Z":
        if width == 4:
            return "GMT" + _format_offset(dt, 3, zulu=False, extended=True)
        if width == 5:
            return _format_offset(dt, 3, zulu=True, extended=True)
        return _format_offset(dt, 2, zulu=False, extended=False)
    if letter in ("x", "X"):
        return _format_offset(dt, width, zulu=letter == "X", extended=width % 2 == 1 and width > 1)
    if letter == "z":
        name = dt.tzname()
        if name is None:
            raise ValueError(f"Zone name fields need an aware datetime, got {dt!r}")
        return name
    raise ValueError(f"Unsupported pattern field: {token.text!r}")


_PARSE_FIELDS: Final[dict[str, str]] = {
    "H": r"(?P<H>\d{1,2})",
    "h": r"(?P<h>\d{1,2})",
    "m": r"(?P<m>\d{1,2})",
    "mm": r"(?P<m>\d{2})",
    "s": r"(?P<s>\d{1,2})",
    "ss": r"(?P<s>\d{2})",
}


def _literal_regex(text: str) -> str:
    # Whitespace around and inside literals is optional when parsing
    parts = [re.escape(part) for part in text.split()]
    return r"\s*" + r"\s*".join(parts) + r"\s*"


@dataclass(frozen=True)
class DatePattern:
    """An immutable pattern bound to a locale.

    Attributes:
        pattern: Pattern string.
        locale: Locale tag whose names are used. None means POSIX names.
        am: Override for the AM symbol.
        pm: Override for the PM symbol.
    """

    pattern: str
    locale: str | None = None
    am: str | None = None
    pm: str | None = None

    @cached_property
    def tokens(self) -> list[Token]:
        return tokenize(self.pattern)

    @property
    def names(self) -> LocaleNames:
        return names_for(self.locale)

    @property
    def am_symbol(self) -> str:
        return self.am if self.am is not None else self.names.am

    @property
    def pm_symbol(self) -> str:
        return self.pm if self.pm is not None else self.names.pm

    def format(self, dt: datetime) -> str:
        """Render the datetime's own fields with this pattern."""
        names = self.names
        am, pm = self.am_symbol, self.pm_symbol
        return "".join(
            token.text if token.field is None else _format_field(token, dt, names, am, pm)
            for token in self.tokens
        )

    @cached_property
    def _time_regex(self) -> re.Pattern[str]:
        parts: list[str] = []
        for token in self.tokens:
            if token.field is None:
                parts.append(_literal_regex(token.text))
            elif token.field == "a":
                symbols = "|".join(re.escape(s) for s in (self.am_symbol, self.pm_symbol))
                parts.append(f"(?P<a>{symbols})")
            else:
                key = token.text if token.text in _PARSE_FIELDS else token.field
                if key not in _PARSE_FIELDS:
                    raise ValueError(
                        f"Field {token.text!r} is not supported for parsing in {self.pattern!r}"
                    )
                parts.append(_PARSE_FIELDS[key])
        return re.compile("".join(parts), re.IGNORECASE)

    def parse_time(self, text: str) -> time:
        """Parse a time-of-day string with this pattern.

        Args:
            text: String such as "09h00" or "05:30 PM".

        Returns:
            The parsed time (seconds default to 0).

        Raises:
            TimeParseError: If the text does not match or a field is out of range.
        """
        match = self._time_regex.fullmatch(text.strip()) if isinstance(text, str) else None
        if match is None:
            raise TimeParseError(text, self.pattern)

        fields = match.groupdict()
        minute = int(fields.get("m") or 0)
        second = int(fields.get("s") or 0)
        if fields.get("h") is not None:
            hour = int(fields["h"])
            if not 1 <= hour <= 12:
                raise TimeParseError(text, self.pattern)
            hour %= 12
            if fields.get("a") and fields["a"].lower() == self.pm_symbol.lower():
                hour += 12
        else:
            hour = int(fields.get("H") or 0)

        try:
            return time(hour, minute, second)
        except ValueError as e:
            raise TimeParseError(text, self.pattern) from e


def format_datetime(dt: datetime, pattern: str, locale: str | None = None) -> str:
    """Format a datetime's own fields with a one-off pattern."""
    return DatePattern(pattern, locale).format(dt)


# Time-only patterns used by time() and the store-hours check
FRENCH_TIME_PATTERN: Final = DatePattern("H'h'mm", POSIX_LOCALE)
ENGLISH_TIME_PATTERN: Final = DatePattern("hh:mm a", POSIX_LOCALE, am="AM", pm="PM")
