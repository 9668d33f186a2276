"""Canonical time and zone helpers.

This module is the single place where the package touches the clock and the
IANA zone database:
- `utc_now()` is the only reader of the system clock
- `resolve_zone()` turns identifiers into tzinfo objects with explicit errors
- `to_zone()` converts instants, refusing naive datetimes
- `parse_instant()` reads instants given on the command line

Formatting functions receive "now" and the zone as arguments and only call
into here for conversions.
"""

from __future__ import annotations

from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

ZoneLike = tzinfo | str


def utc_now() -> datetime:
    """Return current UTC time as tz-aware datetime.

    Returns:
        Current UTC datetime with timezone.utc.
    """
    return datetime.now(UTC)


def resolve_zone(tz: ZoneLike) -> tzinfo:
    """Return a tzinfo for an IANA identifier or pass a tzinfo through.

    Args:
        tz: IANA timezone identifier (e.g., "America/Montreal") or tzinfo.

    Returns:
        The tzinfo instance.

    Raises:
        ValueError: If tz is a string that is not a valid IANA zone.
    """
    if isinstance(tz, tzinfo):
        return tz
    if not isinstance(tz, str) or not tz:
        raise ValueError(f"Expected IANA timezone identifier, got {type(tz).__name__}: {tz}")

    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Invalid IANA timezone: {tz}") from e


def find_zone(identifier: str | None) -> tzinfo | None:
    """Look up an IANA zone, returning None when it cannot be resolved.

    Args:
        identifier: IANA timezone identifier, or None.

    Returns:
        ZoneInfo for the identifier, or None if missing or unknown.
    """
    if not identifier:
        return None
    try:
        return ZoneInfo(identifier)
    except (ZoneInfoNotFoundError, ValueError):
        return None


def to_zone(dt: datetime, tz: ZoneLike) -> datetime:
    """Convert an aware datetime to the given zone.

    Args:
        dt: Datetime to convert. Must be timezone-aware.
        tz: Target zone (identifier or tzinfo).

    Returns:
        The same instant expressed in the target zone.

    Raises:
        ValueError: If dt is naive or tz is not a valid IANA zone.
    """
    if dt.tzinfo is None:
        raise ValueError(
            f"Cannot convert naive datetime {dt}. "
            "Attach a timezone or use fixed=True to format stored fields."
        )
    return dt.astimezone(resolve_zone(tz))


def parse_instant(s: str) -> datetime:
    """Parse a date (YYYY-MM-DD) or ISO datetime string into an aware datetime.

    For date-only strings, interprets as midnight UTC on that date.
    A trailing "Z" is accepted; naive datetimes are taken as UTC.

    Args:
        s: String in YYYY-MM-DD, YYYY-MM-DDTHH:MM[:SS][Z|±HH:MM] format.

    Returns:
        Tz-aware datetime object (original offset kept when given).

    Raises:
        ValueError: If string format is invalid.
    """
    if not isinstance(s, str) or not s.strip():
        raise ValueError(f"Expected non-empty string, got: {s}")

    s = s.strip()
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"

    try:
        dt = datetime.fromisoformat(s)
    except ValueError as e:
        raise ValueError(
            f"Invalid date/datetime format: {s}. "
            "Expected YYYY-MM-DD or YYYY-MM-DDTHH:MM:SS[Z]"
        ) from e

    if dt.tzinfo is None:
        # If no timezone, assume UTC
        return dt.replace(tzinfo=UTC)
    return dt
