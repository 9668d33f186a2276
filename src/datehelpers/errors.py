"""Exception types for the project."""

from __future__ import annotations


class DateHelpersError(Exception):
    """Base exception for datehelpers errors."""


class TimeParseError(DateHelpersError, ValueError):
    """Raised when a time string does not match the expected pattern.

    The store-hours check raises this when either boundary string cannot be
    read with the pattern of the requested convention.
    """

    DEFAULT_MESSAGE = "Can't parse provided time. Check locale and corresponding format"

    def __init__(self, value: str, pattern: str | None = None) -> None:
        self.value = value
        self.pattern = pattern
        detail = f"{value!r}"
        if pattern is not None:
            detail += f" (pattern {pattern!r})"
        super().__init__(f"{self.DEFAULT_MESSAGE}: {detail}")
