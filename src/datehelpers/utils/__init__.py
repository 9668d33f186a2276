"""Utility modules.

This package provides shared utilities used across the codebase.
"""

from .time import (
    ZoneLike,
    find_zone,
    parse_instant,
    resolve_zone,
    to_zone,
    utc_now,
)

__all__ = [
    # Time utilities (clock and zone handling)
    "ZoneLike",
    "find_zone",
    "parse_instant",
    "resolve_zone",
    "to_zone",
    "utc_now",
]
