"""Explicit formatting context.

A `FormatContext` bundles what would otherwise be read from process-wide
state: the locale, the display timezone and the clock. Build one at startup
(or per request) and pass its fields to the formatting functions, or use the
bound helpers below.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, tzinfo

from .global_config import (
    DEFAULT_LOCALE,
    DEFAULT_TIMEZONE,
    ENV_LOCALE,
    ENV_LOCALE_FALLBACK,
    ENV_TIMEZONE,
    ENV_TIMEZONE_FALLBACK,
)
from .locales import Language, current_language, locale_identifier
from .utils.time import ZoneLike, find_zone, resolve_zone, utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormatContext:
    """Locale, timezone and clock for a formatting call.

    Attributes:
        locale: Locale tag, e.g. "fr_CA".
        timezone: Display zone.
        clock: Callable returning the current aware datetime.
    """

    locale: str = DEFAULT_LOCALE
    timezone: tzinfo = field(default_factory=lambda: resolve_zone(DEFAULT_TIMEZONE))
    clock: Callable[[], datetime] = utc_now

    @classmethod
    def create(
        cls,
        locale: str = DEFAULT_LOCALE,
        timezone: ZoneLike = DEFAULT_TIMEZONE,
        clock: Callable[[], datetime] = utc_now,
    ) -> FormatContext:
        """Build a context, resolving a timezone identifier.

        Raises:
            ValueError: If timezone is not a valid IANA zone.
        """
        return cls(locale=locale, timezone=resolve_zone(timezone), clock=clock)

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] | None = None) -> FormatContext:
        """Build a context from environment variables.

        Reads DATEHELPERS_LOCALE (falling back to LANG) and DATEHELPERS_TZ
        (falling back to TZ). Unknown zones fall back to the default zone
        with a warning.

        Args:
            environ: Mapping to read instead of os.environ.

        Returns:
            FormatContext using the system clock.
        """
        env = os.environ if environ is None else environ
        locale = env.get(ENV_LOCALE) or env.get(ENV_LOCALE_FALLBACK) or DEFAULT_LOCALE
        tz_name = env.get(ENV_TIMEZONE) or env.get(ENV_TIMEZONE_FALLBACK) or DEFAULT_TIMEZONE
        zone = find_zone(tz_name)
        if zone is None:
            logger.warning("Unknown timezone %r in environment, using %s", tz_name, DEFAULT_TIMEZONE)
            zone = resolve_zone(DEFAULT_TIMEZONE)
        logger.debug("Format context from environment: locale=%s tz=%s", locale, zone)
        return cls(locale=locale, timezone=zone)

    def now(self) -> datetime:
        return self.clock()

    @property
    def language(self) -> Language:
        return current_language(self.locale)

    @property
    def identifier(self) -> str:
        return locale_identifier(self.locale)
