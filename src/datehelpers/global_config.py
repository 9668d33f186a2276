"""Global, project-wide configuration constants.

This module intentionally contains **no business logic** – only shared
defaults and cross-cutting constants that many modules can import.

Defaults for the locale and timezone can be overridden through the
environment; see `datehelpers.context.FormatContext.from_environment`.
"""

from typing import Final

# Core Names
PROJECT_NAME = "datehelpers"
PACKAGE_NAME = "datehelpers"

# Environment variables read by FormatContext.from_environment()
ENV_LOCALE: Final = "DATEHELPERS_LOCALE"
ENV_TIMEZONE: Final = "DATEHELPERS_TZ"
# Fallbacks consulted when the project-specific variables are unset
ENV_LOCALE_FALLBACK: Final = "LANG"
ENV_TIMEZONE_FALLBACK: Final = "TZ"

# Formatter defaults used when a caller passes no locale/timezone
DEFAULT_LOCALE: Final = "en"
DEFAULT_TIMEZONE: Final = "UTC"

# Locale tag whose names are locale-neutral (English names, AM/PM symbols)
POSIX_LOCALE: Final = "en_US_POSIX"

# iso_date() always exports in this zone, whatever the caller's zone
ISO_EXPORT_TZ: Final = "America/New_York"
