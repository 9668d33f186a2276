from __future__ import annotations

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import pytest

from datehelpers.global_config import (
    ENV_LOCALE,
    ENV_LOCALE_FALLBACK,
    ENV_TIMEZONE,
    ENV_TIMEZONE_FALLBACK,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Removes locale/timezone variables so defaults never depend on the host.
    Automatically applied to all tests.
    """
    for name in (ENV_LOCALE, ENV_LOCALE_FALLBACK, ENV_TIMEZONE, ENV_TIMEZONE_FALLBACK):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def montreal() -> ZoneInfo:
    """Eastern zone with DST (UTC-5 in winter, UTC-4 from 2024-03-10)."""
    return ZoneInfo("America/Montreal")


@pytest.fixture
def now() -> datetime:
    """
    Reference "now" for relative formatting: Thursday 2024-03-14 18:05 UTC,
    which is 14:05 in Montreal.
    """
    return datetime(2024, 3, 14, 18, 5, tzinfo=UTC)
