from __future__ import annotations

from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from datehelpers.elapsed import (
    ElapsedComponents,
    elapsed_components,
    elapsed_interval,
    format_duration,
    relative_date,
)


@pytest.mark.unit
def test_components_split_days_into_weeks(now: datetime) -> None:
    dt = datetime(2024, 1, 1, 18, 5, tzinfo=UTC)
    # Jan 1 -> Mar 14: 2 months and 13 days
    assert elapsed_components(dt, now) == ElapsedComponents(0, 2, 1, 6, 0, 0)


@pytest.mark.unit
def test_components_are_zero_within_a_minute(now: datetime) -> None:
    components = elapsed_components(now - timedelta(seconds=59), now)
    assert components == ElapsedComponents(0, 0, 0, 0, 0, 0)
    assert components.largest_unit() is None


@pytest.mark.unit
def test_largest_unit_wins_over_smaller_ones() -> None:
    assert ElapsedComponents(0, 2, 3, 0, 0, 0).largest_unit() == ("month", 2)
    assert ElapsedComponents(1, 0, 0, 5, 0, 0).largest_unit() == ("year", 1)
    assert ElapsedComponents(0, 0, 0, 0, 0, 4).largest_unit() == ("minute", 4)


@pytest.mark.unit
def test_months_beat_weeks(now: datetime) -> None:
    # Two months and three weeks before now
    dt = datetime(2023, 12, 22, 18, 5, tzinfo=UTC)
    assert elapsed_components(dt, now).month == 2
    assert elapsed_components(dt, now).week == 3
    assert elapsed_interval(dt, now=now) == "2 months ago"
    assert elapsed_interval(dt, locale="fr_CA", now=now) == "Il y a 2 mois"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("delta", "english", "french"),
    [
        (timedelta(days=400), "1 year ago", "Il y a 1 an"),
        (timedelta(days=10), "1 week ago", "Il y a 1 semaine"),
        (timedelta(days=15), "2 weeks ago", "Il y a 2 semaines"),
        (timedelta(days=3, hours=5), "3 days ago", "Il y a 3 jours"),
        (timedelta(hours=5, minutes=59), "5 hours ago", "Il y a 5 heures"),
        (timedelta(hours=1), "1 hour ago", "Il y a 1 heure"),
        (timedelta(minutes=1, seconds=30), "1 minute ago", "Il y a 1 minute"),
        (timedelta(minutes=42), "42 minutes ago", "Il y a 42 minutes"),
    ],
)
def test_elapsed_interval_phrases(now: datetime, delta: timedelta, english: str, french: str) -> None:
    assert elapsed_interval(now - delta, locale="en", now=now) == english
    assert elapsed_interval(now - delta, locale="fr", now=now) == french


@pytest.mark.unit
def test_elapsed_interval_years(now: datetime) -> None:
    dt = datetime(2021, 2, 1, tzinfo=UTC)
    assert elapsed_interval(dt, now=now) == "3 years ago"
    assert elapsed_interval(dt, locale="fr", now=now) == "Il y a 3 ans"


@pytest.mark.unit
def test_elapsed_interval_under_a_minute_is_a_date(now: datetime) -> None:
    dt = now - timedelta(seconds=20)
    assert elapsed_interval(dt, now=now) == "Today"
    assert elapsed_interval(dt, locale="fr_CA", now=now) == "aujourd’hui"
    assert "0 minutes" not in elapsed_interval(dt, now=now)


@pytest.mark.unit
def test_elapsed_interval_future_falls_back_to_date(now: datetime) -> None:
    assert elapsed_interval(now + timedelta(days=1), now=now) == "Tomorrow"
    assert elapsed_interval(now + timedelta(days=3), now=now) == "Mar 17, 2024"
    assert elapsed_interval(now + timedelta(days=3), locale="fr", now=now) == "17 mars 2024"


@pytest.mark.unit
def test_elapsed_interval_uses_display_zone_calendar(montreal: ZoneInfo) -> None:
    now = datetime(2024, 5, 31, 23, 0, tzinfo=UTC)  # May 31, 19:00 in Montreal
    dt = datetime(2024, 5, 1, 3, 0, tzinfo=UTC)  # Apr 30, 23:00 in Montreal
    assert elapsed_interval(dt, tz=montreal, now=now) == "1 month ago"
    assert elapsed_interval(dt, tz="UTC", now=now) == "4 weeks ago"


@pytest.mark.unit
def test_relative_date(now: datetime) -> None:
    assert relative_date(now - timedelta(days=1), now=now) == "Yesterday"
    assert relative_date(now - timedelta(days=1), locale="fr", now=now) == "hier"
    assert relative_date(now + timedelta(days=1), locale="fr", now=now) == "demain"
    assert relative_date(now - timedelta(days=9), now=now) == "Mar 5, 2024"


@pytest.mark.unit
def test_format_duration_pluralizes() -> None:
    assert format_duration("day", 1) == "1 day"
    assert format_duration("day", 2) == "2 days"
    assert format_duration("month", 2, "fr") == "2 mois"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("dt", "now", "expected"),
    [
        # Clocks fall back at 02:00 EDT: 01:50 EDT -> 01:10 EST
        (
            datetime(2024, 11, 3, 5, 50, tzinfo=UTC),
            datetime(2024, 11, 3, 6, 10, tzinfo=UTC),
            "20 minutes ago",
        ),
        # Clocks spring forward at 02:00 EST: 01:30 EST -> 03:20 EDT
        (
            datetime(2024, 3, 10, 6, 30, tzinfo=UTC),
            datetime(2024, 3, 10, 7, 20, tzinfo=UTC),
            "50 minutes ago",
        ),
    ],
)
def test_elapsed_interval_counts_real_time_across_dst(
    montreal: ZoneInfo, dt: datetime, now: datetime, expected: str
) -> None:
    assert elapsed_interval(dt, tz=montreal, now=now) == expected


@pytest.mark.unit
def test_components_across_dst_count_real_hours(montreal: ZoneInfo) -> None:
    # Mar 9 12:00 EST -> Mar 10 12:00 EDT: same wall time, 23 real hours
    dt = datetime(2024, 3, 9, 17, 0, tzinfo=UTC)
    now = datetime(2024, 3, 10, 16, 0, tzinfo=UTC)
    assert elapsed_components(dt, now, montreal) == ElapsedComponents(0, 0, 0, 0, 23, 0)
