from __future__ import annotations

from datetime import UTC, datetime, time, timedelta, timezone

import pytest

from datehelpers.errors import TimeParseError
from datehelpers.patterns import (
    ENGLISH_TIME_PATTERN,
    FRENCH_TIME_PATTERN,
    DatePattern,
    Token,
    format_datetime,
    tokenize,
)


@pytest.mark.unit
def test_tokenize_splits_fields_and_quoted_literals() -> None:
    assert tokenize("H'h'mm") == [
        Token("H", 1, "H"),
        Token(None, 0, "h"),
        Token("m", 2, "mm"),
    ]


@pytest.mark.unit
def test_tokenize_merges_adjacent_literals_and_unescapes_quotes() -> None:
    tokens = tokenize("h 'o''clock'")
    assert tokens == [Token("h", 1, "h"), Token(None, 0, " o'clock")]
    assert tokenize("''") == [Token(None, 0, "'")]


@pytest.mark.unit
def test_tokenize_rejects_unterminated_quote() -> None:
    with pytest.raises(ValueError, match="Unterminated"):
        tokenize("H'h")


@pytest.mark.unit
def test_format_fields() -> None:
    dt = datetime(2024, 1, 5, 9, 7, 3)
    assert format_datetime(dt, "yyyy-MM-dd HH:mm:ss") == "2024-01-05 09:07:03"
    assert format_datetime(dt, "yy M d H m s") == "24 1 5 9 7 3"
    assert format_datetime(dt, "EEEE EEE EEEEEE", "fr") == "vendredi ven. ve"
    assert format_datetime(dt, "MMMM MMM", "fr") == "janvier janv."
    assert format_datetime(dt, "h:mm a") == "9:07 AM"


@pytest.mark.unit
def test_format_twelve_hour_clock_edges() -> None:
    assert format_datetime(datetime(2024, 1, 5, 0, 15), "hh:mm a") == "12:15 AM"
    assert format_datetime(datetime(2024, 1, 5, 12, 15), "hh:mm a") == "12:15 PM"


@pytest.mark.unit
def test_format_fraction_and_offset_fields() -> None:
    eastern = timezone(timedelta(hours=-5), "EST")
    dt = datetime(2024, 1, 5, 9, 7, 3, 456789, tzinfo=eastern)
    assert format_datetime(dt, "yyyy-MM-dd'T'HH:mm:ss.SSSZ") == "2024-01-05T09:07:03.456-0500"
    assert format_datetime(dt, "S SSSSSSS") == "4 4567890"
    assert format_datetime(dt, "x|xx|xxx|ZZZZ|ZZZZZ") == "-05|-0500|-05:00|GMT-05:00|-05:00"
    assert format_datetime(dt, "HH:mm zzz") == "09:07 EST"


@pytest.mark.unit
def test_format_offset_edge_values() -> None:
    assert format_datetime(datetime(2024, 1, 5, tzinfo=UTC), "X xxx ZZZZZ") == "Z +00:00 Z"
    india = timezone(timedelta(hours=5, minutes=30))
    assert format_datetime(datetime(2024, 1, 5, tzinfo=india), "x xxx") == "+0530 +05:30"
    newfoundland = timezone(-timedelta(hours=3, minutes=30))
    assert format_datetime(datetime(2024, 1, 5, tzinfo=newfoundland), "Z") == "-0330"


@pytest.mark.unit
def test_format_zone_fields_need_aware_datetime() -> None:
    with pytest.raises(ValueError, match="aware"):
        format_datetime(datetime(2024, 1, 5), "Z")
    with pytest.raises(ValueError, match="aware"):
        format_datetime(datetime(2024, 1, 5), "zzz")


@pytest.mark.unit
def test_format_standalone_month_and_week_of_year() -> None:
    dt = datetime(2024, 1, 5)
    assert format_datetime(dt, "LLLL yyyy") == "January 2024"
    assert format_datetime(dt, "LLL LL L", "fr") == "janv. 01 1"
    assert format_datetime(dt, "w ww") == "1 01"
    assert format_datetime(datetime(2024, 3, 14), "w") == "11"
    # ISO week 1 of 2025 starts on Monday 2024-12-30
    assert format_datetime(datetime(2024, 12, 30), "w") == "1"


@pytest.mark.unit
def test_format_alternate_hour_fields() -> None:
    assert format_datetime(datetime(2024, 1, 5, 0, 30), "kk:mm") == "24:30"
    assert format_datetime(datetime(2024, 1, 5, 13, 30), "k") == "13"
    assert format_datetime(datetime(2024, 1, 5, 12, 30), "K a") == "0 PM"
    assert format_datetime(datetime(2024, 1, 5, 23, 30), "KK") == "11"


@pytest.mark.unit
def test_format_rejects_unknown_field() -> None:
    with pytest.raises(ValueError, match="Unsupported pattern field"):
        format_datetime(datetime(2024, 1, 5), "QQQ")


@pytest.mark.unit
def test_time_pattern_singletons() -> None:
    dt = datetime(2024, 3, 14, 14, 5)
    assert FRENCH_TIME_PATTERN.format(dt) == "14h05"
    assert ENGLISH_TIME_PATTERN.format(dt) == "02:05 PM"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("09h00", time(9, 0)),
        ("9h30", time(9, 30)),
        ("14 h 05", time(14, 5)),
        ("23H59", time(23, 59)),
    ],
)
def test_parse_french_time(text: str, expected: time) -> None:
    assert FRENCH_TIME_PATTERN.parse_time(text) == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("09:00 AM", time(9, 0)),
        ("05:30 pm", time(17, 30)),
        ("12:00 PM", time(12, 0)),
        ("12:45 AM", time(0, 45)),
        ("9:15AM", time(9, 15)),
    ],
)
def test_parse_english_time(text: str, expected: time) -> None:
    assert ENGLISH_TIME_PATTERN.parse_time(text) == expected


@pytest.mark.unit
@pytest.mark.parametrize("text", ["abc", "", "25h00", "10h61", "10h5", "10:00"])
def test_parse_french_time_rejects_bad_input(text: str) -> None:
    with pytest.raises(TimeParseError):
        FRENCH_TIME_PATTERN.parse_time(text)


@pytest.mark.unit
@pytest.mark.parametrize("text", ["13:00 PM", "00:30 AM", "10h00", "10:00 XM"])
def test_parse_english_time_rejects_bad_input(text: str) -> None:
    with pytest.raises(TimeParseError):
        ENGLISH_TIME_PATTERN.parse_time(text)


@pytest.mark.unit
def test_parse_error_is_a_value_error_with_context() -> None:
    with pytest.raises(ValueError) as excinfo:
        FRENCH_TIME_PATTERN.parse_time("abc")
    assert isinstance(excinfo.value, TimeParseError)
    assert excinfo.value.value == "abc"
    assert "Can't parse provided time" in str(excinfo.value)


@pytest.mark.unit
def test_parse_unsupported_field_is_rejected() -> None:
    with pytest.raises(ValueError, match="not supported for parsing"):
        DatePattern("yyyy").parse_time("2024")
