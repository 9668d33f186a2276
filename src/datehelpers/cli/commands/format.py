"""CLI commands that format a date or count days."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

import typer

from ... import elapsed, formatting
from ...context import FormatContext
from ...utils.time import parse_instant
from ..base import BaseCLI


class FormatStyle(str, Enum):
    DAY_MONTH = "day-month"
    TIME = "time"
    MONTH_YEAR = "month-year"
    LOCALIZED_TIME = "localized-time"
    MONTH = "month"
    DAY = "day"
    ISO = "iso"
    ELAPSED = "elapsed"
    MONTH_YEAR_SHORT = "month-year-short"


LocaleOption = Annotated[
    str | None,
    typer.Option("--locale", "-l", help="Locale tag (e.g. 'fr_CA'); defaults to the environment"),
]
TimezoneOption = Annotated[
    str | None,
    typer.Option("--tz", help="IANA display timezone; defaults to the environment"),
]


def build_context(locale: str | None, tz: str | None) -> FormatContext:
    """Start from the environment and apply command-line overrides."""
    context = FormatContext.from_environment()
    return FormatContext.create(
        locale=locale or context.locale,
        timezone=tz or context.timezone,
        clock=context.clock,
    )


def render(instant: str, style: FormatStyle, context: FormatContext, *, fixed: bool, short: bool) -> str:
    """Format an instant string in the requested style."""
    dt = parse_instant(instant)
    locale, tz = context.locale, context.timezone

    if style is FormatStyle.DAY_MONTH:
        return formatting.day_and_month(dt, fixed, tz, short, locale=locale)
    if style is FormatStyle.TIME:
        return formatting.time_of_day(dt, fixed, locale=locale, tz=tz)
    if style is FormatStyle.MONTH_YEAR:
        return formatting.month_and_year(dt, fixed, locale=locale, tz=tz)
    if style is FormatStyle.LOCALIZED_TIME:
        return formatting.localized_time(dt, fixed, locale=locale, tz=tz)
    if style is FormatStyle.MONTH:
        return formatting.month_name(dt, locale=locale, tz=tz)
    if style is FormatStyle.DAY:
        return formatting.day_of_month(dt, tz=tz)
    if style is FormatStyle.ISO:
        return formatting.iso_date(dt)
    if style is FormatStyle.ELAPSED:
        return elapsed.elapsed_interval(dt, locale=locale, tz=tz, now=context.now())
    return formatting.month_year_short(dt, tz=tz)


def format_command(
    instant: Annotated[
        str,
        typer.Argument(help="Date or datetime (YYYY-MM-DD or ISO 8601, UTC if no offset)"),
    ],
    style: Annotated[
        FormatStyle,
        typer.Option("--style", "-s", help="Output style"),
    ] = FormatStyle.DAY_MONTH,
    pattern: Annotated[
        str | None,
        typer.Option("--pattern", "-p", help="Custom pattern (e.g. 'yyyy-MM-dd HH:mm'); overrides --style"),
    ] = None,
    locale: LocaleOption = None,
    tz: TimezoneOption = None,
    fixed: Annotated[
        bool,
        typer.Option("--fixed", help="Render the stored fields without converting to --tz"),
    ] = False,
    short: Annotated[
        bool,
        typer.Option("--short", help="Abbreviated month names (day-month style)"),
    ] = False,
) -> None:
    """Format a date or datetime in one of the supported styles."""
    cli = BaseCLI("format")

    def _format() -> str:
        context = build_context(locale, tz)
        if pattern:
            return formatting.formatted_string(parse_instant(instant), pattern, tz=context.timezone)
        return render(instant, style, context, fixed=fixed, short=short)

    cli.handle_cli_operation(operation=pattern or style.value, op_callable=_format)


def days_between_command(
    start: Annotated[str, typer.Argument(help="Start date or datetime")],
    end: Annotated[str, typer.Argument(help="End date or datetime")],
    tz: TimezoneOption = None,
) -> None:
    """Count calendar days between two dates."""
    cli = BaseCLI("format")

    def _days() -> int:
        context = build_context(None, tz)
        return formatting.days_between(parse_instant(start), parse_instant(end), tz=context.timezone)

    cli.handle_cli_operation(operation="days", op_callable=_days)


def today_command(
    locale: LocaleOption = None,
    tz: TimezoneOption = None,
) -> None:
    """Show today's weekday name in long and short form."""
    cli = BaseCLI("format")

    def _today() -> dict[str, str]:
        context = build_context(locale, tz)
        now = context.now()
        return {
            "weekday": formatting.current_day_string(locale=context.locale, tz=context.timezone, now=now),
            "short": formatting.short_weekday_string(tz=context.timezone, now=now),
        }

    cli.handle_cli_operation(operation="today", op_callable=_today)
