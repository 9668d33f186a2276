"""CLI command for the opening-hours check."""

from __future__ import annotations

from typing import Annotated

import typer

from ...store_hours import TimeFormatConvention, is_store_opened
from ..base import BaseCLI
from .format import TimezoneOption, build_context


def store_open_command(
    begin: Annotated[str, typer.Argument(help="Opening time, e.g. '09h00' or '09:00 AM'")],
    end: Annotated[str, typer.Argument(help="Closing time, e.g. '17h00' or '05:00 PM'")],
    convention: Annotated[
        TimeFormatConvention,
        typer.Option("--convention", "-c", help="How the times are written"),
    ] = TimeFormatConvention.FRENCH,
    store_tz: Annotated[
        str | None,
        typer.Option("--store-tz", help="IANA zone the opening hours are expressed in"),
    ] = None,
    tz: TimezoneOption = None,
) -> None:
    """Check whether a store is open now.

    Exits with code 1 if either time cannot be parsed with the convention.
    """
    cli = BaseCLI("store")

    def _check() -> bool:
        context = build_context(None, tz)
        return is_store_opened(
            begin,
            end,
            convention,
            store_tz,
            tz=context.timezone,
            now=context.now(),
        )

    cli.handle_cli_operation(operation="open", op_callable=_check)
