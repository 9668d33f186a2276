from __future__ import annotations

from typing import Annotated

import typer

from .base import configure_logging, set_verbose
from .commands.format import days_between_command, format_command, today_command
from .commands.locale import locale_command
from .commands.store import store_open_command

configure_logging()
app = typer.Typer(
    help="Date and time formatting helpers",
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("format")(format_command)
app.command("days-between")(days_between_command)
app.command("today")(today_command)
app.command("store-open")(store_open_command)


@app.callback()
def callback(
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Enable debug logging"),
    ] = False,
) -> None:
    """Date and time formatting helpers."""
    set_verbose(verbose)


@app.command("locale")
def locale(
    tags: Annotated[
        list[str],
        typer.Argument(help="Locale tags to classify (e.g., 'fr_CA', 'en-US')"),
    ],
) -> None:
    """Show how locale tags are classified.

    Prints the language subtag, the French/English bucket, the two-letter
    identifier and the loose is-French/is-English flags for each tag.

    Args:
        tags: Locale tags to classify.
    """
    locale_command(tags=tags)


def main() -> None:
    """Main entry point for package CLI.

    Invokes the Typer application, which handles command parsing and
    execution.

    Side Effects:
        - Processes CLI arguments and executes commands.
        - May exit with non-zero code on errors.
    """
    app()


if __name__ == "__main__":
    main()
