"""CLI command that shows how a locale tag is classified."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from ...locales import current_language, is_english, is_french, language_code, locale_identifier
from ..base import get_logger

logger = get_logger(__name__)


def describe_locale(tag: str) -> dict[str, str | bool | None]:
    """Return every classification of a locale tag."""
    return {
        "language_code": language_code(tag),
        "language": current_language(tag).name.lower(),
        "identifier": locale_identifier(tag),
        "is_french": is_french(tag),
        "is_english": is_english(tag),
    }


def locale_command(
    tags: list[str],
    console: Console | None = None,
) -> None:
    """Print a table of language, identifier and French/English flags.

    Args:
        tags: Locale tags to classify.
        console: Rich Console instance (None to create new).
    """
    console = console or Console()
    table = Table(title="Locale classification")
    table.add_column("tag", style="cyan")
    for column in ("language_code", "language", "identifier", "is_french", "is_english"):
        table.add_column(column)

    for tag in tags:
        info = describe_locale(tag)
        logger.debug("Locale %r -> %s", tag, info)
        table.add_row(tag, *(str(value) for value in info.values()))

    console.print(table)
