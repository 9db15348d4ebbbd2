"""Helpers shared by CLI commands."""

from pathlib import Path

import typer

from geocaching_toolkit.alphabets import normalize_table
from geocaching_toolkit.settings import ToolkitSettings, get_default_settings


def load_settings(config: Path | None) -> ToolkitSettings:
    """Load settings from ``config`` or fall back to defaults, exiting on error."""
    if config is None:
        return get_default_settings()
    try:
        return ToolkitSettings.from_yaml(config)
    except FileNotFoundError:
        typer.echo(f"Error: Settings file not found: {config}", err=True)
        raise typer.Exit(1)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def apply_mappings(settings: ToolkitSettings, mappings: list[str] | None) -> None:
    """Merge ``LETTER=DIGITS`` pairs into the settings' letter table."""
    if not mappings:
        return
    raw: dict[str, str] = {}
    for pair in mappings:
        letter, sep, digits = pair.partition("=")
        if not sep or not letter.strip():
            typer.echo(f"Error: Invalid mapping '{pair}', expected LETTER=DIGITS", err=True)
            raise typer.Exit(1)
        raw[letter] = digits
    settings.letter_numbers.update(normalize_table(raw, settings.alphabet))
