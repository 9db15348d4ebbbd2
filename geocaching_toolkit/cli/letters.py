"""Compass and lock CLI commands."""

from pathlib import Path

import typer

from geocaching_toolkit.cli.common import apply_mappings, load_settings
from geocaching_toolkit.cli.main import app
from geocaching_toolkit.compass import CompassInputs
from geocaching_toolkit.lock import LockInputs

_MAP_HELP = "Letter mapping LETTER=DIGITS, repeatable (added to the settings table)"


@app.command("compass")
def compass_command(
    azimuth: str = typer.Option(
        "", "--azimuth", "-a", help="Azimuth letters in slot order, space for an empty slot"
    ),
    distance: str = typer.Option(
        "", "--distance", "-d", help="Distance letters in slot order, space for an empty slot"
    ),
    mappings: list[str] | None = typer.Option(None, "--map", "-m", help=_MAP_HELP),
    heading: float | None = typer.Option(
        None, "--heading", help="Device heading in degrees, prints the needle angle"
    ),
    config: Path | None = typer.Option(None, "--config", "-c", help="Settings YAML file"),
) -> None:
    """
    Decode azimuth and distance from letter slots.

    The distance row is read from its last slot to its first.

    Example:
        geo compass -a ABC -d ABC -m A=1 -m B=2 -m C=3
    """
    settings = load_settings(config)
    apply_mappings(settings, mappings)

    inputs = CompassInputs.from_letters(azimuth=azimuth, distance=distance)
    reading = inputs.reading(settings.letter_numbers, settings.alphabet)

    azimuth_value = "-" if reading.azimuth is None else f"{reading.azimuth}°"
    distance_value = "-" if reading.distance is None else str(reading.distance)
    typer.echo(f"Azimuth:  {reading.azimuth_text}  ({azimuth_value})")
    typer.echo(f"Distance: {reading.distance_text}  ({distance_value})")

    if heading is not None:
        angle = reading.needle_angle(heading)
        typer.echo(f"Needle:   {'-' if angle is None else f'{angle:.1f}°'}")


@app.command("lock")
def lock_command(
    letters: str = typer.Argument(..., help="Lock letters in dial order, space for an empty dial"),
    digits: int | None = typer.Option(
        None, "--digits", "-n", help="Number of dials, 3-10 (default from settings)"
    ),
    mappings: list[str] | None = typer.Option(None, "--map", "-m", help=_MAP_HELP),
    config: Path | None = typer.Option(None, "--config", "-c", help="Settings YAML file"),
) -> None:
    """
    Build the lock code from letters.

    Example:
        geo lock "A CD" -n 4 -m A=5 -m C=7 -m D=9
    """
    settings = load_settings(config)
    apply_mappings(settings, mappings)

    try:
        lock = LockInputs.from_letters(letters, digits if digits is not None else settings.lock_digits)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    code = lock.code(settings.letter_numbers, settings.alphabet)
    typer.echo(f"Code: {code}")

    copy_value = lock.copy_value(settings.letter_numbers, settings.alphabet)
    if copy_value is None:
        typer.echo("No digits resolved yet")
    else:
        typer.echo(f"Copy: {copy_value}")
