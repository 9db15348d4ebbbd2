"""Coordinate conversion CLI commands."""

from pathlib import Path

import typer

from geocaching_toolkit.cli.common import load_settings
from geocaching_toolkit.cli.main import coord_app
from geocaching_toolkit.coordinate_converter import MapService
from geocaching_toolkit.coordinate_editor import CoordinateSession, parse_edit
from geocaching_toolkit.coordinates import AngularFormat


def _build_session(
    lat: str, lon: str, from_format: str | None, to_format: str | None, config: Path | None
) -> tuple[CoordinateSession, MapService]:
    settings = load_settings(config)
    try:
        session = CoordinateSession(
            from_format=AngularFormat.parse(from_format) if from_format else settings.input_format,
            to_format=AngularFormat.parse(to_format) if to_format else settings.output_format,
        )
        session.edit_latitude(parse_edit(lat, session.from_format, is_latitude=True))
        session.edit_longitude(parse_edit(lon, session.from_format, is_latitude=False))
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    return session, settings.map_service


@coord_app.command("convert")
def convert_command(
    lat: str = typer.Option(..., "--lat", help="Latitude, e.g. \"N 52 13.456\""),
    lon: str = typer.Option(..., "--lon", help="Longitude, e.g. \"E 21 0.500\""),
    from_format: str | None = typer.Option(
        None, "--from", help="Input notation: DD, DDM or DMS (default from settings)"
    ),
    to_format: str | None = typer.Option(
        None, "--to", help="Output notation: DD, DDM or DMS (default from settings)"
    ),
    config: Path | None = typer.Option(None, "--config", "-c", help="Settings YAML file"),
) -> None:
    """
    Convert a coordinate pair between notations.

    Example:
        geo coord convert --lat "N 52 13.456" --lon "E 21 0.5"
        geo coord convert --from DD --to DMS --lat 52.22427 --lon -0.5
    """
    session, _ = _build_session(lat, lon, from_format, to_format, config)
    typer.echo(session.formatted())


@coord_app.command("url")
def url_command(
    lat: str = typer.Option(..., "--lat", help="Latitude in the input notation"),
    lon: str = typer.Option(..., "--lon", help="Longitude in the input notation"),
    from_format: str | None = typer.Option(
        None, "--from", help="Input notation: DD, DDM or DMS (default from settings)"
    ),
    service: str | None = typer.Option(
        None, "--service", "-s", help="Map service: apple or google (default from settings)"
    ),
    config: Path | None = typer.Option(None, "--config", "-c", help="Settings YAML file"),
) -> None:
    """
    Print a map link for a coordinate pair.

    Example:
        geo coord url --lat "N 52 13.456" --lon "E 21 0.5" --service apple
    """
    session, default_service = _build_session(lat, lon, from_format, None, config)
    try:
        map_service = MapService.parse(service) if service else default_service
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    url = session.map_url(map_service)
    if url is None:
        typer.echo("Error: Could not build map URL", err=True)
        raise typer.Exit(1)
    typer.echo(url)
