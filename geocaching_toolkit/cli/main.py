"""Main Typer CLI application for geocaching tools."""

import logging

import typer

app = typer.Typer(
    help="Geocaching puzzle tools: coordinate conversion, compass and lock codes",
    no_args_is_help=True,
)

coord_app = typer.Typer(help="Coordinate conversion commands")
config_app = typer.Typer(help="Settings file commands")

app.add_typer(coord_app, name="coord")
app.add_typer(config_app, name="config")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Geocaching puzzle tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s - %(message)s',
    )


def _register_commands() -> None:
    """
    Import command modules to register commands with their respective apps.

    Commands use decorators like @coord_app.command() which register
    themselves when the module is imported.
    """
    from geocaching_toolkit.cli import config, coordinate, letters

    # Avoid "imported but unused" warnings by explicitly using the module
    _ = config
    _ = coordinate
    _ = letters


_register_commands()


if __name__ == "__main__":
    app()
