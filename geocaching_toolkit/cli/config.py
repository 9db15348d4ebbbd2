"""Settings file CLI commands."""

from pathlib import Path

import typer
import yaml

from geocaching_toolkit.cli.common import load_settings
from geocaching_toolkit.cli.main import config_app
from geocaching_toolkit.settings import SETTINGS_SECTION, get_default_settings


@config_app.command("init")
def init_command(
    path: Path = typer.Argument(..., help="Where to write the settings YAML"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """
    Write default settings to a YAML file.

    Example:
        geo config init geocaching.yaml
    """
    if path.exists() and not force:
        typer.echo(f"Error: {path} already exists (use --force to overwrite)", err=True)
        raise typer.Exit(1)

    get_default_settings().save_to_yaml(path)
    typer.echo(f"Settings saved to: {path}")


@config_app.command("show")
def show_command(
    path: Path | None = typer.Argument(None, help="Settings YAML (default: built-in defaults)"),
) -> None:
    """
    Print the effective settings as YAML.

    Example:
        geo config show geocaching.yaml
    """
    settings = load_settings(path)
    typer.echo(
        yaml.safe_dump(
            {SETTINGS_SECTION: settings.to_dict()},
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ).rstrip()
    )
