"""Command line interface for schema_reset.

Usage:
    schema-reset migrations reset [--connection NAME] [--force]
    schema-reset migrations connections
"""

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from .config import ConnectionProvider, ResetSettings
from .connectors import SqlAlchemyConnection
from .exceptions import ConnectionNotConfiguredError, UnsupportedPlatformError
from .resetter import SchemaResetter
from .utils import configure_logging

app = typer.Typer(help="Database schema maintenance commands.", no_args_is_help=True)
migrations_app = typer.Typer(help="Migration maintenance commands.", no_args_is_help=True)
app.add_typer(migrations_app, name="migrations")

CONFIRMATION_PROMPT = (
    "This will drop every table and sequence in the database. "
    "Do you really wish to run this command?"
)


def _load_settings(config: Optional[Path], log_level: Optional[str]) -> ResetSettings:
    load_dotenv()
    overrides = {}
    if config is not None:
        overrides["config_file"] = config
    if log_level is not None:
        overrides["log_level"] = log_level
    return ResetSettings(**overrides)


@migrations_app.command()
def reset(
    connection: Optional[str] = typer.Option(
        None, "--connection", help="For a specific connection (defaults to the default connection)."
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Skip the confirmation prompt."),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to the connections YAML file."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING or ERROR."),
):
    """Reset all migrations by dropping every table and sequence."""
    settings = _load_settings(config, log_level)
    configure_logging(settings.log_level)

    if not force and not typer.confirm(CONFIRMATION_PROMPT, default=False):
        typer.echo("Command cancelled.")
        return

    try:
        provider = ConnectionProvider.from_settings(settings)
        engine = provider.get_for_connection(connection)
    except (ConnectionNotConfiguredError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        with engine.begin() as conn:
            SchemaResetter().reset(SqlAlchemyConnection(conn))
    except UnsupportedPlatformError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    finally:
        engine.dispose()

    typer.echo("Database was reset")


@migrations_app.command()
def connections(
    config: Optional[Path] = typer.Option(None, "--config", help="Path to the connections YAML file."),
):
    """List the configured connections."""
    settings = _load_settings(config, None)

    try:
        provider = ConnectionProvider.from_settings(settings)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    names = provider.available_connections()
    if not names:
        typer.echo("No connections configured.")
        return

    for name in names:
        marker = " (default)" if name == provider.default_connection else ""
        typer.echo(f"  {name}{marker}")


def main():
    app()


if __name__ == "__main__":
    main()
