"""Root Typer app: global options and command group registration."""

from __future__ import annotations

import logging
from typing import Optional

import typer

from meshctl import __version__
from meshctl.commands import config_cmd, resource

app = typer.Typer(
    name="meshctl",
    help="CLI for managing service-mesh control-plane resources.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def version_callback(value: bool) -> None:
    if value:
        print(f"meshctl {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help=f"Logging level ({', '.join(LOG_LEVELS)})."
    ),
) -> None:
    """meshctl: inspect and change meshes, routes and policies."""
    if log_level:
        level = log_level.upper()
        if level not in LOG_LEVELS:
            raise typer.BadParameter(f"must be one of {', '.join(LOG_LEVELS)}", param_hint="--log-level")
        logging.basicConfig(level=level)


app.add_typer(config_cmd.app, name="config")
app.add_typer(resource.app, name="resource")


def main() -> None:
    app()
