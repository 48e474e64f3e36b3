"""Config commands: manage control-plane profiles."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console

from meshctl.client.errors import error_handler
from meshctl.config.manager import ConfigManager
from meshctl.config.models import ControlPlaneProfile
from meshctl.output.formatter import output

app = typer.Typer(name="config", help="Manage control-plane profiles and CLI configuration.")
console = Console()


def _get_manager() -> ConfigManager:
    return ConfigManager()


@app.command()
@error_handler
def add(
    name: Annotated[str, typer.Argument(help="Profile name")],
    url: Annotated[str, typer.Option("--url", "-u", help="Control-plane API URL")],
    token: Annotated[Optional[str], typer.Option("--token", "-t", help="API token")] = None,
    no_verify_ssl: Annotated[bool, typer.Option("--no-verify-ssl", help="Disable SSL verification")] = False,
    timeout: Annotated[float, typer.Option("--timeout", help="Request timeout in seconds")] = 30.0,
    set_default: Annotated[bool, typer.Option("--default", help="Set as default profile")] = False,
) -> None:
    """Add a control-plane profile."""
    mgr = _get_manager()
    profile = ControlPlaneProfile(
        name=name,
        url=url,
        token=token,
        verify_ssl=not no_verify_ssl,
        timeout=timeout,
    )
    mgr.add_profile(profile)
    if set_default:
        mgr.set_default(name)
    console.print(f"[green]Profile '{name}' added.[/]")


@app.command("list")
@error_handler
def list_profiles(
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """List all configured profiles."""
    mgr = _get_manager()
    profiles = mgr.config.profiles
    if not profiles:
        console.print("[yellow]No profiles configured. Run 'meshctl config add' to get started.[/]")
        return

    default = mgr.config.default_profile
    rows = [
        [name, p.url, "token" if p.token else "none", "*" if name == default else ""]
        for name, p in profiles.items()
    ]
    output(
        {"profiles": [p.model_dump(exclude={"token"}) for p in profiles.values()]},
        fmt,
        columns=["Name", "URL", "Auth", "Default"],
        rows=rows,
    )


@app.command()
@error_handler
def remove(
    name: Annotated[str, typer.Argument(help="Profile name")],
) -> None:
    """Remove a profile."""
    mgr = _get_manager()
    if not mgr.remove_profile(name):
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)
    console.print(f"[green]Profile '{name}' removed.[/]")


@app.command()
@error_handler
def use(
    name: Annotated[str, typer.Argument(help="Profile name")],
) -> None:
    """Set the default profile."""
    mgr = _get_manager()
    if not mgr.set_default(name):
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)
    console.print(f"[green]Default profile set to '{name}'.[/]")
