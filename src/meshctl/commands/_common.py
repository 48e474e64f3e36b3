"""Shared helpers for CLI commands: client factory and option aliases."""

from __future__ import annotations

from typing import Annotated

import typer

from meshctl.client.control_plane import ControlPlaneClient
from meshctl.config.manager import ConfigManager

# Shared Typer option type aliases
ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Control-plane profile"),
]
UrlOpt = Annotated[
    str | None,
    typer.Option("--url", help="Control-plane URL override"),
]
TokenOpt = Annotated[
    str | None,
    typer.Option("--token", help="API token override"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format (table, json, yaml)"),
]
MeshOpt = Annotated[
    str | None,
    typer.Option("--mesh", "-m", help="Mesh the resource belongs to"),
]


def make_client(
    profile: str | None,
    url: str | None,
    token: str | None,
) -> ControlPlaneClient:
    """Create a ControlPlaneClient from CLI options, env vars, or config profile."""
    mgr = ConfigManager()
    resolved = mgr.resolve_control_plane(profile_name=profile, url=url, token=token)
    return ControlPlaneClient(resolved)
