"""Resource commands: list, show, apply and delete control-plane resources.

Resource kinds are addressed by their collection name, for example:
  - ``meshes``
  - ``traffic-routes``
  - ``traffic-permissions``
  - ``fault-injections``
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich.console import Console

from meshctl.client.api import (
    RESOURCE_COLLECTIONS,
    resource_class_for_collection,
    resource_class_for_type,
)
from meshctl.client.errors import ResourceNotFoundError, error_handler
from meshctl.commands._common import (
    FormatOpt,
    MeshOpt,
    ProfileOpt,
    TokenOpt,
    UrlOpt,
    make_client,
)
from meshctl.models.resource import Resource, ResourceList, ResourceScope
from meshctl.models.rest import from_envelope, resource_to_dict
from meshctl.output.formatter import output
from meshctl.store.options import (
    CreateOptions,
    DeleteOptions,
    GetOptions,
    ListOptions,
)

app = typer.Typer(
    name="resource",
    help="List, show, apply and delete control-plane resources.",
)
console = Console()

CollectionArg = Annotated[
    str,
    typer.Argument(
        help=f"Resource collection ({', '.join(RESOURCE_COLLECTIONS.values())})",
    ),
]


def _columns(resource_class: type[Resource]) -> list[str]:
    if resource_class.scope is ResourceScope.GLOBAL:
        return ["Name"]
    return ["Mesh", "Name"]


def _row(resource: Resource) -> list[str]:
    meta = resource.meta
    if meta is None:
        return [""] * len(_columns(type(resource)))
    if resource.scope is ResourceScope.GLOBAL:
        return [meta.name]
    return [meta.mesh, meta.name]


@app.command("list")
@error_handler
def list_resources(
    collection: CollectionArg,
    mesh: MeshOpt = None,
    size: Annotated[
        int,
        typer.Option("--size", min=0, help="Page size (0 = server default)"),
    ] = 0,
    offset: Annotated[
        str,
        typer.Option("--offset", help="Page offset returned by the server"),
    ] = "",
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List resources of a collection."""
    resource_class = resource_class_for_collection(collection)
    opts = ListOptions(mesh=mesh or "").with_page(size, offset)
    resources = ResourceList(resource_class)
    with make_client(profile, url, token) as client:
        client.store.list(resources, opts)
    output(
        {"items": [resource_to_dict(r) for r in resources]},
        fmt,
        columns=_columns(resource_class),
        rows=[_row(r) for r in resources],
    )


@app.command()
@error_handler
def show(
    collection: CollectionArg,
    name: Annotated[str, typer.Argument(help="Resource name")],
    mesh: MeshOpt = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show a single resource."""
    resource_class = resource_class_for_collection(collection)
    resource = resource_class()
    with make_client(profile, url, token) as client:
        client.store.get(resource, GetOptions.by_key(name, mesh or ""))
    output(resource_to_dict(resource), fmt, title=f"{collection}/{name}")


@app.command()
@error_handler
def apply(
    file: Annotated[
        Path,
        typer.Option(
            "--file", "-F",
            exists=True, dir_okay=False, readable=True,
            help="JSON or YAML resource envelope",
        ),
    ],
    name: Annotated[
        str | None,
        typer.Option("--name", "-n", help="Override the resource name"),
    ] = None,
    mesh: MeshOpt = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Create a resource, or replace it if it already exists."""
    try:
        data = yaml.safe_load(file.read_text())
    except yaml.YAMLError as exc:
        raise ValueError(f"Cannot parse {file}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"{file} does not contain a resource object")
    resource_class = resource_class_for_type(str(data.get("type", "")))
    resource = resource_class()
    from_envelope(data, resource)
    target_name = name or str(data.get("name") or "")
    target_mesh = mesh or str(data.get("mesh") or "")
    if not target_name:
        raise ValueError(f"{file} has no name; pass --name")
    target_mesh = target_mesh or resource_class.default_mesh(target_name)

    with make_client(profile, url, token) as client:
        existing = resource_class()
        try:
            client.store.get(existing, GetOptions.by_key(target_name, target_mesh))
        except ResourceNotFoundError:
            client.store.create(resource, CreateOptions.by_key(target_name, target_mesh))
            action = "created"
        else:
            resource.meta = existing.meta
            client.store.update(resource)
            action = "updated"
    console.print(
        f"[green]{resource_class.resource_type} '{target_name}' {action}.[/]"
    )


@app.command()
@error_handler
def delete(
    collection: CollectionArg,
    name: Annotated[str, typer.Argument(help="Resource name")],
    mesh: MeshOpt = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Delete a resource."""
    resource_class = resource_class_for_collection(collection)
    with make_client(profile, url, token) as client:
        client.store.delete(resource_class(), DeleteOptions.by_key(name, mesh or ""))
    console.print(f"[green]{resource_class.resource_type} '{name}' deleted.[/]")
