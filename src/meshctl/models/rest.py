"""Flattened JSON envelope shared by every resource kind.

A resource travels as one JSON object holding ``type``, ``name`` and ``mesh``
next to the fields of its spec::

    {"type": "TrafficRoute", "mesh": "default", "name": "web", "sources": [...]}

Lists are wrapped as ``{"items": [<envelope>, ...]}``.
"""

from __future__ import annotations

import json
from typing import Any

from meshctl.models.resource import Resource, ResourceList, ResourceMeta

ENVELOPE_KEYS = ("type", "name", "mesh")


class EnvelopeError(ValueError):
    """Payload is not a valid envelope for the expected resource kind."""


def to_envelope(resource_type: str, name: str, mesh: str, spec: dict[str, Any]) -> dict[str, Any]:
    envelope = {key: value for key, value in spec.items() if key not in ENVELOPE_KEYS}
    envelope.update(type=resource_type, name=name, mesh=mesh)
    return envelope


def marshal(resource: Resource, name: str, mesh: str) -> bytes:
    """Encode *resource* addressed as ``(mesh, name)``."""
    envelope = to_envelope(resource.resource_type, name, mesh, resource.spec.to_wire())
    return json.dumps(envelope).encode()


def resource_to_dict(resource: Resource) -> dict[str, Any]:
    """Envelope view of a resource that already carries meta."""
    meta = resource.meta
    return to_envelope(
        resource.resource_type,
        meta.name if meta else "",
        meta.mesh if meta else "",
        resource.spec.to_wire(),
    )


def from_envelope(data: Any, resource: Resource, *, name: str = "", mesh: str = "") -> None:
    """Fill *resource* from a decoded envelope.

    *name* and *mesh* stand in for keys the envelope leaves out or empty.
    """
    if not isinstance(data, dict):
        raise EnvelopeError(f"expected a JSON object, got {type(data).__name__}")
    fields = dict(data)
    resource_type = fields.pop("type", None)
    if resource_type != resource.resource_type:
        raise EnvelopeError(
            f"expected type {resource.resource_type!r}, got {resource_type!r}"
        )
    envelope_name = fields.pop("name", None) or name
    envelope_mesh = fields.pop("mesh", None) or mesh
    if not isinstance(envelope_name, str) or not isinstance(envelope_mesh, str):
        raise EnvelopeError("name and mesh must be strings")
    resource.spec = resource.spec_class().model_validate(fields)
    resource.meta = ResourceMeta(name=envelope_name, mesh=envelope_mesh, version="")


def unmarshal(body: bytes, resource: Resource, *, name: str = "", mesh: str = "") -> None:
    try:
        data = json.loads(body)
    except ValueError as exc:
        raise EnvelopeError(str(exc)) from exc
    from_envelope(data, resource, name=name, mesh=mesh)


def unmarshal_list(body: bytes, resource_list: ResourceList[Any]) -> None:
    try:
        data = json.loads(body)
    except ValueError as exc:
        raise EnvelopeError(str(exc)) from exc
    if not isinstance(data, dict):
        raise EnvelopeError(f"expected a JSON object, got {type(data).__name__}")
    raw_items = data.get("items")
    if raw_items is None:
        raw_items = []
    if not isinstance(raw_items, list):
        raise EnvelopeError("'items' must be a list")
    items = []
    for index, raw in enumerate(raw_items):
        item = resource_list.new_item()
        from_envelope(raw, item)
        if not item.meta.name:
            raise EnvelopeError(f"item {index} has no name")
        items.append(item)
    resource_list.items = items
