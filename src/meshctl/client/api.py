"""Resolution of resource types to control-plane URL paths."""

from __future__ import annotations

from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

from meshctl.client.errors import ConfigurationError
from meshctl.models.mesh import (
    FaultInjectionResource,
    MeshResource,
    TrafficPermissionResource,
    TrafficRouteResource,
)
from meshctl.models.resource import Resource, ResourceScope

MESHES_COLLECTION = "meshes"


def _segment(value: str, what: str) -> str:
    if not value:
        raise ConfigurationError(f"cannot build a resource URL with an empty {what}")
    return quote(value, safe="")


class ResourceApi(BaseModel):
    """URL scheme of one resource kind."""

    model_config = ConfigDict(frozen=True)

    resource_type: str
    collection: str
    scope: ResourceScope = ResourceScope.MESH

    @classmethod
    def for_resource(cls, resource_class: type[Resource], collection: str) -> ResourceApi:
        return cls(
            resource_type=resource_class.resource_type,
            collection=collection,
            scope=resource_class.scope,
        )

    def list_path(self, mesh: str = "") -> str:
        if self.scope is ResourceScope.GLOBAL:
            return f"/{self.collection}"
        return f"/{MESHES_COLLECTION}/{_segment(mesh, 'mesh')}/{self.collection}"

    def item_path(self, mesh: str, name: str) -> str:
        return f"{self.list_path(mesh)}/{_segment(name, 'name')}"


class ApiDescriptor(BaseModel):
    """Registry of the URL schemes the control plane serves, keyed by type."""

    model_config = ConfigDict(frozen=True)

    resources: dict[str, ResourceApi] = Field(default_factory=dict)

    @classmethod
    def from_resources(
        cls, collections: dict[type[Resource], str],
    ) -> ApiDescriptor:
        return cls(resources={
            resource_class.resource_type: ResourceApi.for_resource(resource_class, collection)
            for resource_class, collection in collections.items()
        })

    def get_resource_api(self, resource_type: str) -> ResourceApi:
        try:
            return self.resources[resource_type]
        except KeyError:
            raise ConfigurationError(f"unknown resource type {resource_type!r}") from None


RESOURCE_COLLECTIONS: dict[type[Resource], str] = {
    MeshResource: MESHES_COLLECTION,
    TrafficRouteResource: "traffic-routes",
    TrafficPermissionResource: "traffic-permissions",
    FaultInjectionResource: "fault-injections",
}


def default_api_descriptor() -> ApiDescriptor:
    """Descriptor covering every built-in resource kind."""
    return ApiDescriptor.from_resources(RESOURCE_COLLECTIONS)


def resource_class_for_collection(collection: str) -> type[Resource]:
    """Look up a built-in kind by its collection name, e.g. ``traffic-routes``."""
    for resource_class, name in RESOURCE_COLLECTIONS.items():
        if name == collection:
            return resource_class
    known = ", ".join(sorted(RESOURCE_COLLECTIONS.values()))
    raise ConfigurationError(f"unknown resource collection {collection!r} (known: {known})")


def resource_class_for_type(resource_type: str) -> type[Resource]:
    """Look up a built-in kind by its type tag, e.g. ``TrafficRoute``."""
    for resource_class in RESOURCE_COLLECTIONS:
        if resource_class.resource_type == resource_type:
            return resource_class
    raise ConfigurationError(f"unknown resource type {resource_type!r}")
