"""Pydantic data models for control-plane resources."""

from meshctl.models.common import ErrorCause, ErrorResponse
from meshctl.models.mesh import (
    FaultInjection,
    FaultInjectionResource,
    Mesh,
    MeshResource,
    TrafficPermission,
    TrafficPermissionResource,
    TrafficRoute,
    TrafficRouteResource,
)
from meshctl.models.resource import (
    DEFAULT_MESH,
    Resource,
    ResourceList,
    ResourceMeta,
    ResourceScope,
    ResourceSpec,
)

__all__ = [
    "DEFAULT_MESH",
    "ErrorCause",
    "ErrorResponse",
    "FaultInjection",
    "FaultInjectionResource",
    "Mesh",
    "MeshResource",
    "Resource",
    "ResourceList",
    "ResourceMeta",
    "ResourceScope",
    "ResourceSpec",
    "TrafficPermission",
    "TrafficPermissionResource",
    "TrafficRoute",
    "TrafficRouteResource",
]
