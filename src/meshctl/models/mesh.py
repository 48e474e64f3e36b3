"""Built-in resource kinds served by the control plane."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from meshctl.models.resource import Resource, ResourceScope, ResourceSpec


class _Wire(BaseModel):
    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        alias_generator=to_camel,
    )


class Selector(_Wire):
    """Tag match used to select sources or destinations."""

    match: dict[str, str] = Field(default_factory=dict)


class CertificateAuthority(_Wire):
    builtin: dict[str, Any] | None = None
    provided: dict[str, Any] | None = None


class MeshMtls(_Wire):
    enabled: bool | None = None
    ca: CertificateAuthority | None = None


class Mesh(ResourceSpec):
    """Mesh-wide settings."""

    mtls: MeshMtls | None = None
    logging: dict[str, Any] | None = None
    tracing: dict[str, Any] | None = None


class WeightedDestination(_Wire):
    weight: int = 0
    destination: dict[str, str] = Field(default_factory=dict)


class TrafficRoute(ResourceSpec):
    """Split traffic between destination subsets."""

    sources: list[Selector] | None = None
    destinations: list[Selector] | None = None
    conf: list[WeightedDestination] | None = None


class TrafficPermission(ResourceSpec):
    """Allow traffic from sources to destinations."""

    sources: list[Selector] | None = None
    destinations: list[Selector] | None = None


class FaultDelay(_Wire):
    percentage: float | None = None
    value: str | None = Field(default=None, description="Duration, e.g. 5s")


class FaultAbort(_Wire):
    percentage: float | None = None
    http_status: int | None = None


class FaultResponseBandwidth(_Wire):
    percentage: float | None = None
    limit: str | None = Field(default=None, description="Rate, e.g. 50 mbps")


class FaultInjectionConf(_Wire):
    delay: FaultDelay | None = None
    abort: FaultAbort | None = None
    response_bandwidth: FaultResponseBandwidth | None = None


class FaultInjection(ResourceSpec):
    """Inject delays, aborts or bandwidth limits between services."""

    sources: list[Selector] | None = None
    destinations: list[Selector] | None = None
    conf: FaultInjectionConf | None = None


class MeshResource(Resource):
    resource_type: ClassVar[str] = "Mesh"
    scope: ClassVar[ResourceScope] = ResourceScope.GLOBAL

    spec: Mesh = Field(default_factory=Mesh)


class TrafficRouteResource(Resource):
    resource_type: ClassVar[str] = "TrafficRoute"

    spec: TrafficRoute = Field(default_factory=TrafficRoute)


class TrafficPermissionResource(Resource):
    resource_type: ClassVar[str] = "TrafficPermission"

    spec: TrafficPermission = Field(default_factory=TrafficPermission)


class FaultInjectionResource(Resource):
    resource_type: ClassVar[str] = "FaultInjection"

    spec: FaultInjection = Field(default_factory=FaultInjection)
