"""Generic resource envelope models."""

from __future__ import annotations

import enum
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_MESH = "default"


class ResourceScope(str, enum.Enum):
    """Where a resource kind lives in the control-plane URL space."""

    MESH = "mesh"
    GLOBAL = "global"


class ResourceMeta(BaseModel):
    """Identity of a stored resource."""

    model_config = ConfigDict(frozen=True)

    name: str
    mesh: str
    version: str = ""


class ResourceSpec(BaseModel):
    """Kind-specific payload.

    Fields are exchanged in camelCase. Fields never set are omitted on the
    wire; explicit nulls and fields this client does not model are carried
    through untouched.
    """

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class Resource(BaseModel):
    """A named, typed configuration object stored in the control plane."""

    resource_type: ClassVar[str] = ""
    scope: ClassVar[ResourceScope] = ResourceScope.MESH

    meta: ResourceMeta | None = None
    spec: ResourceSpec = Field(default_factory=ResourceSpec)

    @classmethod
    def spec_class(cls) -> type[ResourceSpec]:
        annotation = cls.model_fields["spec"].annotation
        if isinstance(annotation, type) and issubclass(annotation, ResourceSpec):
            return annotation
        return ResourceSpec

    @classmethod
    def default_mesh(cls, name: str) -> str:
        """Mesh to use when a caller addresses *name* without one."""
        if cls.scope is ResourceScope.GLOBAL:
            return name
        return DEFAULT_MESH


R = TypeVar("R", bound=Resource)


class ResourceList(Generic[R]):
    """Ordered collection of resources of a single kind."""

    def __init__(self, item_class: type[R]) -> None:
        self.item_class = item_class
        self.items: list[R] = []

    @property
    def item_type(self) -> str:
        return self.item_class.resource_type

    def new_item(self) -> R:
        return self.item_class()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)
