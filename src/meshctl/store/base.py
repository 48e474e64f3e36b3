"""Storage-agnostic contract for resource persistence."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from meshctl.models.resource import Resource, ResourceList
from meshctl.store.options import (
    CreateOptions,
    DeleteOptions,
    GetOptions,
    ListOptions,
    UpdateOptions,
)


class ResourceStore(ABC):
    """Abstract base class for create/read/update/list/delete of resources.

    ``timeout`` bounds a single call in seconds; ``None`` leaves it to the
    backing implementation.
    """

    @abstractmethod
    def create(
        self,
        resource: Resource,
        options: CreateOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        """Store a new resource under the name and mesh given in *options*."""

    @abstractmethod
    def update(
        self,
        resource: Resource,
        options: UpdateOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        """Replace a resource identified by its own meta."""

    @abstractmethod
    def get(
        self,
        resource: Resource,
        options: GetOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        """Load the resource named in *options* into *resource*."""

    @abstractmethod
    def list(
        self,
        resource_list: ResourceList[Any],
        options: ListOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        """Fill *resource_list* with resources of its item type."""

    @abstractmethod
    def delete(
        self,
        resource: Resource,
        options: DeleteOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        """Remove the resource named in *options*."""
