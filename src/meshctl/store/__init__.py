"""Resource stores and their per-operation options."""

from meshctl.store.base import ResourceStore
from meshctl.store.options import (
    CreateOptions,
    DeleteOptions,
    GetOptions,
    ListOptions,
    UpdateOptions,
)
from meshctl.store.remote import RemoteStore

__all__ = [
    "CreateOptions",
    "DeleteOptions",
    "GetOptions",
    "ListOptions",
    "RemoteStore",
    "ResourceStore",
    "UpdateOptions",
]
