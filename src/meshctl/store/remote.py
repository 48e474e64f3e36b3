"""Resource store backed by the control-plane HTTP API."""

from __future__ import annotations

import logging
from typing import Any, Callable, Protocol

import httpx

from meshctl.client.api import ApiDescriptor, ResourceApi
from meshctl.client.errors import (
    ConfigurationError,
    ResourceNotFoundError,
    ResponseDecodeError,
    TransportError,
    translate_error,
)
from meshctl.models.resource import Resource, ResourceList, ResourceMeta
from meshctl.models.rest import marshal, unmarshal, unmarshal_list
from meshctl.store.base import ResourceStore
from meshctl.store.options import (
    CreateOptions,
    DeleteOptions,
    GetOptions,
    ListOptions,
    UpdateOptions,
)

_LOGGER = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


class HttpClient(Protocol):
    """The part of ``httpx.Client`` the store relies on."""

    def build_request(self, method: str, url: str, **kwargs: Any) -> httpx.Request: ...

    def send(self, request: httpx.Request) -> httpx.Response: ...


def _resolve_key(resource_class: type[Resource], name: str, mesh: str) -> tuple[str, str]:
    if not name:
        raise ConfigurationError(
            f"a name is required to address a {resource_class.resource_type!r}"
        )
    return name, mesh or resource_class.default_mesh(name)


class RemoteStore(ResourceStore):
    """``ResourceStore`` that talks JSON to a remote control plane.

    The injected client owns base URL, auth, pooling and default timeouts;
    the store itself keeps no state between calls.
    """

    def __init__(self, client: HttpClient, api: ApiDescriptor) -> None:
        self._client = client
        self._api = api

    def create(
        self,
        resource: Resource,
        options: CreateOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        opts = options or CreateOptions()
        resource_api = self._resource_api(resource.resource_type, "create")
        name, mesh = _resolve_key(type(resource), opts.name, opts.mesh)
        self._upsert(resource_api, resource, name, mesh, timeout)

    def update(
        self,
        resource: Resource,
        options: UpdateOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        _ = options or UpdateOptions()
        resource_api = self._resource_api(resource.resource_type, "update")
        if resource.meta is None:
            raise ConfigurationError(
                f"cannot update a {resource.resource_type!r} that has no meta"
            )
        self._upsert(resource_api, resource, resource.meta.name, resource.meta.mesh, timeout)

    def _upsert(
        self,
        resource_api: ResourceApi,
        resource: Resource,
        name: str,
        mesh: str,
        timeout: float | None,
    ) -> None:
        request = self._build_request(
            "PUT",
            resource_api.item_path(mesh, name),
            timeout,
            content=marshal(resource, name, mesh),
            headers={"Content-Type": JSON_CONTENT_TYPE},
        )
        status_code, body = self._do_request(request)
        translate_error(status_code, body, expected=(200, 201))
        resource.meta = ResourceMeta(name=name, mesh=mesh, version="")

    def get(
        self,
        resource: Resource,
        options: GetOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        opts = options or GetOptions()
        resource_api = self._resource_api(resource.resource_type, "fetch")
        name, mesh = _resolve_key(type(resource), opts.name, opts.mesh)
        request = self._build_request("GET", resource_api.item_path(mesh, name), timeout)
        status_code, body = self._do_request(request)
        translate_error(
            status_code,
            body,
            expected=(200,),
            not_found=ResourceNotFoundError(resource.resource_type, name, mesh),
        )
        _decode(status_code, lambda: unmarshal(body, resource, name=name, mesh=mesh))

    def list(
        self,
        resource_list: ResourceList[Any],
        options: ListOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        opts = options or ListOptions()
        resource_api = self._resource_api(resource_list.item_type, "list")
        mesh = opts.mesh or resource_list.item_class.default_mesh("")
        request = self._build_request(
            "GET",
            resource_api.list_path(mesh),
            timeout,
            params=opts.query_params() or None,
        )
        status_code, body = self._do_request(request)
        translate_error(status_code, body, expected=(200,))
        _decode(status_code, lambda: unmarshal_list(body, resource_list))

    def delete(
        self,
        resource: Resource,
        options: DeleteOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        opts = options or DeleteOptions()
        resource_api = self._resource_api(resource.resource_type, "delete")
        name, mesh = _resolve_key(type(resource), opts.name, opts.mesh)
        request = self._build_request("DELETE", resource_api.item_path(mesh, name), timeout)
        status_code, body = self._do_request(request)
        translate_error(
            status_code,
            body,
            expected=(200,),
            not_found=ResourceNotFoundError(resource.resource_type, name, mesh),
        )

    def _resource_api(self, resource_type: str, action: str) -> ResourceApi:
        try:
            return self._api.get_resource_api(resource_type)
        except ConfigurationError as exc:
            raise ConfigurationError(
                f"failed to construct URI to {action} a {resource_type!r}: {exc}"
            ) from exc

    def _build_request(
        self, method: str, path: str, timeout: float | None, **kwargs: Any,
    ) -> httpx.Request:
        if timeout is not None:
            kwargs["timeout"] = timeout
        try:
            return self._client.build_request(method, path, **kwargs)
        except httpx.InvalidURL as exc:
            raise ConfigurationError(f"invalid URL {path!r}: {exc}") from exc

    def _do_request(self, request: httpx.Request) -> tuple[int, bytes]:
        """Send *request* and return its status code and full body."""
        request.headers["Accept"] = JSON_CONTENT_TYPE
        _LOGGER.debug("%s %s", request.method, request.url)
        try:
            response = self._client.send(request)
        except httpx.TransportError as exc:
            _LOGGER.debug("%s %s failed: %s", request.method, request.url, exc)
            raise TransportError(exc) from exc
        _LOGGER.debug("%s %s -> %d", request.method, request.url, response.status_code)
        return response.status_code, response.content


def _decode(status_code: int, decode: Callable[[], None]) -> None:
    try:
        decode()
    except ValueError as exc:
        raise ResponseDecodeError(status_code, str(exc)) from exc
