"""Control-plane HTTP client wiring."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from meshctl.client.api import ApiDescriptor, default_api_descriptor
from meshctl.client.auth import resolve_auth
from meshctl.config.models import ControlPlaneProfile
from meshctl.store.remote import RemoteStore

_LOGGER = logging.getLogger(__name__)


class ControlPlaneClient:
    """Owns the HTTP connection to a control plane and the store built on it."""

    def __init__(
        self,
        profile: ControlPlaneProfile,
        api: ApiDescriptor | None = None,
    ) -> None:
        self.profile = profile
        if not profile.verify_ssl:
            _LOGGER.warning("TLS certificate verification is disabled")
        # No transport-level retries; every store call is one request.
        self._client = httpx.Client(
            base_url=profile.url,
            auth=resolve_auth(profile),
            verify=profile.verify_ssl,
            timeout=profile.timeout,
            transport=httpx.HTTPTransport(verify=profile.verify_ssl),
            headers={"Accept": "application/json"},
        )
        self.store = RemoteStore(self._client, api or default_api_descriptor())

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> ControlPlaneClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
