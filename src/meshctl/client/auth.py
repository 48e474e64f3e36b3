"""Authentication for the control-plane API."""

from __future__ import annotations

from collections.abc import Generator

import httpx

from meshctl.config.models import ControlPlaneProfile


class BearerTokenAuth(httpx.Auth):
    """Authenticate with a control-plane API token (Authorization: Bearer)."""

    def __init__(self, token: str) -> None:
        self.token = token

    def auth_flow(
        self, request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self.token}"
        yield request


def resolve_auth(profile: ControlPlaneProfile) -> httpx.Auth | None:
    """Resolve authentication from a control-plane profile."""
    if profile.token:
        return BearerTokenAuth(profile.token)
    return None
