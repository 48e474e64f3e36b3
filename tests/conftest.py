"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import ClassVar

import httpx
import pytest
from pydantic import Field

from meshctl.client.api import ApiDescriptor
from meshctl.config.manager import ConfigManager
from meshctl.config.models import ControlPlaneProfile
from meshctl.models.mesh import MeshResource
from meshctl.models.resource import Resource, ResourceSpec
from meshctl.store.remote import RemoteStore

BASE_URL = "http://control-plane:5681"


class SampleTrafficRoute(ResourceSpec):
    """Minimal spec used to exercise the store without real policy schemas."""

    path: str = ""


class SampleTrafficRouteResource(Resource):
    resource_type: ClassVar[str] = "SampleTrafficRoute"

    spec: SampleTrafficRoute = Field(default_factory=SampleTrafficRoute)


@pytest.fixture
def api_descriptor() -> ApiDescriptor:
    return ApiDescriptor.from_resources({
        SampleTrafficRouteResource: "traffic-routes",
        MeshResource: "meshes",
    })


@pytest.fixture
def http_client() -> Iterator[httpx.Client]:
    with httpx.Client(base_url=BASE_URL) as client:
        yield client


@pytest.fixture
def store(http_client: httpx.Client, api_descriptor: ApiDescriptor) -> RemoteStore:
    return RemoteStore(http_client, api_descriptor)


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_profile() -> ControlPlaneProfile:
    """Return a sample control-plane profile for testing."""
    return ControlPlaneProfile(
        name="test-cp",
        url="http://localhost:5681",
        token="test-token",
    )


@pytest.fixture
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_config: Path) -> Path:
    """Point every ConfigManager() at a temp file and clear env overrides."""
    monkeypatch.setattr("meshctl.config.manager.CONFIG_FILE", tmp_config)
    for env in ("MESHCTL_CONTROL_PLANE_URL", "MESHCTL_API_TOKEN", "MESHCTL_PROFILE"):
        monkeypatch.delenv(env, raising=False)
    return tmp_config
