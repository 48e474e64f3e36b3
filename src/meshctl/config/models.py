"""Pydantic models for CLI configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from meshctl.config.constants import DEFAULT_TIMEOUT


class ControlPlaneProfile(BaseModel):
    """A named control-plane connection profile."""

    name: str
    url: str = Field(description="Control-plane API URL, e.g. http://localhost:5681")
    token: str | None = Field(default=None, description="API bearer token")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, le=600, description="Request timeout in seconds",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")


class CLIConfig(BaseModel):
    """Root configuration model."""

    default_profile: str | None = None
    profiles: dict[str, ControlPlaneProfile] = Field(default_factory=dict)
