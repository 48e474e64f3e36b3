"""Configuration manager: control-plane profiles stored as TOML."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

import tomli_w

from meshctl.client.errors import ConfigurationError
from meshctl.config.constants import (
    CONFIG_FILE,
    ENV_API_TOKEN,
    ENV_CONTROL_PLANE_URL,
    ENV_PROFILE,
)
from meshctl.config.models import CLIConfig, ControlPlaneProfile

_LOGGER = logging.getLogger(__name__)


def _write_private(path: Path, text: str) -> None:
    """Replace *path* with *text*, readable by the owner only."""
    temp = path.with_suffix(".tmp")
    fd = os.open(str(temp), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    try:
        os.write(fd, text.encode())
    finally:
        os.close(fd)
    temp.replace(path)


class ConfigManager:
    """Reads, edits and saves the profile file, and picks the active control plane."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> CLIConfig:
        if not self.config_path.exists():
            return CLIConfig()
        _LOGGER.debug("Loading config from %s", self.config_path)
        try:
            data = tomllib.loads(self.config_path.read_text())
        except tomllib.TOMLDecodeError as exc:
            raise ConfigurationError(f"Invalid config file {self.config_path}: {exc}") from exc
        data["profiles"] = {
            name: {**values, "name": name}
            for name, values in data.get("profiles", {}).items()
        }
        return CLIConfig.model_validate(data)

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        os.chmod(self.config_path.parent, 0o700)
        data = self.config.model_dump(exclude={"profiles"}, exclude_none=True)
        if self.config.profiles:
            # Only settings that differ from the defaults are written
            data["profiles"] = {
                name: profile.model_dump(exclude={"name"}, exclude_defaults=True)
                for name, profile in self.config.profiles.items()
            }
        _write_private(self.config_path, tomli_w.dumps(data))
        _LOGGER.debug("Saved config to %s", self.config_path)

    def add_profile(self, profile: ControlPlaneProfile) -> None:
        self.config.profiles[profile.name] = profile
        self.config.default_profile = self.config.default_profile or profile.name
        self.save()

    def remove_profile(self, name: str) -> bool:
        if self.config.profiles.pop(name, None) is None:
            return False
        if self.config.default_profile == name:
            self.config.default_profile = next(iter(self.config.profiles), None)
        self.save()
        return True

    def set_default(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        self.config.default_profile = name
        self.save()
        return True

    def get_profile(self, name: str | None = None) -> ControlPlaneProfile | None:
        name = name or self.config.default_profile
        return self.config.profiles.get(name) if name else None

    def resolve_control_plane(
        self,
        profile_name: str | None = None,
        url: str | None = None,
        token: str | None = None,
    ) -> ControlPlaneProfile:
        """Resolve the control-plane connection.

        Precedence: CLI flags > env vars > config profile. A URL from a flag or
        an env var is validated like one read from a profile.
        """
        profile = self.get_profile(profile_name or os.environ.get(ENV_PROFILE))
        settings = profile.model_dump() if profile else {"name": "cli"}

        resolved_url = url or os.environ.get(ENV_CONTROL_PLANE_URL) or settings.get("url")
        if not resolved_url:
            raise ConfigurationError(
                "No control plane URL configured. Use 'meshctl config add' or set "
                f"{ENV_CONTROL_PLANE_URL} or pass --url."
            )
        settings["url"] = resolved_url
        resolved_token = token or os.environ.get(ENV_API_TOKEN)
        if resolved_token:
            settings["token"] = resolved_token
        return ControlPlaneProfile.model_validate(settings)
