"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "meshctl"
APP_AUTHOR = "meshctl"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_CONTROL_PLANE_URL = "MESHCTL_CONTROL_PLANE_URL"
ENV_API_TOKEN = "MESHCTL_API_TOKEN"
ENV_PROFILE = "MESHCTL_PROFILE"

# API defaults
DEFAULT_TIMEOUT = 30.0
