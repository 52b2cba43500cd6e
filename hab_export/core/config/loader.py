"""
Settings loader — registry coordinates and filesystem locations.

Settings are layered, later layers winning:

    defaults  <  YAML config file  <  environment  <  CLI options

The CLI applies its own options on top of what ``load_settings``
returns via ``ExportSettings.with_overrides``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, ValidationError

from hab_export.core.errors import ExportError

logger = logging.getLogger(__name__)

DEFAULT_BLDR_URL = "https://bldr.habitat.sh"
DEFAULT_BLDR_CHANNEL = "stable"
DEFAULT_FS_ROOT = "/"
CACHE_ARTIFACT_PATH = "hab/cache/artifacts"

# Read by this process, and written into the helper's environment.
BLDR_URL_ENVVAR = "HAB_BLDR_URL"
BLDR_CHANNEL_ENVVAR = "HAB_BLDR_CHANNEL"

# Read only: where helper packages come from and where things live.
HELPER_CHANNEL_ENVVAR = "HAB_INTERNAL_BLDR_CHANNEL"
FS_ROOT_ENVVAR = "FS_ROOT"
CONFIG_ENVVAR = "HAB_EXPORT_CONFIG"


class ConfigError(ExportError):
    """Raised when the settings file is unreadable or invalid."""


class ExportSettings(BaseModel):
    """Where to fetch packages from and where to put them."""

    bldr_url: str = DEFAULT_BLDR_URL
    bldr_channel: str = DEFAULT_BLDR_CHANNEL
    helper_url: str = DEFAULT_BLDR_URL
    helper_channel: str = DEFAULT_BLDR_CHANNEL
    fs_root: Path = Path(DEFAULT_FS_ROOT)
    cache_artifact_path: Path | None = None
    installer_command: list[str] = ["hab", "pkg", "install"]

    @property
    def artifact_cache(self) -> Path:
        """Artifact cache, defaulting under the filesystem root."""
        if self.cache_artifact_path is not None:
            return self.cache_artifact_path
        return self.fs_root / CACHE_ARTIFACT_PATH

    def with_overrides(self, **overrides: Any) -> ExportSettings:
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        return self.model_validate({**self.model_dump(), **changes})


def load_settings(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ExportSettings:
    """Build settings from the optional YAML file and the environment.

    Args:
        path: Explicit settings file. If None, ``HAB_EXPORT_CONFIG`` is
            consulted; no file at all is fine.
        environ: Environment to read (default: ``os.environ``).

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    env = os.environ if environ is None else environ

    if path is None and env.get(CONFIG_ENVVAR):
        path = Path(env[CONFIG_ENVVAR])

    data: dict[str, Any] = {}
    if path is not None:
        data = _read_yaml(path)

    # The helper registry follows the target registry unless configured.
    env_layer = {
        "bldr_url": env.get(BLDR_URL_ENVVAR),
        "bldr_channel": env.get(BLDR_CHANNEL_ENVVAR),
        "helper_url": env.get(BLDR_URL_ENVVAR) if "helper_url" not in data else None,
        "helper_channel": env.get(HELPER_CHANNEL_ENVVAR),
        "fs_root": env.get(FS_ROOT_ENVVAR),
    }
    data.update({k: v for k, v in env_layer.items() if v})

    try:
        settings = ExportSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid export settings: {e}") from e

    logger.debug(
        "Settings: bldr=%s (%s) helpers=%s (%s) fs_root=%s",
        settings.bldr_url,
        settings.bldr_channel,
        settings.helper_url,
        settings.helper_channel,
        settings.fs_root,
    )
    return settings


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading export settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # Accept either a flat file or one wrapped under an "export" key
    section = data.get("export", data)
    if not isinstance(section, dict):
        raise ConfigError(f"Expected 'export' to be a mapping in {path}")
    return dict(section)
