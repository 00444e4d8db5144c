"""Settings persistence backed by a YAML file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from kubesnap.constants.defaults import CONFIG_PATH_DEFAULT, CONFIG_PATH_ENV_VAR
from kubesnap.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Load and save ``AppSettings``.

    The settings path is, in order: the explicit ``path`` argument, the
    ``KUBESNAP_CONFIG`` environment variable, ``~/.config/kubesnap/settings.yaml``.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = self.resolve_path(path)

    @staticmethod
    def resolve_path(path: str | Path | None = None) -> Path:
        if path:
            return Path(path).expanduser()
        env_path = os.environ.get(CONFIG_PATH_ENV_VAR, "").strip()
        if env_path:
            return Path(env_path).expanduser()
        return Path(CONFIG_PATH_DEFAULT).expanduser()

    def load(self) -> AppSettings:
        """Read settings; a missing file yields defaults.

        Raises:
            ConfigLoadError: If the file cannot be read, is not valid YAML,
                or fails validation.
        """
        if not self.path.exists():
            logger.debug("No settings file at %s, using defaults", self.path)
            return AppSettings()

        try:
            with open(self.path, encoding="utf-8") as handle:
                content = yaml.safe_load(handle)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"Cannot read settings from {self.path}: {e}") from e

        if content is None:
            return AppSettings()
        if not isinstance(content, dict):
            raise ConfigLoadError(f"Settings file {self.path} must contain a mapping")

        try:
            settings = AppSettings.model_validate(content)
        except ValidationError as e:
            raise ConfigLoadError(f"Invalid settings in {self.path}: {e}") from e

        logger.info("Loaded settings from %s", self.path)
        return settings

    def save(self, settings: AppSettings) -> None:
        """Write settings as YAML, creating parent directories.

        Raises:
            ConfigSaveError: If the file cannot be written.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as handle:
                yaml.safe_dump(settings.model_dump(), handle, default_flow_style=False, sort_keys=False)
        except OSError as e:
            raise ConfigSaveError(f"Cannot write settings to {self.path}: {e}") from e
        logger.info("Saved settings to %s", self.path)


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
