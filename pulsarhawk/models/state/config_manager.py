"""Loading of YAML configuration files into AppSettings."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from pulsarhawk.constants.defaults import CONFIG_ENV_VAR, CONFIG_PATH_DEFAULT
from pulsarhawk.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
)

logger = logging.getLogger(__name__)

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
]


class ConfigManager:
    """Resolves and loads the configuration file."""

    @staticmethod
    def resolve_path(path: str | Path | None = None) -> Path:
        """Explicit path, then the environment variable, then the default."""
        if path:
            return Path(path).expanduser()
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            return Path(env_path).expanduser()
        return CONFIG_PATH_DEFAULT

    @classmethod
    def load(cls, path: str | Path | None = None) -> AppSettings:
        """Load and validate settings.

        Raises:
            ConfigLoadError: The file is missing, unreadable, not YAML or
                fails validation.
        """
        config_path = cls.resolve_path(path)
        try:
            raw = config_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigLoadError(f"Cannot read config {config_path}: {exc}") from exc

        try:
            data = yaml.safe_load(raw) or {}
        except yaml.YAMLError as exc:
            raise ConfigLoadError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigLoadError(f"Config {config_path} must be a mapping")

        try:
            settings = AppSettings.model_validate(data)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid config {config_path}: {exc}") from exc

        logger.info("Loaded configuration from %s", config_path)
        return settings
