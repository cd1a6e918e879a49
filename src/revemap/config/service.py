"""Services for loading and persisting revemap settings."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .paths import AppPaths
from .schema import MapSettings

logger = logging.getLogger(__name__)


class SettingsService:
    """Load, validate and persist :class:`MapSettings`."""

    def __init__(self, app_paths: AppPaths, *, filename: str = "config.yaml") -> None:
        self._app_paths = app_paths
        self._filename = filename

    @property
    def config_path(self) -> Path:
        """Path to the configuration file."""

        return self._app_paths.config_path(self._filename)

    def load(self) -> MapSettings:
        """Load the settings from disk with graceful fallbacks."""

        path = self.config_path
        if not path.exists():
            return MapSettings()

        try:
            raw_text = path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("Unable to read settings from %s: %s", path, exc)
            return MapSettings()

        try:
            raw_data = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            logger.warning("Invalid YAML in %s: %s", path, exc)
            return MapSettings()

        if raw_data is not None and not isinstance(raw_data, dict):
            logger.warning("Ignoring settings in %s: expected a mapping", path)
        return MapSettings.from_mapping(raw_data)

    def save(self, settings: MapSettings) -> None:
        """Persist the settings to disk."""

        path = self.config_path
        path.parent.mkdir(parents=True, exist_ok=True)
        try:
            path.write_text(yaml.safe_dump(settings.to_mapping(), sort_keys=False), encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to write settings to %s: %s", path, exc)
            raise


__all__ = ["SettingsService"]
