"""Settings used by the revemap command, behind one shared service."""

from __future__ import annotations

from pathlib import Path

from .paths import AppPaths
from .schema import KEY_STYLES, MapSettings
from .service import SettingsService

_SERVICE = SettingsService(AppPaths())


def configure(app_paths: AppPaths) -> None:
    """Point the shared service at a different configuration directory."""

    global _SERVICE
    _SERVICE = SettingsService(app_paths)


def config_path() -> Path:
    """Return where the shared service reads and writes ``config.yaml``."""

    return _SERVICE.config_path


def load_settings() -> MapSettings:
    """Return the current :class:`MapSettings`, defaults when none are stored."""

    return _SERVICE.load()


def save_settings(settings: MapSettings) -> None:
    """Write ``settings`` to the shared configuration file."""

    _SERVICE.save(settings)


__all__ = [
    "AppPaths",
    "KEY_STYLES",
    "MapSettings",
    "SettingsService",
    "config_path",
    "configure",
    "load_settings",
    "save_settings",
]
