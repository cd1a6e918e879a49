"""Path resolution helpers for revemap configuration."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Mapping

from platformdirs import PlatformDirs

logger = logging.getLogger(__name__)


class AppPaths:
    """Resolve configuration directories with support for dependency injection."""

    def __init__(
        self,
        env: Mapping[str, str] | None = None,
        *,
        app_name: str = "revemap",
        env_var: str = "REVEMAP_CONFIG_DIR",
        platform_dirs_factory: Callable[[str], PlatformDirs] | None = None,
    ) -> None:
        self._env = MappingProxyType(dict(env) if env is not None else dict(os.environ))
        self._app_name = app_name
        self._env_var = env_var
        self._platform_dirs_factory = platform_dirs_factory or self._default_platform_dirs

    @staticmethod
    def _default_platform_dirs(app_name: str) -> PlatformDirs:
        return PlatformDirs(appname=app_name, appauthor=False, roaming=True)

    def config_dir(self) -> Path:
        """Return the directory holding configuration files."""

        override = self._env.get(self._env_var)
        if override:
            logger.debug("Using %s=%s as configuration directory.", self._env_var, override)
            return Path(override).expanduser()
        return Path(self._platform_dirs_factory(self._app_name).user_config_dir)

    def config_path(self, filename: str = "config.yaml") -> Path:
        """Return the full path to the configuration file."""

        return self.config_dir() / filename


__all__ = ["AppPaths"]
