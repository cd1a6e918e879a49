"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from revemap.config import AppPaths, configure


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path) -> Iterator[AppPaths]:
    """Point the shared settings service at a per-test directory."""

    app_paths = AppPaths(env={"REVEMAP_CONFIG_DIR": str(tmp_path / "config")})
    configure(app_paths)
    yield app_paths
    configure(AppPaths())
