"""Pydantic schema for revemap settings."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, field_validator

KeyStyle = Literal["str", "name", "value"]

KEY_STYLES: tuple[str, ...] = ("str", "name", "value")
DEFAULT_KEY_STYLE = "str"
DEFAULT_LOG_LEVEL = "WARNING"


class MapSettings(BaseModel):
    """User defaults for the ``revemap`` inspection command."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    key_style: KeyStyle = DEFAULT_KEY_STYLE
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: str | None = None
    sort_output: bool = False

    @field_validator("key_style", mode="before")
    @classmethod
    def _normalise_key_style(cls, value: Any) -> str:
        style = str(value or "").strip().lower()
        return style if style in KEY_STYLES else DEFAULT_KEY_STYLE

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: Any) -> str:
        level = str(value or "").strip().upper()
        if isinstance(logging.getLevelName(level), int):
            return level
        return DEFAULT_LOG_LEVEL

    @field_validator("log_file", mode="before")
    @classmethod
    def _normalise_log_file(cls, value: Any) -> str | None:
        if value in (None, ""):
            return None
        return str(Path(str(value)).expanduser())

    def to_mapping(self) -> dict[str, Any]:
        """Return a serialisable representation of the settings."""

        return self.model_dump()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "MapSettings":
        if not isinstance(data, Mapping):
            data = {}
        return cls.model_validate(data)


__all__ = [
    "DEFAULT_KEY_STYLE",
    "DEFAULT_LOG_LEVEL",
    "KEY_STYLES",
    "KeyStyle",
    "MapSettings",
]
