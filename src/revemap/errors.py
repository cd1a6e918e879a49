"""Exception types raised by revemap."""

from __future__ import annotations


class EnumMapError(Exception):
    """Base class for every error raised by the map builders."""


class InvalidArgumentError(EnumMapError, ValueError):
    """Raised when a required argument is ``None``."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Argument '{name}' must not be None")
        self.name = name


class DuplicateKeysError(EnumMapError, ValueError):
    """Raised when a key mapper produces fewer unique keys than source items.

    Only the counts are reported; the colliding keys themselves are not kept.
    """

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Key mapper has produced duplicate keys: {expected} items gave {actual} unique keys"
        )
        self.expected = expected
        self.actual = actual


class EnumResolutionError(EnumMapError, TypeError):
    """Raised when enumeration members cannot be resolved from an argument."""


__all__ = [
    "DuplicateKeysError",
    "EnumMapError",
    "EnumResolutionError",
    "InvalidArgumentError",
]
