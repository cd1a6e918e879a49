"""Build lookup dictionaries from enumeration members."""

from __future__ import annotations

from .domain import declaration_index, enum_range, order_by_declaration, resolve_domain
from .errors import DuplicateKeysError, EnumMapError, EnumResolutionError, InvalidArgumentError
from .maps import (
    convert_to_enum_map,
    convert_to_simple_enum_map,
    create_enum_map,
    create_reverse_enum_map,
    modify_reverse_enum_map,
    reverse_enum_map,
)

__version__ = "1.0.0"

__all__ = [
    "DuplicateKeysError",
    "EnumMapError",
    "EnumResolutionError",
    "InvalidArgumentError",
    "convert_to_enum_map",
    "convert_to_simple_enum_map",
    "create_enum_map",
    "create_reverse_enum_map",
    "declaration_index",
    "enum_range",
    "modify_reverse_enum_map",
    "order_by_declaration",
    "resolve_domain",
    "reverse_enum_map",
]
