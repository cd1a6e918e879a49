"""Command line entry point printing the maps built for an enumeration."""

from __future__ import annotations

import argparse
import importlib
import logging
import os
import sys
from enum import Enum
from logging.handlers import RotatingFileHandler
from operator import attrgetter
from pathlib import Path
from typing import Any, Callable, Sequence

import yaml

from .config import KEY_STYLES, load_settings
from .domain import enum_range
from .errors import EnumMapError, EnumResolutionError
from .maps import create_enum_map, create_reverse_enum_map

logger = logging.getLogger(__name__)

KEY_FUNCTIONS: dict[str, Callable[[Enum], Any]] = {
    "str": str,
    "name": attrgetter("name"),
    "value": attrgetter("value"),
}


def _resolve_log_level(value: str | None, default: int = logging.WARNING) -> int:
    if not value:
        return default
    level = logging.getLevelName(value.upper())
    if isinstance(level, int):
        return level
    return default


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    """Configure logging to stderr and, optionally, a rotating log file."""

    resolved = _resolve_log_level(level)
    root_logger = logging.getLogger()

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        try:
            handler.close()
        except Exception:  # pragma: no cover - best effort cleanup
            pass

    root_logger.setLevel(resolved)

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s [%(name)s] %(message)s",
        "%Y-%m-%d %H:%M:%S",
    )

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(resolved)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(resolved)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def load_enum(target: str) -> type[Enum]:
    """Import the enumeration named by ``module:QualifiedName``."""

    module_name, _, qualname = target.partition(":")
    if not module_name or not qualname:
        raise EnumResolutionError(f"Expected MODULE:ENUM, got {target!r}")
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise EnumResolutionError(f"Cannot import module {module_name!r}") from exc
    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise EnumResolutionError(f"{module_name!r} has no attribute {qualname!r}") from exc
    if not isinstance(obj, type) or not issubclass(obj, Enum):
        raise EnumResolutionError(f"{target!r} is not an Enum subclass")
    return obj


def _member(enum_cls: type[Enum], name: str) -> Enum:
    try:
        return enum_cls[name]
    except KeyError as exc:
        raise EnumResolutionError(f"{enum_cls.__name__} has no member {name!r}") from exc


def _plain(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


def render(
    enum_cls: type[Enum],
    *,
    key_style: str,
    reverse: bool = False,
    bounds: Sequence[str] | None = None,
) -> dict[Any, Any]:
    """Build the forward or reverse map of ``enum_cls`` in a YAML-friendly form."""

    source: Any = enum_cls
    if bounds:
        start, stop = bounds
        source = enum_range(_member(enum_cls, start), _member(enum_cls, stop))
    derive = KEY_FUNCTIONS[key_style]
    if reverse:
        reverse_map = create_reverse_enum_map(source, derive)
        return {_plain(key): member.name for key, member in reverse_map.items()}
    forward_map = create_enum_map(source, derive)
    return {member.name: _plain(value) for member, value in forward_map.items()}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="revemap", description=__doc__)
    parser.add_argument("target", help="Enumeration to inspect, as MODULE:ENUM")
    parser.add_argument(
        "--reverse",
        action="store_true",
        help="Print the key -> member map instead of member -> value",
    )
    parser.add_argument("--key", choices=KEY_STYLES, help="Derivation applied to each member")
    parser.add_argument(
        "--range",
        nargs=2,
        metavar=("START", "STOP"),
        help="Restrict to the members from START to STOP inclusive",
    )
    parser.add_argument("--log-level", help="Logging level, e.g. DEBUG")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    setup_logging(
        args.log_level or os.environ.get("REVEMAP_LOG_LEVEL") or settings.log_level,
        settings.log_file,
    )
    key_style = args.key or settings.key_style
    logger.debug("Rendering %s with key style %s", args.target, key_style)

    try:
        enum_cls = load_enum(args.target)
        payload = render(enum_cls, key_style=key_style, reverse=args.reverse, bounds=args.range)
    except EnumMapError as exc:
        logger.error("%s", exc)
        return 1

    sys.stdout.write(yaml.safe_dump(payload, sort_keys=settings.sort_output, allow_unicode=True))
    return 0


__all__ = ["KEY_FUNCTIONS", "build_parser", "load_enum", "main", "render", "setup_logging"]
