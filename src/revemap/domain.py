"""Resolution of the enumeration members a map is built over."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Mapping, TypeVar

from .errors import EnumResolutionError, InvalidArgumentError

E = TypeVar("E", bound=Enum)
V = TypeVar("V")


def _require_enum_class(candidate: object) -> type[Enum]:
    if not isinstance(candidate, type) or not issubclass(candidate, Enum):
        raise EnumResolutionError(f"{candidate!r} is not an Enum subclass")
    return candidate


def _common_enum_class(members: Iterable[object]) -> type[Enum] | None:
    """Return the single enum class shared by ``members``, or ``None`` if empty."""

    enum_cls: type[Enum] | None = None
    for member in members:
        if not isinstance(member, Enum):
            raise EnumResolutionError(f"{member!r} is not an enumeration member")
        if enum_cls is None:
            enum_cls = type(member)
        elif type(member) is not enum_cls:
            raise EnumResolutionError(
                f"Cannot mix members of {enum_cls.__name__} and {type(member).__name__}"
            )
    return enum_cls


def resolve_domain(source: type[E] | Iterable[E]) -> tuple[E, ...]:
    """Return the ordered, duplicate-free members described by ``source``.

    An :class:`~enum.Enum` subclass resolves to all of its canonical members in
    declaration order (aliases are skipped). Any other iterable resolves to its
    members in iteration order, keeping the first occurrence of a repeated
    member.
    """

    if source is None:
        raise InvalidArgumentError("source")
    if isinstance(source, type):
        return tuple(_require_enum_class(source))
    try:
        items = tuple(source)
    except TypeError as exc:
        raise EnumResolutionError(f"Cannot resolve enumeration members from {source!r}") from exc
    _common_enum_class(items)
    return tuple(dict.fromkeys(items))


def _declared_members(enum_cls: type[Enum]) -> tuple[Enum, ...]:
    """Return every named member of ``enum_cls`` in declaration order.

    Unlike iteration this includes multi-bit :class:`~enum.Flag` members
    declared by name; aliases collapse onto their canonical member.
    """

    return tuple(dict.fromkeys(enum_cls.__members__.values()))


def _declared_positions(enum_cls: type[Enum]) -> dict[Enum, int]:
    return {member: index for index, member in enumerate(_declared_members(enum_cls))}


def enum_range(start: E, stop: E) -> tuple[E, ...]:
    """Return the members from ``start`` to ``stop`` inclusive, in declaration order."""

    if start is None:
        raise InvalidArgumentError("start")
    if stop is None:
        raise InvalidArgumentError("stop")
    enum_cls = _common_enum_class((start, stop))
    first = declaration_index(start)
    last = declaration_index(stop)
    if last < first:
        raise InvalidArgumentError(f"{stop!r} is declared before {start!r}")
    return _declared_members(enum_cls)[first : last + 1]


def declaration_index(member: Enum) -> int:
    """Return the position of ``member`` within its enumeration's declaration.

    Composite flag values that were never declared by name have no position
    and raise :class:`EnumResolutionError`.
    """

    if member is None:
        raise InvalidArgumentError("member")
    _common_enum_class((member,))
    try:
        return _declared_positions(type(member))[member]
    except KeyError as exc:
        raise EnumResolutionError(f"{member!r} is not a declared member of {type(member).__name__}") from exc


def order_by_declaration(mapping: Mapping[E, V], enum_cls: type[E] | None = None) -> dict[E, V]:
    """Return a copy of ``mapping`` with keys in their enum's declaration order.

    ``enum_cls`` pins the expected class; otherwise it is taken from the keys.
    Every key is kept: undeclared composite flags follow the declared members,
    ordered by value.
    """

    if enum_cls is None:
        enum_cls = _common_enum_class(mapping)
        if enum_cls is None:
            return {}
    else:
        _require_enum_class(enum_cls)
        for member in mapping:
            if not isinstance(member, enum_cls):
                raise EnumResolutionError(f"{member!r} is not a member of {enum_cls.__name__}")

    def sort_key(member: Enum) -> tuple[int, object]:
        try:
            return 0, declaration_index(member)
        except EnumResolutionError:
            return 1, member.value

    return {member: mapping[member] for member in sorted(mapping, key=sort_key)}


__all__ = [
    "declaration_index",
    "enum_range",
    "order_by_declaration",
    "resolve_domain",
]
