"""Builders for dictionaries derived from enumeration members."""

from __future__ import annotations

from enum import Enum
from operator import itemgetter
from typing import Any, Callable, Hashable, Iterable, Mapping, MutableMapping, TypeVar, Union

from .domain import order_by_declaration, resolve_domain
from .errors import DuplicateKeysError, InvalidArgumentError

E = TypeVar("E", bound=Enum)
T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

EnumSource = Union[type[E], Iterable[E]]

_entry_key = itemgetter(0)
_entry_value = itemgetter(1)


def _identity(value: T) -> T:
    return value


def _require(**arguments: Any) -> None:
    for name, value in arguments.items():
        if value is None:
            raise InvalidArgumentError(name)


def _build_map(
    items: Iterable[T],
    key_mapper: Callable[[T], K],
    value_mapper: Callable[[T], V],
    *,
    strict: bool,
) -> dict[K, V]:
    """Map every item to ``key_mapper(item) -> value_mapper(item)``.

    When two items share a key, the value of the item iterated last is kept.
    With ``strict`` set, any such collision raises :class:`DuplicateKeysError`
    once the whole map has been built.
    """

    sequence = tuple(items)
    result: dict[K, V] = {}
    for item in sequence:
        result[key_mapper(item)] = value_mapper(item)
    if strict and len(result) != len(sequence):
        raise DuplicateKeysError(len(sequence), len(result))
    return result


def create_enum_map(
    source: EnumSource[E],
    value_mapper: Callable[[E], V] | None = None,
) -> dict[E, V]:
    """Return ``member -> value_mapper(member)`` for every member of ``source``.

    ``source`` is either an enum class or an iterable of its members; the
    result iterates in the same order. Values default to ``str(member)``.
    """

    _require(source=source)
    if value_mapper is None:
        value_mapper = str
    return _build_map(resolve_domain(source), _identity, value_mapper, strict=False)


def create_reverse_enum_map(
    source: EnumSource[E],
    key_mapper: Callable[[E], K] | None = None,
) -> dict[K, E]:
    """Return ``key_mapper(member) -> member`` for every member of ``source``.

    Keys default to ``str(member)``.

    Raises
    ------
    DuplicateKeysError
        If ``key_mapper`` gives the same key for two members.
    """

    _require(source=source)
    if key_mapper is None:
        key_mapper = str
    return modify_reverse_enum_map(source, key_mapper, {})


def modify_reverse_enum_map(
    source: EnumSource[E],
    key_mapper: Callable[[E], K],
    destination: MutableMapping[K, E],
) -> MutableMapping[K, E]:
    """Put ``key_mapper(member) -> member`` into ``destination`` and return it.

    Parameters
    ----------
    source:
        Enum class or iterable of members to insert.
    key_mapper:
        Derives the key for each member. It must give a distinct key per
        member of ``source``; keys already present in ``destination`` are
        simply overwritten.
    destination:
        Mapping owned by the caller. It is left untouched when the new
        entries collide with each other.
    """

    _require(source=source, key_mapper=key_mapper, destination=destination)
    domain = resolve_domain(source)
    destination.update(_build_map(domain, key_mapper, _identity, strict=True))
    return destination


def reverse_enum_map(mapping: Mapping[E, K]) -> dict[K, E]:
    """Reverse a ``member -> key`` map, requiring every key to be distinct."""

    _require(mapping=mapping)
    resolve_domain(mapping.keys())
    return _build_map(mapping.items(), _entry_value, _entry_key, strict=True)


def convert_to_enum_map(enum_cls: type[E], mapping: Mapping[T, E]) -> dict[E, set[T]]:
    """Group the keys of a ``key -> member`` map under each member.

    No key is lost: a member reached from several keys maps to all of them.
    Members come out in declaration order; members no key maps to are absent.
    """

    _require(enum_cls=enum_cls, mapping=mapping)
    grouped: dict[E, set[T]] = {}
    for key, member in mapping.items():
        grouped.setdefault(member, set()).add(key)
    return order_by_declaration(grouped, enum_cls)


def convert_to_simple_enum_map(mapping: Mapping[T, E]) -> dict[E, T]:
    """Reverse a ``key -> member`` map, keeping the last key seen per member."""

    _require(mapping=mapping)
    collapsed = _build_map(mapping.items(), _entry_value, _entry_key, strict=False)
    return order_by_declaration(collapsed)


__all__ = [
    "EnumSource",
    "convert_to_enum_map",
    "convert_to_simple_enum_map",
    "create_enum_map",
    "create_reverse_enum_map",
    "modify_reverse_enum_map",
    "reverse_enum_map",
]
