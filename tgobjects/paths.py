"""Dot-path helpers for reading and writing decoded JSON trees.

Keys are either a dotted string (``"message.chat.id"``), a single integer
index, or an explicit list of literal segments. A ``*`` segment matches every
child of a mapping or list. Records met along the way are read through
their fields.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Iterable, List

WILDCARD = "*"


def resolve_default(default: Any) -> Any:
    """Return ``default``, calling it first when it is a zero-argument producer."""
    return default() if callable(default) else default


def _segments(key: Any) -> List[Any]:
    if isinstance(key, (list, tuple)):
        return list(key)
    if isinstance(key, str):
        return key.split(".")
    return [key]


def _list_index(segment: Any) -> int | None:
    if isinstance(segment, bool):
        return None
    if isinstance(segment, int):
        return segment if segment >= 0 else None
    if isinstance(segment, str) and segment.isdigit():
        return int(segment)
    return None


def _mapping_key(target: Mapping, segment: Any) -> Any:
    if segment in target:
        return segment
    return str(segment)


def _unwrap(target: Any) -> Any:
    from .base import BaseObject

    if isinstance(target, BaseObject):
        return target.all()
    return target


def _descend(target: Any, segment: Any) -> tuple[bool, Any]:
    target = _unwrap(target)
    if isinstance(target, Mapping):
        key = _mapping_key(target, segment)
        if key in target:
            return True, target[key]
        return False, None
    if isinstance(target, list):
        index = _list_index(segment)
        if index is not None and index < len(target):
            return True, target[index]
    return False, None


def _children(target: Any) -> Iterable[Any]:
    target = _unwrap(target)
    if isinstance(target, Mapping):
        return list(target.values())
    if isinstance(target, list):
        return list(target)
    return []


def data_get(target: Any, key: Any, default: Any = None) -> Any:
    """Fetch the value at ``key`` without any type coercion.

    A stored ``None`` is returned as-is; ``default`` is used only when a
    segment is missing.
    """
    if key is None:
        return target

    segments = _segments(key)
    for position, segment in enumerate(segments):
        if segment == WILDCARD:
            target = _unwrap(target)
            if not isinstance(target, (Mapping, list)):
                return resolve_default(default)
            rest = segments[position + 1:]
            if not rest:
                return list(_children(target))
            results = [data_get(child, rest, default) for child in _children(target)]
            if WILDCARD in rest:
                return [item for group in results if isinstance(group, list) for item in group]
            return results

        found, target = _descend(target, segment)
        if not found:
            return resolve_default(default)

    return target


def data_set(target: Any, key: Any, value: Any) -> Any:
    """Set ``value`` at ``key``, creating intermediate mappings as needed.

    Mutates ``target`` in place and returns the root, which is a fresh mapping
    when ``target`` was not a container.

    Raises:
        TypeError: A non-integer segment addresses a list.
        IndexError: An integer segment lies beyond the end of a list.
    """
    return _set(target, _segments(key), value)


def _set(target: Any, segments: List[Any], value: Any) -> Any:
    segment, rest = segments[0], segments[1:]

    if segment == WILDCARD:
        if not isinstance(target, (MutableMapping, list)):
            target = {}
        keys = list(target.keys()) if isinstance(target, MutableMapping) else range(len(target))
        for child_key in keys:
            target[child_key] = _set(target[child_key], rest, value) if rest else value
        return target

    if isinstance(target, list):
        index = _list_index(segment)
        if index is None:
            raise TypeError(f"Cannot use segment [{segment}] as a list index")
        if index > len(target):
            raise IndexError(
                f"Segment [{segment}] is beyond the end of a list of length {len(target)}"
            )
        if index == len(target):
            target.append(None)
        target[index] = _set(target[index], rest, value) if rest else value
        return target

    if not isinstance(target, MutableMapping):
        target = {}
    key = _mapping_key(target, segment)
    target[key] = _set(target.get(key), rest, value) if rest else value
    return target


def data_has(target: Any, key: Any) -> bool:
    """Return True if ``key`` is a direct child of ``target`` holding a non-null value.

    ``key`` is a single literal segment; dots are not interpreted.
    """
    found, value = _descend(target, key)
    return found and value is not None


def data_forget(target: Any, key: Any) -> None:
    """Remove the direct child ``key`` from ``target``; missing keys are ignored."""
    if isinstance(target, MutableMapping):
        target.pop(_mapping_key(target, key), None)
    elif isinstance(target, list):
        index = _list_index(key)
        if index is not None and index < len(target):
            del target[index]
