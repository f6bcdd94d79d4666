"""Deep copy of event properties with string truncation and cycle breaking."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Mapping
from typing import Any

from capture_core.errors import SanitizationDepthError

# Containers copied element by element into a fresh list.
_SEQUENCE_TYPES = (list, tuple, deque, set, frozenset)


def truncate_string(value: str, max_string_length: int | None) -> str:
    if max_string_length is None:
        return value
    return value[:max_string_length]


def copy_and_truncate_strings(value: Any, max_string_length: int | None) -> Any:
    """
    Return a deep copy of ``value`` with every string cut to ``max_string_length``.

    Mappings become fresh ``dict`` objects and array-likes (list, tuple, deque,
    set, frozenset) become fresh ``list`` objects, so read-only inputs such as
    tuples or ``MappingProxyType`` are copied into mutable structures. Other
    leaves are returned as-is.

    A container already seen during this call is never traversed twice: a
    repeated reference inside a list becomes ``None`` and a repeated reference
    held by a mapping entry drops that entry. This applies to shared
    substructures as well as true cycles.

    ``max_string_length=None`` disables truncation; ``0`` empties every string.

    Raises:
        ValueError: ``max_string_length`` is negative.
        SanitizationDepthError: the payload is nested deeper than the
            interpreter recursion limit allows.
    """
    if max_string_length is not None and max_string_length < 0:
        raise ValueError(f"max_string_length must be >= 0 or None, got {max_string_length}")

    # Values are held so ids stay unique while the call runs.
    visited: dict[int, Any] = {}
    try:
        return _copy(value, max_string_length, visited)
    except RecursionError as exc:
        raise SanitizationDepthError(sys.getrecursionlimit()) from exc


def _is_composite(value: Any) -> bool:
    return isinstance(value, Mapping) or isinstance(value, _SEQUENCE_TYPES)


def _copy(value: Any, max_string_length: int | None, visited: dict[int, Any]) -> Any:
    if isinstance(value, str):
        return truncate_string(value, max_string_length)
    if not _is_composite(value):
        return value

    node_id = id(value)
    if node_id in visited:
        return None
    visited[node_id] = value

    if isinstance(value, Mapping):
        copied: dict[Any, Any] = {}
        for key, item in value.items():
            if _is_composite(item) and id(item) in visited:
                continue
            copied[key] = _copy(item, max_string_length, visited)
        return copied

    return [_copy(item, max_string_length, visited) for item in value]
