"""Dot-path lookups into nested key-value trees.

Missing segments resolve to ``MISSING`` instead of raising, so callers can tell
an absent key apart from a present ``None``.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Iterable


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def _step(current: Any, key: str) -> Any:
    if isinstance(current, Mapping):
        return current[key] if key in current else MISSING
    # list/tuple items by position, e.g. "phones.0"
    if isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
        if key.isascii() and key.isdigit() and int(key) < len(current):
            return current[int(key)]
    return MISSING


def get_value_from_path(source: Any, path: Iterable[str]) -> Any:
    current = source
    for key in path:
        current = _step(current, key)
        if current is MISSING:
            break
    return current


def get_value(source: Any, target: str) -> Any:
    """Resolve ``target`` ("a.b.c") against ``source``."""
    return get_value_from_path(source, target.split("."))


def has_property(source: Any, target: str) -> bool:
    """Return True if the parent of ``target`` exists and holds its last key."""
    *obj_path, field = target.split(".")
    return _step(get_value_from_path(source, obj_path), field) is not MISSING
