"""
Key exclusion for JSON golden files.

Volatile fields (timestamps, generated IDs) make golden files useless, so
they are dropped before serialization. Exclusion is deep: matching keys are
removed from mappings at every nesting level, including mappings inside
lists and tuples. Everything else passes through unchanged.
"""

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any


def canonical_key(key: Any) -> str:
    """
    Canonical form used to compare mapping keys with excluded names.

    Enum members compare by value, everything else by `str()`:
        "created_at", Field.CREATED_AT ("created_at") → "created_at"
        1 → "1"
    """
    if isinstance(key, Enum):
        key = key.value
    return str(key)


def normalize_exclusions(exclude: Iterable[Any] | None) -> frozenset[str]:
    """Normalize an exclusion set (None → empty)."""
    if not exclude:
        return frozenset()
    if isinstance(exclude, (str, Enum)):
        exclude = [exclude]
    return frozenset(canonical_key(name) for name in exclude)


def exclude_keys(value: Any, exclude: Iterable[Any] | None) -> Any:
    """
    Recursively drop excluded keys from mappings.

    Args:
        value: Any value (typically a dict loaded from or bound for JSON)
        exclude: Field names to drop

    Returns:
        Reduced structure. Mappings become dicts that keep the order of the
        surviving keys, tuples become lists. With no exclusions the value is
        returned as-is.
    """
    keys = normalize_exclusions(exclude)
    if not keys:
        return value
    return to_plain(value, keys)


def to_plain(value: Any, keys: frozenset[str] = frozenset()) -> Any:
    """
    Copy a structure into plain dicts and lists, dropping `keys`.

    Unlike `exclude_keys`, always walks, so any Mapping becomes a dict that
    `json.dumps` accepts even when nothing is excluded.
    """
    if isinstance(value, Mapping):
        return {
            k: to_plain(v, keys)
            for k, v in value.items()
            if canonical_key(k) not in keys
        }

    if isinstance(value, (list, tuple)):
        return [to_plain(item, keys) for item in value]

    return value
