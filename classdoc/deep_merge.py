"""Logic for deep merging configuration dictionaries."""

from typing import Any

# Lists under these keys extend the defaults instead of replacing them.
ADDITIVE_KEYS = frozenset({"implicit_roots"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Mappings are merged recursively.
    - Lists in ``update`` replace lists in ``base``, except for ``ADDITIVE_KEYS``
      which keep the base entries first and append new ones in order. Entries
      of an additive list can therefore never be removed by an update.
    """
    result = dict(base)
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(current, list | tuple)
            and isinstance(value, list | tuple)
        ):
            merged = list(current)
            merged.extend(v for v in value if v not in merged)
            result[key] = merged
        else:
            result[key] = value
    return result
