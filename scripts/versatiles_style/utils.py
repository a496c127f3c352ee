"""
Structural clone and merge helpers for style documents.

Mappings merge recursively, lists are replaced (never concatenated) and
scalars are overridden. Both helpers return new structures and leave
their inputs untouched.
"""

from collections.abc import Mapping
from copy import deepcopy
from typing import Any


def deep_clone(value: Any) -> Any:
    """Return a recursive copy of ``value``."""
    return deepcopy(value)


def deep_merge(base: Any, *overrides: Any) -> Any:
    """Merge each of ``overrides`` over ``base``, later ones winning.

    Example:
        >>> deep_merge({"a": {"b": 1, "c": 2}}, {"a": {"c": 3}})
        {'a': {'b': 1, 'c': 3}}
    """
    result = deepcopy(base)
    for override in overrides:
        if override is None:
            continue
        result = _merge_value(result, override)
    return result


def _merge_value(target: Any, incoming: Any) -> Any:
    if isinstance(target, Mapping) and isinstance(incoming, Mapping):
        merged = dict(target)
        for key, value in incoming.items():
            if key in merged:
                merged[key] = _merge_value(merged[key], value)
            else:
                merged[key] = deepcopy(value)
        return merged
    return deepcopy(incoming)
