"""Layering of configuration mappings."""
from __future__ import annotations

from typing import Any, Dict, List

APPEND_MARKER = "+"
REPLACE_MARKER = "="


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``base`` with ``override`` layered on top; neither input is modified.

    Nested mappings merge key by key and lists go through :func:`merge_arrays`.
    Any other value in ``override`` replaces the one in ``base``.

    >>> deep_merge({"git": {"binary": "git"}}, {"git": {"extra_config": []}})
    {'git': {'binary': 'git', 'extra_config': []}}
    """
    merged: Dict[str, Any] = dict(base)
    for key, value in (override or {}).items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            merged[key] = merge_arrays(current, value)
        else:
            merged[key] = value
    return merged


def merge_arrays(base: List[Any], override: List[Any]) -> List[Any]:
    """Combine two config lists.

    An override starting with ``"+"`` extends ``base``; a leading ``"="``
    or no marker at all replaces it.
    """
    if override[:1] == [APPEND_MARKER]:
        return [*base, *override[1:]]
    if override[:1] == [REPLACE_MARKER]:
        return list(override[1:])
    return list(override)


__all__ = ["deep_merge", "merge_arrays"]
