"""Shared helpers for the tagfleet client."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional


def first_present(mapping: Mapping[str, Any], keys: Iterable[str]) -> Optional[Any]:
    """Return the value of the first key whose value is not None."""
    for key in keys:
        value = mapping.get(key)
        if value is not None:
            return value
    return None


def is_blank(value: object) -> bool:
    """Return True for None and strings that are empty after stripping."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()
