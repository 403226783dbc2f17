"""Helpers for narrowing untyped TOML data at the config boundary."""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    """Return obj as StrDict if it matches, else None."""
    if is_str_dict(obj):
        return obj
    return None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value from a mapping, stripping whitespace.

    Returns None if missing, not a str, or empty after stripping.
    """
    value = table.get(key)
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table (dict with string keys) from a mapping."""
    return as_str_dict(table.get(key))


def get_str_tuple(table: Mapping[str, object], key: str) -> tuple[str, ...] | None:
    """Get a list of non-empty strings from a mapping as a tuple.

    Returns None if the key is missing. Raises ValueError if the value is
    present but is not a non-empty list of non-empty strings.
    """
    if key not in table:
        return None
    value = table[key]
    if not isinstance(value, list) or not value:
        raise ValueError(f"'{key}' must be a non-empty list of strings")
    items: list[str] = []
    for item in cast(list[object], value):
        if not isinstance(item, str) or not item.strip():
            raise ValueError(f"'{key}' must be a non-empty list of strings")
        items.append(item.strip())
    return tuple(items)
