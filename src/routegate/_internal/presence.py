"""Presence checks over loosely-shaped caller input.

Route structures arrive as dicts or as arbitrary objects.
These helpers read a field without assuming the shape, and tell
"absent" apart from "present but falsy".
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

_MISSING = object()


def _lookup(source: Any, name: str) -> Any:
    if source is None:
        return _MISSING
    if isinstance(source, Mapping):
        return source.get(name, _MISSING)
    try:
        return getattr(source, name, _MISSING)
    except Exception:  # noqa: BLE001
        return _MISSING


def has(source: Any, name: str) -> bool:
    """True when *source* carries a *name* field that is not ``None``.

    Falsy values (``False``, ``0``, ``""``, ``{}``) count as present.
    """
    value = _lookup(source, name)
    return value is not _MISSING and value is not None


def field(source: Any, *names: str, default: Any = None) -> Any:
    """Return the first present value among *names* (aliases), else *default*."""
    for name in names:
        value = _lookup(source, name)
        if value is not _MISSING and value is not None:
            return value
    return default


def truth(value: Any, default: bool) -> bool:
    """``bool(value)``, or *default* when *value* refuses truth testing."""
    try:
        return bool(value)
    except Exception:  # noqa: BLE001
        return default


def frozen_props(value: Any) -> Mapping[str, Any]:
    """Read-only copy of a props mapping; anything else becomes empty."""
    if not isinstance(value, Mapping):
        return MappingProxyType({})
    try:
        return MappingProxyType(dict(value))
    except Exception:  # noqa: BLE001
        return MappingProxyType({})
