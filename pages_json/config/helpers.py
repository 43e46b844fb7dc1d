"""Utility helpers shared by the pages.json loader and normalizers."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ


def _is_plain_object(value: object) -> typ.TypeGuard[dict[str, typ.Any]]:
    """Return True for JSON objects (dicts), excluding lists and scalars."""
    return isinstance(value, dict)


def _as_list(value: object) -> list[typ.Any] | None:
    """Return ``value`` when it is a JSON array, otherwise None."""
    if isinstance(value, list):
        return value
    return None


def _extend(
    target: dict[str, typ.Any], *sources: cabc.Mapping[str, typ.Any] | None
) -> dict[str, typ.Any]:
    """Shallow-merge each mapping in ``sources`` into ``target`` and return it."""
    for source in sources:
        if isinstance(source, cabc.Mapping):
            target.update(source)
    return target


__all__ = [
    "_as_list",
    "_extend",
    "_is_plain_object",
]
