"""Apply tab-bar defaults, the optional centre button, and icon path fixes."""

from __future__ import annotations

import logging
import typing as typ

from .._constants import DEFAULT_MID_BUTTON, DEFAULT_TAB_BAR, MID_BUTTON_TYPE
from ..config.helpers import _extend, _is_plain_object
from ..paths import normalize_filepath

logger = logging.getLogger(__name__)

_ICON_FIELDS = ("iconPath", "selectedIconPath")


def normalize_tab_bar(tab_bar: dict[str, typ.Any]) -> dict[str, typ.Any] | None:
    """Return the normalized tab bar, or None when it has no items.

    The returned mapping is a new dict layered over :data:`DEFAULT_TAB_BAR`;
    its ``list`` is the caller's list, mutated in place.

    Parameters
    ----------
    tab_bar : dict[str, Any]
        Raw ``tabBar`` section of pages.json.

    Returns
    -------
    dict[str, Any] | None
        Normalized tab bar, or ``None`` when ``list`` is missing or empty and
        the caller should drop the section.
    """
    items = tab_bar.get("list")
    if not isinstance(items, list) or not items:
        logger.debug("tabBar has no list items; dropping it")
        return None

    normalized = _extend(dict(DEFAULT_TAB_BAR), tab_bar)
    mid_button = tab_bar.get("midButton")
    if not _insert_mid_button(items, mid_button):
        normalized.pop("midButton", None)

    for item in items:
        if _is_plain_object(item):
            _normalize_item_paths(item)

    normalized["selectedIndex"] = 0
    normalized["shown"] = True
    return normalized


def _insert_mid_button(items: list[typ.Any], mid_button: object) -> bool:
    """Insert the synthesized centre item; return whether ``midButton`` is kept.

    Only an even-length list has a centre slot. A list that already carries a
    ``midButton`` item was normalized before and is left as it is.
    """
    if not _is_plain_object(mid_button):
        return False
    if any(_is_mid_button(item) for item in items):
        return True
    length = len(items)
    if length % 2:
        logger.debug("tabBar.list has %d items; ignoring midButton", length)
        return False
    items.insert(length // 2, _extend(dict(DEFAULT_MID_BUTTON), mid_button))
    return True


def _is_mid_button(item: object) -> bool:
    return _is_plain_object(item) and item.get("type") == MID_BUTTON_TYPE


def _normalize_item_paths(item: dict[str, typ.Any]) -> None:
    for field in _ICON_FIELDS:
        if item.get(field):
            item[field] = normalize_filepath(item[field])
    if item.get("type") == MID_BUTTON_TYPE and item.get("backgroundImage"):
        item["backgroundImage"] = normalize_filepath(item["backgroundImage"])


__all__ = ["normalize_tab_bar"]
