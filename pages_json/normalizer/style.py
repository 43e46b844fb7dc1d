"""Merge platform-specific style overlays into a page style record."""

from __future__ import annotations

import typing as typ

from ..config.helpers import _extend, _is_plain_object
from ..platforms import APP_STYLE_KEYS, Platform, is_platform_style_key


def _app_overlay(style: dict[str, typ.Any]) -> dict[str, typ.Any] | None:
    """Return the native-shell overlay, preferring ``app`` over ``app-plus``."""
    for key in APP_STYLE_KEYS:
        overlay = style.get(key)
        if overlay:
            return overlay if _is_plain_object(overlay) else None
    return None


def merge_platform_style(
    style: dict[str, typ.Any], platform: Platform | str
) -> dict[str, typ.Any]:
    """Shallow-merge the overlay for ``platform`` into ``style`` in place.

    ``h5`` and ``app`` builds both take the native-shell overlay (``app``, or
    the legacy ``app-plus`` key); every other platform takes the overlay keyed
    by its own identifier. Overlay fields win on collision and nested values
    are replaced wholesale.

    Examples
    --------
    >>> style = {"navigationBarTitleText": "Home", "app": {"navigationBarTitleText": "App"}}
    >>> merge_platform_style(style, "h5")["navigationBarTitleText"]
    'App'
    >>> style = {"mp-weixin": {"enablePullDownRefresh": True}}
    >>> merge_platform_style(style, "mp-weixin")["enablePullDownRefresh"]
    True
    """
    target = Platform.parse(platform)
    if target.has_window_chrome:
        return _extend(style, _app_overlay(style))
    overlay = style.get(target.value)
    return _extend(style, overlay if _is_plain_object(overlay) else None)


def remove_platform_style(style: dict[str, typ.Any]) -> dict[str, typ.Any]:
    """Delete every platform-keyed overlay from ``style`` and return it."""
    for name in [key for key in style if is_platform_style_key(key)]:
        del style[name]
    return style


__all__ = ["merge_platform_style", "remove_platform_style"]
