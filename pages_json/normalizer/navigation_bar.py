"""Derive the canonical navigation-bar descriptor from legacy page style keys.

The rules below run strictly in order because later rules read fields that
earlier rules produce: ``transparentTitle`` decides ``type``, which decides
button colours and the default ``coverage``.
"""

from __future__ import annotations

import re
import typing as typ

from .._constants import DEFAULT_COVERAGE, DEFAULT_SEARCH_INPUT, NAVIGATION_BAR_MAPS
from ..config.helpers import _as_list, _extend, _is_plain_object

_UNICODE_ESCAPE_RE = re.compile(r"\\u")
_TRAILING_DIGIT_RE = re.compile(r"\d$")

TRANSPARENT = "transparent"


def normalize_navigation_bar(style: dict[str, typ.Any]) -> dict[str, typ.Any]:
    """Build the ``navigationBar`` descriptor and strip consumed style keys.

    An existing ``navigationBar`` mapping seeds the descriptor so that an
    already-normalized style keeps the fields it carries.

    Parameters
    ----------
    style : dict[str, Any]
        Platform-merged page style. Legacy keys are deleted from it.

    Returns
    -------
    dict[str, Any]
        The derived descriptor (not yet attached to ``style``).

    Examples
    --------
    >>> style = {"navigationBarTitleText": "Home", "navigationBarTextStyle": "black"}
    >>> normalize_navigation_bar(style)
    {'titleText': 'Home', 'titleColor': '#000000'}
    >>> style
    {}
    """
    existing = style.get("navigationBar")
    navigation_bar: dict[str, typ.Any] = (
        dict(existing) if _is_plain_object(existing) else {}
    )

    for legacy, canonical in NAVIGATION_BAR_MAPS.items():
        if legacy in style:
            navigation_bar[canonical] = style.pop(legacy)

    title_nview = style.get("titleNView")
    if _is_plain_object(title_nview):
        _extend(navigation_bar, title_nview)
        del style["titleNView"]
    elif title_nview is False:
        navigation_bar["style"] = "custom"

    if "transparentTitle" in navigation_bar:
        transparent_title = navigation_bar.pop("transparentTitle")
        if transparent_title == "always":
            navigation_bar["style"] = "custom"
            navigation_bar["type"] = "float"
        elif transparent_title == "auto":
            navigation_bar["type"] = TRANSPARENT
        else:
            navigation_bar["type"] = "default"

    if navigation_bar.get("titleImage") and navigation_bar.get("titleText"):
        del navigation_bar["titleText"]

    if not navigation_bar.get("titleColor") and "textStyle" in navigation_bar:
        text_style = navigation_bar.pop("textStyle")
        navigation_bar["titleColor"] = "#000000" if text_style == "black" else "#ffffff"

    shadow = style.get("navigationBarShadow")
    if _is_plain_object(shadow) and shadow.get("colorType"):
        navigation_bar["shadowColorType"] = shadow["colorType"]
        del style["navigationBarShadow"]

    buttons = _as_list(navigation_bar.get("buttons"))
    if buttons is not None:
        navigation_bar["buttons"] = [
            normalize_navigation_bar_button(
                button,
                nav_type=navigation_bar.get("type"),
                title_color=navigation_bar.get("titleColor"),
            )
            if _is_plain_object(button)
            else button
            for button in buttons
        ]

    search_input = navigation_bar.get("searchInput")
    if _is_plain_object(search_input):
        navigation_bar["searchInput"] = normalize_navigation_bar_search_input(
            search_input
        )

    if navigation_bar.get("type") == TRANSPARENT:
        navigation_bar["coverage"] = navigation_bar.get("coverage") or DEFAULT_COVERAGE
    return navigation_bar


def normalize_navigation_bar_button(
    button: dict[str, typ.Any],
    *,
    nav_type: str | None,
    title_color: str | None,
) -> dict[str, typ.Any]:
    """Fill colour, font size, and text defaults on a navigation-bar button."""
    transparent = nav_type == TRANSPARENT
    button["color"] = "#ffffff" if transparent else button.get("color") or title_color
    text = button.get("text")
    font_size = button.get("fontSize")
    if not font_size:
        escaped = bool(text) and bool(_UNICODE_ESCAPE_RE.search(str(text)))
        button["fontSize"] = "22px" if transparent or escaped else "27px"
    elif _TRAILING_DIGIT_RE.search(str(font_size)):
        button["fontSize"] = f"{font_size}px"
    button["text"] = text or ""
    return button


def normalize_navigation_bar_search_input(
    search_input: dict[str, typ.Any],
) -> dict[str, typ.Any]:
    """Return ``search_input`` layered over the default search box settings."""
    return _extend(dict(DEFAULT_SEARCH_INPUT), search_input)


def is_enable_pull_down_refresh(style: dict[str, typ.Any]) -> bool:
    """Return True when the page opts into pull-down refresh."""
    pull_to_refresh = style.get("pullToRefresh")
    support = pull_to_refresh.get("support") if _is_plain_object(pull_to_refresh) else None
    return bool(style.get("enablePullDownRefresh") or support)


def apply_pull_down_refresh(style: dict[str, typ.Any]) -> dict[str, typ.Any]:
    """Set ``enablePullDownRefresh`` and pass ``pullToRefresh`` through."""
    if not is_enable_pull_down_refresh(style):
        return style
    style["enablePullDownRefresh"] = True
    if style.get("pullToRefresh") is None:
        style.pop("pullToRefresh", None)
    return style


__all__ = [
    "apply_pull_down_refresh",
    "is_enable_pull_down_refresh",
    "normalize_navigation_bar",
    "normalize_navigation_bar_button",
    "normalize_navigation_bar_search_input",
]
