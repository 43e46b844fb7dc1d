"""Derive the router table from an already-normalized pages.json document."""

from __future__ import annotations

import typing as typ

from ..config.helpers import _as_list, _is_plain_object
from ..config.models import UniRoute


def derive_routes(document: typ.Mapping[str, typ.Any]) -> list[UniRoute]:
    """Return one :class:`UniRoute` per page, in page order.

    ``isEntry`` marks the first page, ``isTabBar``/``tabBarIndex`` record the
    first tab whose ``pagePath`` equals the page path, and ``isQuit`` marks
    pages from which a back gesture leaves the app. Flags that do not apply
    are omitted; the page style is layered on top and wins on collision.
    The document is not modified.

    Examples
    --------
    >>> document = {
    ...     "pages": [{"path": "/home", "style": {}}, {"path": "/about"}],
    ...     "tabBar": {"list": [{"pagePath": "/home"}]},
    ... }
    >>> [route.meta for route in derive_routes(document)]
    [{'isQuit': True, 'isEntry': True, 'isTabBar': True, 'tabBarIndex': 0}, {}]
    """
    pages = [
        page
        for page in _as_list(document.get("pages")) or []
        if _is_plain_object(page)
    ]
    if not pages:
        return []
    first_page_path = pages[0].get("path")
    tab_bar = document.get("tabBar")
    tab_items = _as_list(tab_bar.get("list")) if _is_plain_object(tab_bar) else None
    tab_paths = [
        item.get("pagePath") if _is_plain_object(item) else None
        for item in tab_items or []
    ]
    return [
        _build_route(page, first_page_path=first_page_path, tab_paths=tab_paths)
        for page in pages
    ]


def _build_route(
    page: dict[str, typ.Any],
    *,
    first_page_path: str | None,
    tab_paths: list[str | None],
) -> UniRoute:
    page_path = page.get("path")
    is_entry = page_path == first_page_path
    tab_bar_index = (
        tab_paths.index(page_path)
        if page_path is not None and page_path in tab_paths
        else None
    )
    is_tab_bar = tab_bar_index is not None
    window_top = 0

    flags: dict[str, typ.Any] = {
        "isQuit": True if is_entry or is_tab_bar else None,
        "isEntry": True if is_entry else None,
        "isTabBar": True if is_tab_bar else None,
        "tabBarIndex": tab_bar_index,
        "windowTop": window_top or None,
    }
    meta = {key: value for key, value in flags.items() if value is not None}
    style = page.get("style")
    if _is_plain_object(style):
        meta.update(style)
    return UniRoute(path=page_path, meta=meta)


__all__ = ["derive_routes"]
