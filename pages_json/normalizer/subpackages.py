"""Flatten ``subPackages`` into page entries with root-relative paths."""

from __future__ import annotations

import logging
import typing as typ

from ..config.helpers import _as_list, _is_plain_object
from ..paths import join_path
from ..platforms import APP_STYLE_KEYS

logger = logging.getLogger(__name__)


def normalize_subpackages(subpackages: object) -> list[dict[str, typ.Any]]:
    """Return the pages of every usable sub-package, paths joined to its root.

    A sub-package contributes pages only when it has a truthy ``root`` and a
    non-empty ``pages`` list. Sub-package order and page order are preserved.

    Examples
    --------
    >>> normalize_subpackages([{"root": "pkgA", "pages": [{"path": "detail"}]}])
    [{'path': 'pkgA/detail'}]
    >>> normalize_subpackages(None)
    []
    """
    pages: list[dict[str, typ.Any]] = []
    for subpackage in _as_list(subpackages) or []:
        if not _is_plain_object(subpackage):
            continue
        root = subpackage.get("root")
        sub_pages = _as_list(subpackage.get("pages"))
        if not root or not sub_pages:
            logger.debug("skipping sub-package without root or pages: %r", root)
            continue
        for page in sub_pages:
            if not _is_plain_object(page):
                continue
            page["path"] = join_path(root, page.get("path") or "")
            style = page.get("style")
            if _is_plain_object(style):
                _normalize_subpackage_sub_nvues(root, style)
            pages.append(page)
    return pages


def _normalize_subpackage_sub_nvues(root: str, style: dict[str, typ.Any]) -> None:
    """Root-join the ``subNVues`` paths of the native-shell style overlay."""
    platform_style = next(
        (style[key] for key in APP_STYLE_KEYS if style.get(key)), None
    )
    if not _is_plain_object(platform_style):
        return
    for sub_nvue in _as_list(platform_style.get("subNVues")) or []:
        if _is_plain_object(sub_nvue) and sub_nvue.get("path"):
            sub_nvue["path"] = join_path(root, sub_nvue["path"])


__all__ = ["normalize_subpackages"]
