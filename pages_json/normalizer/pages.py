"""Normalize a whole pages.json document for one target platform.

This module drives the per-section normalizers in a fixed order: shape
validation, sub-package flattening, per-page style normalization, the NVue
entry hook, ``globalStyle``, and finally ``tabBar``. The primary entry point is
:func:`normalize_pages_json`.

Examples
--------
>>> from pages_json.normalizer import normalize_pages_json
>>> document = normalize_pages_json(
...     '{"pages": [{"path": "pages/index/index"}]}', "mp-weixin"
... )
>>> document["pages"][0]["style"]
{'navigationBar': {}}
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ

from ..config.helpers import _is_plain_object
from ..config.models import NormalizeOptions, PagesJsonError, PagesJsonParseError
from ..config.parser import parse_pages_json
from ..platforms import Platform
from .navigation_bar import apply_pull_down_refresh, normalize_navigation_bar
from .style import merge_platform_style, remove_platform_style
from .subpackages import normalize_subpackages
from .tab_bar import normalize_tab_bar

logger = logging.getLogger(__name__)

RawDocument = str | bytes | cabc.Mapping[str, typ.Any]


def _placeholder_document() -> dict[str, typ.Any]:
    return {"pages": [], "globalStyle": {"navigationBar": {}}}


def normalize_pages_json(
    raw: RawDocument,
    platform: Platform | str,
    options: NormalizeOptions | None = None,
) -> dict[str, typ.Any]:
    """Return the canonical pages.json document for ``platform``.

    Parameters
    ----------
    raw : str | bytes | Mapping[str, Any]
        pages.json text, or an already decoded document. A ``dict`` is
        normalized in place: the caller hands over exclusive access to it.
    platform : Platform | str
        Build target, for example ``"h5"``, ``"app"`` or ``"mp-weixin"``.
    options : NormalizeOptions | None, optional
        NVue settings and collaborators. Defaults to options with no input
        directory, which disables the NVue probe.

    Returns
    -------
    dict[str, Any]
        The normalized document: platform overlays removed, navigation and
        tab-bar chrome canonicalized, sub-package pages appended to ``pages``.

    Raises
    ------
    PagesJsonError
        If ``pages`` is not a list (it is reset to ``[]`` first) or is empty.
        Text that fails to parse is logged and replaced by an empty document,
        which then fails this same check.
    ValueError
        If ``platform`` is not a known platform identifier.
    """
    target = Platform.parse(platform)
    opts = options or NormalizeOptions()
    document = _coerce_document(raw)

    validate_pages(document)
    pages: list[typ.Any] = document["pages"]
    pages.extend(
        normalize_subpackages(
            document.get("subPackages") or document.get("subpackages")
        )
    )
    normalize_pages(pages, target, opts)

    if (
        target is Platform.APP
        and opts.compiles_nvue
        and opts.nvue_entry_hook is not None
    ):
        opts.nvue_entry_hook(pages)

    document["globalStyle"] = normalize_page_style(
        None, document.get("globalStyle"), target, opts
    )

    if "tabBar" in document:
        tab_bar = document["tabBar"]
        normalized = normalize_tab_bar(tab_bar) if _is_plain_object(tab_bar) else None
        if normalized is None:
            del document["tabBar"]
        else:
            document["tabBar"] = normalized
    return document


def _coerce_document(raw: RawDocument) -> dict[str, typ.Any]:
    """Decode ``raw`` into a mutable document, falling back on parse errors."""
    match raw:
        case dict():
            return raw
        case cabc.Mapping():
            return dict(raw)
        case str() | bytes():
            try:
                text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
                return parse_pages_json(text)
            except (PagesJsonParseError, UnicodeDecodeError):
                logger.exception("pages.json parse failed:\n%s", raw)
                return _placeholder_document()
        case _:
            msg = f"pages.json must be text or a mapping, not {type(raw).__name__}."
            raise TypeError(msg)


def validate_pages(document: dict[str, typ.Any]) -> None:
    """Ensure ``document["pages"]`` is a non-empty list.

    Raises
    ------
    PagesJsonError
        If ``pages`` is not a list (after resetting it to ``[]``) or is empty.
    """
    pages = document.get("pages")
    if not isinstance(pages, list):
        document["pages"] = []
        msg = "pages.json->pages parse failed."
        raise PagesJsonError(msg, document)
    if not pages:
        msg = "pages.json->pages must contain at least 1 page."
        raise PagesJsonError(msg, document)


def normalize_pages(
    pages: list[typ.Any],
    platform: Platform | str,
    options: NormalizeOptions | None = None,
) -> list[typ.Any]:
    """Normalize the ``style`` of every page entry in place."""
    target = Platform.parse(platform)
    for page in pages:
        if _is_plain_object(page):
            page["style"] = normalize_page_style(
                page.get("path"), page.get("style"), target, options
            )
    return pages


def normalize_page_style(
    page_path: str | None,
    page_style: dict[str, typ.Any] | None,
    platform: Platform | str,
    options: NormalizeOptions | None = None,
) -> dict[str, typ.Any]:
    """Merge overlays, derive chrome, and strip platform keys from a style.

    ``page_path`` is ``None`` for ``globalStyle``, which skips the NVue probe
    and the pull-down refresh flags.
    """
    target = Platform.parse(platform)
    opts = options or NormalizeOptions()
    is_nvue = (
        bool(page_path) and target.has_window_chrome and opts.is_nvue_page(page_path)
    )

    if not _is_plain_object(page_style):
        style: dict[str, typ.Any] = {"navigationBar": {}}
        if is_nvue:
            style["isNVue"] = True
        return style

    merge_platform_style(page_style, target)
    if target.has_window_chrome:
        page_style["navigationBar"] = normalize_navigation_bar(page_style)
        if page_path is not None:
            apply_pull_down_refresh(page_style)
    if is_nvue:
        page_style["isNVue"] = True
    else:
        page_style.pop("isNVue", None)
    return remove_platform_style(page_style)


__all__ = [
    "normalize_page_style",
    "normalize_pages",
    "normalize_pages_json",
    "validate_pages",
]
