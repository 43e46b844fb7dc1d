"""Path helpers shared by the page, sub-package, and tab-bar normalizers."""

from __future__ import annotations

import posixpath
import re

_SCHEME_RE = re.compile(r"^([a-z-]+:)?//", re.IGNORECASE)
_DATA_RE = re.compile(r"^data:.*,.*")


def normalize_path(path: str) -> str:
    """Return ``path`` with ``/`` separators and redundant segments collapsed.

    Examples
    --------
    >>> normalize_path("pkgA\\\\pages//detail")
    'pkgA/pages/detail'
    >>> normalize_path("pkgA/./list/../detail")
    'pkgA/detail'
    """
    if not path:
        return path
    return posixpath.normpath(path.replace("\\", "/"))


def join_path(*segments: str) -> str:
    """Join path segments the way a relative filesystem join would.

    Unlike :func:`posixpath.join`, a leading slash on a later segment does not
    discard the segments before it.

    Examples
    --------
    >>> join_path("pkgA", "detail")
    'pkgA/detail'
    >>> join_path("pkgA/", "/detail")
    'pkgA/detail'
    """
    return normalize_path("/".join(segment for segment in segments if segment))


def is_external_path(path: str) -> bool:
    """Return True for absolute URLs (scheme optional) and data URIs."""
    return bool(_SCHEME_RE.match(path) or _DATA_RE.match(path))


def normalize_filepath(path: str) -> str:
    """Prefix relative asset paths with ``/`` so they resolve from the app root.

    Examples
    --------
    >>> normalize_filepath("static/home.png")
    '/static/home.png'
    >>> normalize_filepath("https://cdn.example.invalid/home.png")
    'https://cdn.example.invalid/home.png'
    >>> normalize_filepath("/static/home.png")
    '/static/home.png'
    """
    if is_external_path(path) or path.startswith("/"):
        return path
    return f"/{path}"


__all__ = ["is_external_path", "join_path", "normalize_filepath", "normalize_path"]
