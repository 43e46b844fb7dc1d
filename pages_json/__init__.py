"""Normalize uni-app style ``pages.json`` route and style configuration.

This package turns a hand-authored pages.json document into a canonical,
platform-agnostic model: platform style overlays are merged and removed,
legacy navigation-bar keys become a structured descriptor, the tab bar gains
its defaults (and optional centre button), and sub-package pages are
flattened into the main page list. Code generators consume the result, or the
router table derived from it, without re-interpreting any of those rules.

Exports
-------
- ``normalize_pages_json``: Normalize a document for one platform.
- ``derive_routes``: Build the router table from a normalized document.
- ``load_pages_json``: Read ``pages.json`` from a project directory.
- ``NormalizeOptions``: Explicit NVue switches and injected collaborators.
- ``Platform``: Enumerated build targets.
- ``app`` / ``main``: The ``pages-json`` Cyclopts CLI.

Examples
--------
>>> from pages_json import derive_routes, normalize_pages_json
>>> document = normalize_pages_json('{"pages": [{"path": "pages/index"}]}', "h5")
>>> derive_routes(document)[0].meta["isEntry"]
True
"""

from __future__ import annotations

from .cli import app, main
from .config import (
    NormalizeOptions,
    PagesJsonError,
    PagesJsonParseError,
    UniRoute,
    load_pages_json,
    load_pages_json_once,
    parse_pages_json,
)
from .normalizer import derive_routes, normalize_pages_json
from .platforms import Platform

__all__ = [
    "NormalizeOptions",
    "PagesJsonError",
    "PagesJsonParseError",
    "Platform",
    "UniRoute",
    "app",
    "derive_routes",
    "load_pages_json",
    "load_pages_json_once",
    "main",
    "normalize_pages_json",
    "parse_pages_json",
]
