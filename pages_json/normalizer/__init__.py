"""Normalizers that turn a raw pages.json document into its canonical form."""

from .navigation_bar import normalize_navigation_bar
from .pages import (
    normalize_page_style,
    normalize_pages,
    normalize_pages_json,
    validate_pages,
)
from .routes import derive_routes
from .style import merge_platform_style, remove_platform_style
from .subpackages import normalize_subpackages
from .tab_bar import normalize_tab_bar

__all__ = [
    "derive_routes",
    "merge_platform_style",
    "normalize_navigation_bar",
    "normalize_page_style",
    "normalize_pages",
    "normalize_pages_json",
    "normalize_subpackages",
    "normalize_tab_bar",
    "remove_platform_style",
    "validate_pages",
]
