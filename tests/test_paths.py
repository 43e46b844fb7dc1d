"""Unit tests for the path helpers used by the normalizers."""

from __future__ import annotations

import pytest

from pages_json.paths import is_external_path, join_path, normalize_filepath, normalize_path


def test_normalize_path_collapses_separators() -> None:
    """Backslashes, doubled slashes, and dot segments should collapse."""
    assert normalize_path("pkgA\\pages//detail") == "pkgA/pages/detail"
    assert normalize_path("pkgA/./list/../detail") == "pkgA/detail"


def test_normalize_path_is_idempotent() -> None:
    once = normalize_path("a//b/./c")
    assert normalize_path(once) == once, f"expected stable output, got {once!r}"


def test_join_path_keeps_root_for_leading_slash() -> None:
    """A later segment starting with ``/`` must stay relative to the root."""
    assert join_path("pkgA", "detail") == "pkgA/detail"
    assert join_path("pkgA/", "/detail") == "pkgA/detail"
    assert join_path("pkgA", "") == "pkgA"


@pytest.mark.parametrize(
    "path",
    [
        "https://cdn.example.invalid/a.png",
        "HTTP://cdn.example.invalid/a.png",
        "//cdn.example.invalid/a.png",
        "data:image/png;base64,AAAA",
        "/static/a.png",
    ],
)
def test_normalize_filepath_leaves_absolute_forms(path: str) -> None:
    assert normalize_filepath(path) == path, f"expected {path!r} unchanged"


def test_normalize_filepath_prefixes_relative_paths() -> None:
    assert normalize_filepath("static/a.png") == "/static/a.png"


def test_data_uri_without_comma_is_not_external() -> None:
    """The data URI form requires a comma separating the payload."""
    assert not is_external_path("data:image/png")
    assert normalize_filepath("data:image/png") == "/data:image/png"
