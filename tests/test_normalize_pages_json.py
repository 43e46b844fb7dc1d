"""Tests for the document-level pages.json normalizer.

These cover shape validation, the lenient parse-failure recovery, the order
in which sub-package pages are appended, per-platform style handling, the
NVue detection and entry hook collaborators, and re-normalization stability.
"""

from __future__ import annotations

import copy
import json
import logging
import typing as typ

import pytest

from pages_json.config import NormalizeOptions, PagesJsonError
from pages_json.normalizer import normalize_page_style, normalize_pages_json

if typ.TYPE_CHECKING:
    from pathlib import Path

    from pytest_mock import MockerFixture


def _document() -> dict[str, typ.Any]:
    return {
        "pages": [
            {
                "path": "pages/index/index",
                "style": {
                    "navigationBarTitleText": "Home",
                    "enablePullDownRefresh": True,
                    "app-plus": {"titleNView": {"transparentTitle": "always"}},
                    "mp-weixin": {"navigationBarTitleText": "Weixin Home"},
                    "h5": {"titleNView": False},
                },
            },
            {"path": "pages/about/about"},
        ],
        "subPackages": [
            {"root": "pkgA", "pages": [{"path": "detail", "style": {}}]},
        ],
        "globalStyle": {
            "navigationBarTextStyle": "black",
            "navigationBarBackgroundColor": "#F8F8F8",
            "enablePullDownRefresh": True,
            "mp-alipay": {"allowsBounceVertical": "NO"},
        },
        "tabBar": {
            "list": [
                {"pagePath": "pages/index/index", "iconPath": "static/home.png"},
                {"pagePath": "pages/about/about"},
            ]
        },
    }


def test_non_list_pages_are_reset_and_raise() -> None:
    document: dict[str, typ.Any] = {"pages": {"path": "pages/index"}}
    with pytest.raises(PagesJsonError, match="parse failed") as excinfo:
        normalize_pages_json(document, "h5")
    assert document["pages"] == [], "pages must be cleared before raising"
    assert excinfo.value.document is document


def test_missing_pages_are_reset_and_raise() -> None:
    document: dict[str, typ.Any] = {"globalStyle": {}}
    with pytest.raises(PagesJsonError):
        normalize_pages_json(document, "app")
    assert document["pages"] == []


def test_empty_pages_raise_without_mutation() -> None:
    document: dict[str, typ.Any] = {"pages": []}
    pages = document["pages"]
    with pytest.raises(PagesJsonError, match="at least 1 page"):
        normalize_pages_json(document, "h5")
    assert document["pages"] is pages
    assert document["pages"] == []


def test_parse_failure_is_logged_then_fails_validation(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Malformed text falls back to an empty document, which has no pages."""
    with caplog.at_level(logging.ERROR, logger="pages_json"):
        with pytest.raises(PagesJsonError) as excinfo:
            normalize_pages_json('{"pages": [', "h5")
    assert "pages.json parse failed" in caplog.text
    assert excinfo.value.document == {
        "pages": [],
        "globalStyle": {"navigationBar": {}},
    }


def test_undecodable_bytes_are_logged_then_fail_validation(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.ERROR, logger="pages_json"):
        with pytest.raises(PagesJsonError, match="at least 1 page"):
            normalize_pages_json(b'{"pages": "\xff"}', "h5")
    assert "pages.json parse failed" in caplog.text


def test_text_with_comments_is_accepted() -> None:
    text = """
    {
        // entry page
        "pages": [{"path": "pages/index/index"},],
        /* shared style */
        "globalStyle": {"navigationBarTitleText": "App"}
    }
    """
    document = normalize_pages_json(text, "h5")
    assert document["globalStyle"]["navigationBar"] == {"titleText": "App"}


def test_sub_package_pages_follow_top_level_pages() -> None:
    document = normalize_pages_json(_document(), "mp-weixin")
    assert [page["path"] for page in document["pages"]] == [
        "pages/index/index",
        "pages/about/about",
        "pkgA/detail",
    ]


def test_subpackages_lowercase_spelling_is_accepted() -> None:
    raw = {
        "pages": [{"path": "pages/index"}],
        "subpackages": [{"root": "pkgB", "pages": [{"path": "list"}]}],
    }
    document = normalize_pages_json(raw, "h5")
    assert document["pages"][-1]["path"] == "pkgB/list"


def test_app_platform_derives_navigation_bar() -> None:
    document = normalize_pages_json(_document(), "app")
    style = document["pages"][0]["style"]
    assert style["navigationBar"] == {
        "titleText": "Home",
        "style": "custom",
        "type": "float",
    }
    assert style["enablePullDownRefresh"] is True
    assert not [key for key in style if key.startswith(("app", "mp-", "h5"))]


def test_h5_platform_uses_app_overlay() -> None:
    document = normalize_pages_json(_document(), "h5")
    navigation_bar = document["pages"][0]["style"]["navigationBar"]
    assert navigation_bar["type"] == "float"
    assert "h5" not in document["pages"][0]["style"]


def test_mini_program_only_merges_overlay() -> None:
    document = normalize_pages_json(_document(), "mp-weixin")
    style = document["pages"][0]["style"]
    assert style["navigationBarTitleText"] == "Weixin Home"
    assert "navigationBar" not in style, "no chrome derivation for mini programs"
    assert "titleNView" not in style
    assert "mp-weixin" not in style and "app-plus" not in style


def test_missing_page_style_becomes_empty_navigation_bar() -> None:
    document = normalize_pages_json(_document(), "mp-weixin")
    assert document["pages"][1]["style"] == {"navigationBar": {}}


def test_global_style_is_normalized_without_pull_down_refresh() -> None:
    document = normalize_pages_json(_document(), "h5")
    global_style = document["globalStyle"]
    assert global_style["navigationBar"] == {
        "backgroundColor": "#F8F8F8",
        "titleColor": "#000000",
    }
    assert global_style["enablePullDownRefresh"] is True, "flag is passed through"
    assert "mp-alipay" not in global_style
    assert "isNVue" not in global_style


def test_missing_global_style_gets_placeholder() -> None:
    document = normalize_pages_json({"pages": [{"path": "p"}]}, "h5")
    assert document["globalStyle"] == {"navigationBar": {}}


def test_tab_bar_is_normalized_or_dropped() -> None:
    document = normalize_pages_json(_document(), "h5")
    assert document["tabBar"]["list"][0]["iconPath"] == "/static/home.png"
    assert document["tabBar"]["shown"] is True

    raw = _document()
    raw["tabBar"] = {"list": []}
    assert "tabBar" not in normalize_pages_json(raw, "h5")


@pytest.mark.parametrize("tab_bar", [{}, None, "", [], "tabs", {"midButton": {}}])
def test_tab_bar_without_items_is_dropped(tab_bar: object) -> None:
    """Any tabBar that is not a mapping with list items is removed."""
    raw = _document()
    raw["tabBar"] = tab_bar
    document = normalize_pages_json(raw, "h5")
    assert "tabBar" not in document, f"expected {tab_bar!r} to be dropped"


def test_nvue_detection_marks_pages(mocker: MockerFixture, tmp_path: Path) -> None:
    detector = mocker.Mock(side_effect=lambda path: path == "pages/about/about")
    options = NormalizeOptions(input_dir=tmp_path, nvue_probe=detector)
    document = normalize_pages_json(_document(), "app", options)
    assert document["pages"][1]["style"] == {"navigationBar": {}, "isNVue": True}
    assert "isNVue" not in document["pages"][0]["style"]
    checked = [call.args[0] for call in detector.call_args_list]
    assert checked == ["pages/index/index", "pages/about/about", "pkgA/detail"], (
        f"expected only page styles to be checked, got {checked!r}"
    )


def test_nvue_detection_defaults_to_filesystem(tmp_path: Path) -> None:
    (tmp_path / "pages" / "about").mkdir(parents=True)
    (tmp_path / "pages" / "about" / "about.nvue").write_text("", encoding="utf-8")
    options = NormalizeOptions(input_dir=tmp_path)
    document = normalize_pages_json(_document(), "h5", options)
    assert document["pages"][1]["style"].get("isNVue") is True
    assert "isNVue" not in document["pages"][0]["style"]


def test_nvue_detection_skipped_without_input_dir_or_for_vue_compiler(
    mocker: MockerFixture, tmp_path: Path
) -> None:
    detector = mocker.Mock(return_value=True)
    normalize_pages_json(_document(), "app", NormalizeOptions(nvue_probe=detector))
    normalize_pages_json(
        _document(),
        "app",
        NormalizeOptions(input_dir=tmp_path, nvue_compiler="vue", nvue_probe=detector),
    )
    normalize_pages_json(
        _document(), "mp-weixin", NormalizeOptions(input_dir=tmp_path, nvue_probe=detector)
    )
    detector.assert_not_called()


def test_nvue_entry_hook_runs_once_for_app(mocker: MockerFixture) -> None:
    hook = mocker.Mock()
    document = normalize_pages_json(
        _document(), "app", NormalizeOptions(nvue_entry_hook=hook)
    )
    hook.assert_called_once_with(document["pages"])


def test_nvue_entry_hook_skipped_for_other_targets(mocker: MockerFixture) -> None:
    hook = mocker.Mock()
    normalize_pages_json(_document(), "h5", NormalizeOptions(nvue_entry_hook=hook))
    normalize_pages_json(
        _document(), "app", NormalizeOptions(nvue_compiler="vue", nvue_entry_hook=hook)
    )
    hook.assert_not_called()


def test_normalized_output_is_json_serializable() -> None:
    document = normalize_pages_json(_document(), "app")
    assert json.loads(json.dumps(document)) == document


@pytest.mark.parametrize("platform", ["h5", "app", "mp-weixin"])
def test_renormalizing_styles_and_tab_bar_is_stable(platform: str) -> None:
    raw = _document()
    raw["tabBar"]["list"].extend(
        [{"pagePath": "pkgA/detail"}, {"pagePath": "pages/extra"}]
    )
    raw["tabBar"]["midButton"] = {"iconPath": "static/plus.png"}
    first = normalize_pages_json(raw, platform)
    snapshot = copy.deepcopy(first)
    again = copy.deepcopy(first)
    again.pop("subPackages")
    second = normalize_pages_json(again, platform)
    assert second["pages"] == snapshot["pages"]
    assert second["globalStyle"] == snapshot["globalStyle"]
    assert second["tabBar"] == snapshot["tabBar"]


def test_page_style_helper_accepts_none() -> None:
    assert normalize_page_style(None, None, "h5") == {"navigationBar": {}}
