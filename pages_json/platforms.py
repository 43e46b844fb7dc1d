"""Enumerated build targets understood by the pages.json normalizer."""

from __future__ import annotations

import enum

PLATFORM_STYLE_PREFIXES: tuple[str, ...] = ("h5", "app", "mp-", "quickapp")
"""Style keys starting with one of these prefixes are platform overlays."""

APP_STYLE_KEYS: tuple[str, ...] = ("app", "app-plus")
"""Native-shell overlay keys, current spelling first, legacy alias second."""


class Platform(enum.StrEnum):
    """Target platform a pages.json document is normalized for."""

    H5 = "h5"
    APP = "app"
    MP_WEIXIN = "mp-weixin"
    MP_ALIPAY = "mp-alipay"
    MP_BAIDU = "mp-baidu"
    MP_TOUTIAO = "mp-toutiao"
    MP_QQ = "mp-qq"
    MP_KUAISHOU = "mp-kuaishou"
    MP_LARK = "mp-lark"
    MP_JD = "mp-jd"
    MP_360 = "mp-360"
    QUICKAPP_WEBVIEW = "quickapp-webview"
    QUICKAPP_WEBVIEW_HUAWEI = "quickapp-webview-huawei"
    QUICKAPP_WEBVIEW_UNION = "quickapp-webview-union"

    @property
    def has_window_chrome(self) -> bool:
        """Return True for targets that render their own navigation chrome."""
        match self:
            case Platform.H5 | Platform.APP:
                return True
            case _:
                return False

    @classmethod
    def parse(cls, value: Platform | str) -> Platform:
        """Coerce ``value`` into a :class:`Platform`.

        Raises
        ------
        ValueError
            If ``value`` does not name a known platform.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            known = ", ".join(member.value for member in cls)
            msg = f"Unknown platform '{value}'. Known platforms: {known}"
            raise ValueError(msg) from exc


def is_platform_style_key(name: str) -> bool:
    """Return True when ``name`` identifies a platform-specific style overlay."""
    return name.startswith(PLATFORM_STYLE_PREFIXES)


__all__ = [
    "APP_STYLE_KEYS",
    "PLATFORM_STYLE_PREFIXES",
    "Platform",
    "is_platform_style_key",
]
