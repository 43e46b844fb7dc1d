"""Common literal values used across pages_json.

These constants keep default chrome values and filenames centralized so the
normalizers, the loader, and tests can import the same values without
drifting. Intended for internal use within the pages_json package.

Examples
--------
>>> from pages_json import _constants
>>> _constants.DEFAULT_TAB_BAR["height"]
'50px'
>>> _constants.PAGES_JSON_FILENAME
'pages.json'
"""

PAGES_JSON_FILENAME = "pages.json"
NVUE_EXTENSION = ".nvue"
NVUE_COMPILER_VUE = "vue"

TABBAR_HEIGHT = 50

NAVIGATION_BAR_MAPS: dict[str, str] = {
    "navigationBarBackgroundColor": "backgroundColor",
    "navigationBarTextStyle": "textStyle",
    "navigationBarTitleText": "titleText",
    "navigationStyle": "style",
    "titleImage": "titleImage",
    "titlePenetrate": "titlePenetrate",
}

DEFAULT_COVERAGE = "132px"

DEFAULT_SEARCH_INPUT: dict[str, object] = {
    "autoFocus": False,
    "align": "center",
    "color": "#000",
    "backgroundColor": "rgba(255,255,255,0.5)",
    "borderRadius": "0px",
    "placeholder": "",
    "placeholderColor": "#CCCCCC",
    "disabled": False,
}

DEFAULT_TAB_BAR: dict[str, object] = {
    "position": "bottom",
    "color": "#999",
    "selectedColor": "#007aff",
    "borderStyle": "black",
    "blurEffect": "none",
    "fontSize": "10px",
    "iconWidth": "24px",
    "spacing": "3px",
    "height": f"{TABBAR_HEIGHT}px",
}

DEFAULT_MID_BUTTON: dict[str, object] = {
    "type": "midButton",
    "width": "50px",
    "height": "50px",
    "iconWidth": "24px",
}

MID_BUTTON_TYPE = "midButton"
