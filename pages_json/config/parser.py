"""Parse pages.json (JSON with comments) or pages.yaml text into a mapping."""

from __future__ import annotations

import typing as typ

import json5
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .models import PagesJsonParseError


def parse_pages_json(text: str) -> dict[str, typ.Any]:
    """Parse pages.json text, tolerating comments and trailing commas.

    Parameters
    ----------
    text : str
        Raw contents of a ``pages.json`` file.

    Returns
    -------
    dict[str, Any]
        Freshly decoded document.

    Raises
    ------
    PagesJsonParseError
        If the text is not valid JSON5 (JSON plus comments and trailing
        commas), or if the top-level value is not an object.

    Examples
    --------
    >>> parse_pages_json('{"pages": [{"path": "pages/index"},] // entry\\n}')
    {'pages': [{'path': 'pages/index'}]}
    """
    try:
        loaded = json5.loads(text)
    except ValueError as exc:
        msg = f"pages.json parse failed: {exc}"
        raise PagesJsonParseError(msg) from exc
    if not isinstance(loaded, dict):
        msg = "pages.json top-level value must be an object."
        raise PagesJsonParseError(msg)
    return loaded


def parse_pages_yaml(text: str) -> dict[str, typ.Any]:
    """Parse a YAML rendition of pages.json into a plain mapping.

    Raises
    ------
    PagesJsonParseError
        If the YAML is malformed or its top-level value is not a mapping.
    """
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(text) or {}
    except YAMLError as exc:
        msg = f"pages.yaml parse failed: {exc}"
        raise PagesJsonParseError(msg) from exc
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise PagesJsonParseError(msg)
    return dict(loaded)


__all__ = ["parse_pages_json", "parse_pages_yaml"]
