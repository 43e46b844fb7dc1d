"""Load pages.json from a project directory and optionally normalize it."""

from __future__ import annotations

import functools
import typing as typ
from pathlib import Path

from .._constants import PAGES_JSON_FILENAME
from ..normalizer.pages import normalize_pages_json
from ..platforms import Platform
from .models import NormalizeOptions
from .parser import parse_pages_json, parse_pages_yaml

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def _read_config_text(path: Path) -> str:
    """Return the UTF-8 text of ``path``, raising when it does not exist."""
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)
    return path.read_text(encoding="utf-8")


def read_pages_source(path: Path) -> str | dict[str, typ.Any]:
    """Return pages.json text, or the parsed mapping for a pages.yaml file.

    JSON sources stay as text so :func:`normalize_pages_json` applies its
    logged fallback to malformed documents.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    PagesJsonParseError
        If a YAML file cannot be parsed into a mapping.
    """
    text = _read_config_text(path)
    if path.suffix.lower() in _YAML_SUFFIXES:
        return parse_pages_yaml(text)
    return text


def read_pages_document(path: Path) -> dict[str, typ.Any]:
    """Read and parse a pages.json (or pages.yaml) file without normalizing it.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    PagesJsonParseError
        If the file contents cannot be parsed into a mapping.
    """
    source = read_pages_source(path)
    return source if isinstance(source, dict) else parse_pages_json(source)


def load_pages_json(
    input_dir: Path | str,
    platform: Platform | str,
    *,
    normalize: bool = True,
    options: NormalizeOptions | None = None,
) -> dict[str, typ.Any]:
    """Load ``<input_dir>/pages.json`` for ``platform``.

    Parameters
    ----------
    input_dir : Path | str
        Project source directory holding ``pages.json``.
    platform : Platform | str
        Build target used for normalization.
    normalize : bool, optional
        When False, return the parsed document untouched.
    options : NormalizeOptions | None, optional
        Normalizer options; defaults to options whose ``input_dir`` is the
        directory being loaded so ``.nvue`` siblings are detected.

    Returns
    -------
    dict[str, Any]
        The parsed (and, by default, normalized) document.

    Raises
    ------
    FileNotFoundError
        If ``pages.json`` does not exist below ``input_dir``.
    PagesJsonError
        If the normalized document has no pages.

    Examples
    --------
    >>> from pages_json.config import load_pages_json
    >>> document = load_pages_json("src", "h5")  # doctest: +SKIP
    >>> document["pages"][0]["path"]  # doctest: +SKIP
    'pages/index/index'
    """
    directory = Path(input_dir)
    text = _read_config_text(directory / PAGES_JSON_FILENAME)
    if not normalize:
        return parse_pages_json(text)
    opts = options or NormalizeOptions(input_dir=directory)
    return normalize_pages_json(text, platform, opts)


@functools.cache
def load_pages_json_once(
    input_dir: Path | str, platform: Platform | str, *, normalize: bool = True
) -> dict[str, typ.Any]:
    """Memoised :func:`load_pages_json`; call ``cache_clear()`` to reset it.

    Every caller shares the returned document and must treat it as read-only.
    """
    return load_pages_json(input_dir, platform, normalize=normalize)


__all__ = [
    "load_pages_json",
    "load_pages_json_once",
    "read_pages_document",
    "read_pages_source",
]
