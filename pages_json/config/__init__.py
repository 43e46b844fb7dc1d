"""Load and describe pages.json documents for the normalizer.

This subpackage parses a project's ``pages.json`` (JSON with comments, or a
YAML rendition of it), defines the errors raised for malformed documents, and
carries :class:`NormalizeOptions`, the explicit switches and collaborators the
normalizer consumes instead of reading process-wide environment variables.
The primary entry point is :func:`load_pages_json`.

Examples
--------
>>> from pages_json.config import NormalizeOptions, load_pages_json
>>> options = NormalizeOptions.from_env({"UNI_NVUE_COMPILER": "vue"})
>>> options.compiles_nvue
False
>>> document = load_pages_json("src", "app", options=options)  # doctest: +SKIP
"""

from .models import (
    INPUT_DIR_ENV,
    NVUE_COMPILER_ENV,
    NormalizeOptions,
    PagesJsonError,
    PagesJsonParseError,
    UniRoute,
)
from .parser import parse_pages_json, parse_pages_yaml
from .loader import (
    load_pages_json,
    load_pages_json_once,
    read_pages_document,
    read_pages_source,
)

__all__ = [
    "INPUT_DIR_ENV",
    "NVUE_COMPILER_ENV",
    "NormalizeOptions",
    "PagesJsonError",
    "PagesJsonParseError",
    "UniRoute",
    "load_pages_json",
    "load_pages_json_once",
    "parse_pages_json",
    "parse_pages_yaml",
    "read_pages_document",
    "read_pages_source",
]
