"""Cyclopts CLI entrypoint for normalizing pages.json documents.

The ``pages-json`` console script defined here loads a project's
``pages.json``, normalizes it for one build target, and prints (or writes) the
canonical document or the derived router table. Typical usage is running
``pages-json normalize --platform app`` while debugging a build, or
``pages-json routes --platform h5`` to inspect the route metadata a code
generator will receive.

Examples
--------
Normalize ``src/pages.json`` for the H5 target:

>>> from pages_json.cli import app
>>> app(["normalize", "--input-dir", "src", "--platform", "h5"])  # doctest: +SKIP

Write the router table as YAML:

>>> app(
...     ["routes", "--platform", "app", "--format", "yaml", "--output", "routes.yaml"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import io
import json
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml import YAML

from ._constants import PAGES_JSON_FILENAME
from .config import NormalizeOptions, read_pages_source
from .normalizer import derive_routes, normalize_pages_json
from .platforms import Platform

DEFAULT_INPUT_DIR = Path("src")

OutputFormat = typ.Literal["json", "yaml"]

app = App(name="pages-json", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _render(payload: typ.Any, output_format: OutputFormat) -> str:
    """Serialize ``payload`` as indented JSON or block-style YAML."""
    if output_format == "yaml":
        dumper = YAML(typ="safe")
        dumper.default_flow_style = False
        buffer = io.StringIO()
        dumper.dump(payload, buffer)
        return buffer.getvalue()
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def _emit(payload: typ.Any, output_format: OutputFormat, output: Path | None) -> None:
    text = _render(payload, output_format)
    if output is None:
        print(text, end="")
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    print(f"wrote {_format_path(output)}")


def _load_normalized(
    *,
    input_dir: Path,
    config: Path | None,
    platform: str,
    nvue_compiler: str | None,
) -> dict[str, typ.Any]:
    """Read the pages document and normalize it for ``platform``."""
    source = config or input_dir / PAGES_JSON_FILENAME
    document = read_pages_source(source)
    options = NormalizeOptions(input_dir=input_dir, nvue_compiler=nvue_compiler)
    return normalize_pages_json(document, Platform.parse(platform), options)


@app.command(help="Print the normalized pages.json document for a platform.")
def normalize(
    *,
    platform: typ.Annotated[
        str, Parameter(help="Build target, e.g. h5, app, mp-weixin")
    ] = Platform.H5.value,
    input_dir: typ.Annotated[
        Path, Parameter(help="Project source directory", env_var="UNI_INPUT_DIR")
    ] = DEFAULT_INPUT_DIR,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Explicit pages.json or pages.yaml path"),
    ] = None,
    nvue_compiler: typ.Annotated[
        str | None,
        Parameter(help="NVue compiler mode", env_var="UNI_NVUE_COMPILER"),
    ] = None,
    output: typ.Annotated[
        Path | None, Parameter(help="Write to this file instead of stdout")
    ] = None,
    output_format: typ.Annotated[
        OutputFormat, Parameter(name="--format", help="Output format")
    ] = "json",
) -> None:
    """Normalize a pages document and emit it.

    Parameters
    ----------
    platform : str, optional
        Target platform identifier; defaults to ``h5``.
    input_dir : Path, optional
        Directory holding ``pages.json`` and any ``.nvue`` page siblings.
    config : Path or None, optional
        Explicit document path; overrides ``<input_dir>/pages.json``.
    nvue_compiler : str or None, optional
        ``"vue"`` disables NVue detection.
    output : Path or None, optional
        Destination file; stdout when omitted.
    output_format : {"json", "yaml"}, optional
        Serialization format.

    Raises
    ------
    PagesJsonError
        If the document has no pages.
    """
    document = _load_normalized(
        input_dir=input_dir,
        config=config,
        platform=platform,
        nvue_compiler=nvue_compiler,
    )
    _emit(document, output_format, output)


@app.command(help="Print the router table derived from pages.json.")
def routes(
    *,
    platform: typ.Annotated[
        str, Parameter(help="Build target, e.g. h5, app, mp-weixin")
    ] = Platform.H5.value,
    input_dir: typ.Annotated[
        Path, Parameter(help="Project source directory", env_var="UNI_INPUT_DIR")
    ] = DEFAULT_INPUT_DIR,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Explicit pages.json or pages.yaml path"),
    ] = None,
    nvue_compiler: typ.Annotated[
        str | None,
        Parameter(help="NVue compiler mode", env_var="UNI_NVUE_COMPILER"),
    ] = None,
    output: typ.Annotated[
        Path | None, Parameter(help="Write to this file instead of stdout")
    ] = None,
    output_format: typ.Annotated[
        OutputFormat, Parameter(name="--format", help="Output format")
    ] = "json",
) -> None:
    """Normalize a pages document and emit its derived route metadata."""
    document = _load_normalized(
        input_dir=input_dir,
        config=config,
        platform=platform,
        nvue_compiler=nvue_compiler,
    )
    table = [route.to_dict() for route in derive_routes(document)]
    _emit(table, output_format, output)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``pages-json`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
