"""Typed dataclasses and errors describing pages.json normalization inputs."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import os
import typing as typ
from pathlib import Path

from .._constants import NVUE_COMPILER_VUE, NVUE_EXTENSION

NVueProbe = cabc.Callable[[str], bool]
NVueEntryHook = cabc.Callable[[list[dict[str, typ.Any]]], None]

INPUT_DIR_ENV = "UNI_INPUT_DIR"
NVUE_COMPILER_ENV = "UNI_NVUE_COMPILER"


class PagesJsonError(ValueError):
    """Raised when a pages.json document has an invalid shape.

    The partially normalized document is kept on :attr:`document` so callers
    that recover from the error still see the mutated ``pages`` value.
    """

    def __init__(
        self, message: str, document: dict[str, typ.Any] | None = None
    ) -> None:
        super().__init__(message)
        self.document = document


class PagesJsonParseError(PagesJsonError):
    """Raised when pages.json text cannot be parsed into a mapping."""


@dc.dataclass(slots=True)
class NormalizeOptions:
    """Explicit switches and collaborators consumed by the normalizer.

    Attributes
    ----------
    input_dir : Path | None
        Project source directory. The NVue probe only runs when it is set.
    nvue_compiler : str | None
        Compiler mode for ``.nvue`` pages; ``"vue"`` disables the NVue probe
        and the entry hook.
    nvue_probe : Callable[[str], bool] | None
        Returns whether a sibling ``.nvue`` file exists for a page path.
        Defaults to a filesystem check below ``input_dir``.
    nvue_entry_hook : Callable[[list[dict]], None] | None
        Invoked once with the normalized page list for ``app`` builds.
    """

    input_dir: Path | None = None
    nvue_compiler: str | None = None
    nvue_probe: NVueProbe | None = None
    nvue_entry_hook: NVueEntryHook | None = None

    @classmethod
    def from_env(
        cls,
        environ: cabc.Mapping[str, str] | None = None,
        *,
        nvue_entry_hook: NVueEntryHook | None = None,
    ) -> NormalizeOptions:
        """Build options from ``UNI_INPUT_DIR`` and ``UNI_NVUE_COMPILER``."""
        env = os.environ if environ is None else environ
        input_dir = env.get(INPUT_DIR_ENV)
        return cls(
            input_dir=Path(input_dir) if input_dir else None,
            nvue_compiler=env.get(NVUE_COMPILER_ENV) or None,
            nvue_entry_hook=nvue_entry_hook,
        )

    @property
    def compiles_nvue(self) -> bool:
        """Return True unless ``.nvue`` pages are compiled as plain Vue."""
        return self.nvue_compiler != NVUE_COMPILER_VUE

    def is_nvue_page(self, page_path: str) -> bool:
        """Return True when an alternate ``.nvue`` file backs ``page_path``."""
        if self.input_dir is None or not self.compiles_nvue:
            return False
        if self.nvue_probe is not None:
            return bool(self.nvue_probe(page_path))
        return (self.input_dir / f"{page_path}{NVUE_EXTENSION}").exists()


@dc.dataclass(slots=True, frozen=True)
class UniRoute:
    """One entry of the derived router table.

    Attributes
    ----------
    path : str
        Page path exactly as it appears in the normalized document.
    meta : dict[str, Any]
        Page style merged over the computed ``isEntry``, ``isTabBar``,
        ``tabBarIndex``, ``isQuit`` and ``windowTop`` flags.
    """

    path: str
    meta: dict[str, typ.Any]

    def to_dict(self) -> dict[str, typ.Any]:
        """Return a JSON-serializable mapping for this route."""
        return {"path": self.path, "meta": dict(self.meta)}


__all__ = [
    "INPUT_DIR_ENV",
    "NVUE_COMPILER_ENV",
    "NVueEntryHook",
    "NVueProbe",
    "NormalizeOptions",
    "PagesJsonError",
    "PagesJsonParseError",
    "UniRoute",
]
