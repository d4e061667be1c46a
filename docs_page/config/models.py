"""Typed dataclasses describing a resolved page build request."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path  # noqa: TC003 - used for runtime type metadata

from docs_page.errors import ConfigError


@dc.dataclass(frozen=True, slots=True)
class PageRequest:
    """Describe one output page and the ordered sections it is built from.

    Attributes
    ----------
    file_name : str
        Name of the file written under ``BuildOptions.dest``.
    sections : tuple[str, ...]
        Section identifiers, either keys into ``section_contents`` or paths
        relative to ``BuildOptions.root``. Order drives page layout.
    template : Path or None
        Optional page template overriding ``BuildOptions.page_template``.
    """

    file_name: str
    sections: tuple[str, ...] = ()
    template: Path | None = None

    def __post_init__(self) -> None:
        if not self.file_name:
            msg = "A page request needs a file name."
            raise ConfigError(msg)
        if isinstance(self.sections, str):
            msg = f"Sections for page '{self.file_name}' must be a list, not a string."
            raise ConfigError(msg, page=self.file_name)
        object.__setattr__(self, "sections", tuple(self.sections))


@dc.dataclass(frozen=True, slots=True)
class BuildOptions:
    """Fully populated options consumed by the page pipeline.

    Instances are produced by :func:`docs_page.config.resolve_options`, which
    applies defaults, normalizes paths to absolute form, and validates every
    field. ``root``, ``dest``, and ``page_template`` are always absolute.
    """

    root: Path
    dest: Path
    page_template: Path | None
    data: typ.Mapping[str, typ.Any]
    section_contents: typ.Mapping[str, str]
    compile: bool  # noqa: A003 - mirrors the documented option name
    outline_depth: int
    template_helpers: typ.Mapping[str, typ.Callable[..., typ.Any]]
    partials: typ.Mapping[str, str]
    pygments_style: str
    workers: int


@dc.dataclass(slots=True)
class PageEntry:
    """A page request paired with the options it should be built with."""

    request: PageRequest
    options: BuildOptions


@dc.dataclass(slots=True)
class PageBuildConfig:
    """Pages declared in a YAML build file, keyed by output file name."""

    source: Path
    pages: dict[str, PageEntry]

    def get_page(self, name: str) -> PageEntry:
        """Return the entry for ``name`` or raise :class:`ConfigError`."""
        try:
            return self.pages[name]
        except KeyError as exc:
            available = ", ".join(sorted(self.pages)) or "none"
            msg = f"Unknown page '{name}' in {self.source} (available: {available})."
            raise ConfigError(msg, page=name) from exc


__all__ = ["BuildOptions", "PageBuildConfig", "PageEntry", "PageRequest"]
