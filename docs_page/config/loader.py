"""Resolve build options and load YAML build files into typed dataclasses."""

from __future__ import annotations

import copy
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from docs_page._constants import (
    DEFAULT_DEST,
    DEFAULT_OUTLINE_DEPTH,
    DEFAULT_PYGMENTS_STYLE,
    DEFAULT_ROOT,
    DEFAULT_WORKERS,
)
from docs_page.errors import ConfigError

from .helpers import (
    _absolute_path,
    _merge_data,
    _optional_str,
    _require_int,
    _require_mapping,
)
from .models import BuildOptions, PageBuildConfig, PageEntry, PageRequest


def resolve_options(  # noqa: PLR0913 - one keyword per documented option
    *,
    page_template: str | Path | None = None,
    root: str | Path = DEFAULT_ROOT,
    dest: str | Path = DEFAULT_DEST,
    data: typ.Mapping[str, typ.Any] | None = None,
    section_contents: typ.Mapping[str, str] | None = None,
    compile: bool = True,  # noqa: A002 - mirrors the documented option name
    outline_depth: int = DEFAULT_OUTLINE_DEPTH,
    template_helpers: typ.Mapping[str, typ.Callable[..., typ.Any]] | None = None,
    partials: typ.Mapping[str, str] | None = None,
    pygments_style: str = DEFAULT_PYGMENTS_STYLE,
    workers: int = DEFAULT_WORKERS,
    base_dir: Path | None = None,
) -> BuildOptions:
    """Return a validated :class:`BuildOptions` with every default applied.

    Parameters
    ----------
    page_template : str or Path, optional
        Jinja template used to render the whole page. May be omitted when
        every :class:`PageRequest` names its own template.
    root : str or Path, optional
        Directory that section paths are relative to.
    dest : str or Path, optional
        Directory the page is written into; created on demand.
    data : Mapping, optional
        Template data. Deep-copied so the build never mutates caller state.
    section_contents : Mapping, optional
        In-memory section overrides keyed by section identifier.
    compile : bool, optional
        Compile Markdown sections to HTML. Disabling it also disables the
        outline.
    outline_depth : int, optional
        Deepest heading level included in the outline; ``0`` disables it.
    template_helpers : Mapping, optional
        Callables exposed to templates as both globals and filters.
    partials : Mapping, optional
        Named template sources reachable via ``{% include "name" %}``.
    pygments_style : str, optional
        Pygments style used for fenced code highlighting.
    workers : int, optional
        Number of threads used to build sections; ``1`` builds sequentially.
    base_dir : Path, optional
        Anchor for relative paths; defaults to the current working directory.

    Returns
    -------
    BuildOptions
        Options with absolute paths and private copies of every mapping.

    Raises
    ------
    ConfigError
        If a mapping option is not a mapping, a helper is not callable, or a
        numeric option is out of range.
    """
    helpers = _require_mapping("template_helpers", template_helpers)
    for name, helper in helpers.items():
        if not callable(helper):
            msg = f"Template helper '{name}' is not callable."
            raise ConfigError(msg)

    contents = _require_mapping("section_contents", section_contents)
    for key, value in contents.items():
        if not isinstance(value, str):
            msg = f"Section override '{key}' must be a string."
            raise ConfigError(msg, section=key)

    style = _optional_str(pygments_style)
    if style is None:
        msg = "Option 'pygments_style' must not be empty."
        raise ConfigError(msg)

    return BuildOptions(
        root=_absolute_path(root, base_dir),
        dest=_absolute_path(dest, base_dir),
        page_template=(
            _absolute_path(page_template, base_dir)
            if page_template is not None
            else None
        ),
        data=copy.deepcopy(_require_mapping("data", data)),
        section_contents=contents,
        compile=bool(compile),
        outline_depth=_require_int("outline_depth", outline_depth, minimum=0),
        template_helpers=helpers,
        partials={
            name: str(source)
            for name, source in _require_mapping("partials", partials).items()
        },
        pygments_style=style,
        workers=_require_int("workers", workers, minimum=1),
    )


def load_page_config(
    path: Path,
    *,
    template_helpers: typ.Mapping[str, typ.Callable[..., typ.Any]] | None = None,
) -> PageBuildConfig:
    """Load a YAML build file describing one or more pages.

    Relative paths in the file are resolved against the file's directory.
    Page-level ``data`` is merged over ``defaults.data``.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML build file.
    template_helpers : Mapping, optional
        Helpers to register for every page; YAML cannot express callables.

    Returns
    -------
    PageBuildConfig
        Page entries keyed by output file name, in file order.

    Raises
    ------
    FileNotFoundError
        If the build file does not exist.
    ConfigError
        If the top level is not a mapping, no pages are declared, or an
        option is invalid.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_page_config(Path("pages.yaml"))  # doctest: +SKIP
    >>> config.get_page("index.html").request.sections  # doctest: +SKIP
    ('intro.md', 'usage.md.jinja')
    """
    if not path.exists():
        msg = f"Build file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise ConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = _require_mapping("defaults", raw.get("defaults"))
    pages_raw = _require_mapping("pages", raw.get("pages"))
    if not pages_raw:
        msg = f"No pages defined in build file '{path}'."
        raise ConfigError(msg)

    base_dir = path.resolve().parent
    shared_data = _require_mapping("data", defaults.get("data"))
    pages: dict[str, PageEntry] = {}
    for name, payload in pages_raw.items():
        match payload:
            case dict():
                entry = payload
            case list():
                entry = {"sections": payload}
            case _:
                msg = f"Page '{name}' must be a mapping or a list of sections."
                raise ConfigError(msg, page=str(name))
        pages[str(name)] = _build_page_entry(
            name=str(name),
            payload=entry,
            defaults=defaults,
            shared_data=shared_data,
            base_dir=base_dir,
            template_helpers=template_helpers,
        )

    return PageBuildConfig(source=path, pages=pages)


def _build_page_entry(  # noqa: PLR0913 - keyword-only plumbing
    *,
    name: str,
    payload: typ.Mapping[str, typ.Any],
    defaults: typ.Mapping[str, typ.Any],
    shared_data: typ.Mapping[str, typ.Any],
    base_dir: Path,
    template_helpers: typ.Mapping[str, typ.Callable[..., typ.Any]] | None,
) -> PageEntry:
    """Build the request and options for a single page entry."""
    sections = payload.get("sections") or []
    if not isinstance(sections, list):
        msg = f"Page '{name}' must list its sections."
        raise ConfigError(msg, page=name)

    template = payload.get("template")
    request = PageRequest(
        file_name=name,
        sections=tuple(str(section) for section in sections),
        template=_absolute_path(template, base_dir) if template else None,
    )
    try:
        options = resolve_options(
            page_template=defaults.get("template"),
            root=defaults.get("root", DEFAULT_ROOT),
            dest=defaults.get("dest", DEFAULT_DEST),
            data=_merge_data(
                shared_data, _require_mapping("data", payload.get("data"))
            ),
            section_contents=defaults.get("sections"),
            compile=defaults.get("compile", True),
            outline_depth=defaults.get("outline_depth", DEFAULT_OUTLINE_DEPTH),
            template_helpers=template_helpers,
            partials=defaults.get("partials"),
            pygments_style=defaults.get("pygments_style", DEFAULT_PYGMENTS_STYLE),
            workers=defaults.get("workers", DEFAULT_WORKERS),
            base_dir=base_dir,
        )
    except ConfigError as exc:
        exc.with_context(page=name)
        raise
    return PageEntry(request=request, options=options)


__all__ = ["load_page_config", "resolve_options"]
