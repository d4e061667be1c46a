"""Cyclopts CLI entrypoint for building pages from a YAML build file.

The ``pages`` console script defined here loads a ``pages.yaml`` build file,
hands each resolved page request to :class:`~docs_page.generator.PageAssembler`,
and reports the written paths. Typical usage is ``pages build`` locally or in
CI after the docs fragments change.

Examples
--------
Build every page declared in the default build file:

>>> from docs_page.cli import main
>>> main()  # doctest: +SKIP

Build a single page from a custom build file:

>>> from docs_page.cli import app
>>> app(["build", "--config", "docs/pages.yaml", "--page", "index.html"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_page_config
from .generator import PageAssembler

DEFAULT_CONFIG = Path("pages.yaml")

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Build pages declared in a YAML build file.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to the build file", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    page: typ.Annotated[
        str | None,
        Parameter(help="Output file name of a single page", env_var="INPUT_PAGE"),
    ] = None,
) -> None:
    """Build the requested pages and print each written path.

    Parameters
    ----------
    config : Path, optional
        Path to the ``pages.yaml`` build file (overridable via
        ``INPUT_CONFIG``).
    page : str or None, optional
        Output file name of the page to build; when ``None`` (default) every
        declared page is built in file order.

    Raises
    ------
    PageBuildError
        If any page fails; pages after the failing one are not built.
    """
    build_config = load_page_config(config)
    if page:
        entries = [build_config.get_page(page)]
    else:
        entries = list(build_config.pages.values())

    for entry in entries:
        written = PageAssembler(entry.request, entry.options).create()
        print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``pages`` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
