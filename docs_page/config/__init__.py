"""Resolve build options and load YAML build files for docs_page.

This subpackage turns caller-supplied keywords or a ``pages.yaml`` build file
into strongly typed dataclasses (:class:`PageRequest`, :class:`BuildOptions`)
that the page pipeline consumes. :func:`resolve_options` is the single place
defaults are applied and paths are made absolute; :func:`load_page_config`
reads a build file and resolves options for each declared page.

Examples
--------
>>> from docs_page.config import PageRequest, resolve_options
>>> options = resolve_options(page_template="page.jinja", root="docs")
>>> options.root.is_absolute()
True
>>> PageRequest("index.html", ["intro.md"]).sections
('intro.md',)
"""

from .loader import load_page_config, resolve_options
from .models import BuildOptions, PageBuildConfig, PageEntry, PageRequest

__all__ = [
    "BuildOptions",
    "PageBuildConfig",
    "PageEntry",
    "PageRequest",
    "load_page_config",
    "resolve_options",
]
