"""Build single documentation pages from Markdown and Jinja fragments.

This package assembles a page from ordered section files: each section may be
expanded as a Jinja template and compiled from Markdown, the results are
summarised into an outline, and a page template wraps everything before the
page is written to disk.

Exports
-------
- ``PageAssembler``: Orchestrates one page build.
- ``PageRequest`` / ``resolve_options``: Build inputs.
- ``app`` / ``main``: Cyclopts application for the ``pages`` command.

Examples
--------
>>> from docs_page import PageRequest, resolve_options
>>> request = PageRequest("index.html", ["intro.md"])
>>> request.sections
('intro.md',)
"""

from __future__ import annotations

from .cli import app, main
from .config import PageRequest, load_page_config, resolve_options
from .generator import PageAssembler, build_page

__all__ = [
    "PageAssembler",
    "PageRequest",
    "app",
    "build_page",
    "load_page_config",
    "main",
    "resolve_options",
]
