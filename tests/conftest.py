"""Shared fixtures for the docs_page test suite.

The fixtures lay out a small docs tree under ``tmp_path``: three sections that
exercise the template-and-markup, markup-only, and template-only paths, plus
page templates that join sections or call a helper.
"""

from __future__ import annotations

import typing as typ

import pytest

from docs_page.config import BuildOptions, PageRequest, resolve_options

if typ.TYPE_CHECKING:
    from pathlib import Path

SECTION_FILES = {
    "section-1.md.jinja": "# {{ title }}",
    "section-2.md": "# Title",
    "section-3.jinja": "{{ title }}",
}
PAGE_TEMPLATE = "{% for section in sections %}\n{{ section }}\n{% endfor %}\n"
HELPER_TEMPLATE = "{{ prop | shout }}"
ANCHORED_TITLE = (
    '<h1><a id="title" href="#title" class="anchor" name="title">'
    '<span class="header-link"></span></a>Title</h1>'
)


@pytest.fixture
def docs_root(tmp_path: Path) -> Path:
    """Write the section fixtures and return the docs root."""
    root = tmp_path / "docs"
    root.mkdir()
    for name, body in SECTION_FILES.items():
        (root / name).write_text(body, encoding="utf-8")
    return root


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """Write the page templates and return their directory."""
    directory = tmp_path / "templates"
    directory.mkdir()
    (directory / "page.jinja").write_text(PAGE_TEMPLATE, encoding="utf-8")
    (directory / "page-helper.jinja").write_text(HELPER_TEMPLATE, encoding="utf-8")
    return directory


@pytest.fixture
def make_options(
    tmp_path: Path, docs_root: Path, templates_dir: Path
) -> typ.Callable[..., BuildOptions]:
    """Return a factory building options rooted in the fixture tree."""

    def _make(**overrides: typ.Any) -> BuildOptions:
        kwargs: dict[str, typ.Any] = {
            "root": docs_root,
            "dest": tmp_path / "public",
            "page_template": templates_dir / "page.jinja",
            "data": {"title": "Title"},
            "template_helpers": {"shout": lambda value: f"{value}!"},
        }
        kwargs.update(overrides)
        return resolve_options(**kwargs)

    return _make


@pytest.fixture
def page_request() -> PageRequest:
    """Return a request for the three fixture sections."""
    return PageRequest(
        file_name="test.html",
        sections=["section-1.md.jinja", "section-2.md", "section-3.jinja"],
    )
