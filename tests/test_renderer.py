"""Unit tests for Markdown compilation and heading anchors."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from docs_page.generator import MarkupCompiler, slugify

from .conftest import ANCHORED_TITLE


def test_heading_rendered_with_anchor() -> None:
    assert MarkupCompiler().compile("# Title") == ANCHORED_TITLE


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Title", "title"),
        ("Getting Started", "getting-started"),
        ("H1 - 1", "h1-1"),
        ("What's new?", "what-s-new-"),
        ("snake_case stays", "snake_case-stays"),
    ],
)
def test_slugify(text: str, expected: str) -> None:
    assert slugify(text) == expected


def test_every_heading_level_is_anchored() -> None:
    html = MarkupCompiler().compile("# One\n\n## Two\n\n### Three\n\n###### Six")
    soup = BeautifulSoup(html, "html.parser")
    for tag, slug in [("h1", "one"), ("h2", "two"), ("h3", "three"), ("h6", "six")]:
        anchor = soup.find(tag).find("a")
        assert anchor["id"] == slug, f"expected {tag} anchor id '{slug}'"
        assert anchor["href"] == f"#{slug}"
        assert anchor["name"] == slug
        assert anchor["class"] == ["anchor"]
        assert anchor.find("span", class_="header-link") is not None


def test_inline_markup_kept_after_anchor() -> None:
    html = MarkupCompiler().compile("## Using `pages` *well*")
    soup = BeautifulSoup(html, "html.parser")
    heading = soup.find("h2")
    assert heading.find("a")["id"] == "using-pages-well"
    assert heading.find("code").get_text() == "pages"
    assert heading.get_text() == "Using pages well"


def test_duplicate_headings_are_not_deduplicated() -> None:
    html = MarkupCompiler().compile("# Title\n\nbody\n\n# Title")
    soup = BeautifulSoup(html, "html.parser")
    ids = [anchor["id"] for anchor in soup.select("h1 a.anchor")]
    assert ids == ["title", "title"]


def test_blank_input_compiles_to_empty_string() -> None:
    assert MarkupCompiler().compile("  \n\n ") == ""


def test_body_markup_compiled() -> None:
    html = MarkupCompiler().compile("Some *text*.\n\n| a | b |\n|---|---|\n| 1 | 2 |")
    soup = BeautifulSoup(html, "html.parser")
    assert soup.find("em").get_text() == "text"
    assert soup.find("table") is not None


def test_code_blocks_highlighted_with_language() -> None:
    source = "# Example\n\n```python\nprint('hi')\n```\n\n   ```rust,no_run\n   fn main() {}\n   ```\n"
    html = MarkupCompiler().compile(source)
    soup = BeautifulSoup(html, "html.parser")
    blocks = soup.select("div.codehilite")
    assert [block.get("data-language") for block in blocks] == ["python", "rust"]
    assert "print" in blocks[0].get_text()


def test_anchor_attributes_keep_documented_order() -> None:
    html = MarkupCompiler().compile("## Install it")
    assert html.startswith(
        '<h2><a id="install-it" href="#install-it" class="anchor" name="install-it">'
    )


@pytest.mark.parametrize(
    ("source", "slug", "text"),
    [
        ("# Q &amp; A", "q-a", "Q & A"),
        ("# Hello <b>x</b>", "hello-x", "Hello x"),
        (r"# A \* B", "a-b", "A * B"),
    ],
)
def test_slug_ignores_stashed_markup(source: str, slug: str, text: str) -> None:
    """Entities, inline HTML, and escapes never leak placeholders into ids."""
    html = MarkupCompiler().compile(source)
    assert "wzxhzdk" not in html
    heading = BeautifulSoup(html, "html.parser").find("h1")
    assert heading.find("a")["id"] == slug
    assert heading.get_text() == text
