r"""Derive a nested outline from compiled HTML headings.

This module powers the page table of contents: it scans concatenated section
HTML for ``<h1>`` to ``<h6>`` elements and nests them by level into
:class:`OutlineNode` trees that the page template iterates over.

Example
-------
>>> from docs_page.outline import extract_outline
>>> outline = extract_outline("<h1>A</h1><h2>B</h2><h1>C</h1>", 3)
>>> [(node.text, [child.text for child in node.children]) for node in outline]
[('A', ['B']), ('C', [])]
"""

from __future__ import annotations

import dataclasses as dc
import html
import re

HEADING_PATTERN = re.compile(
    r"<h(\d+)\b([^>]*)>(.*?)</h\1\s*>", re.IGNORECASE | re.DOTALL
)
ID_ATTRIBUTE_PATTERN = re.compile(r"""\bid\s*=\s*["']([^"']*)["']""", re.IGNORECASE)
TAG_PATTERN = re.compile(r"<[^>]+>")
WHITESPACE_PATTERN = re.compile(r"\s+")
MAX_HEADING_LEVEL = 6


@dc.dataclass(slots=True)
class OutlineNode:
    """One heading in the page outline.

    Attributes
    ----------
    text : str
        Visible heading text with markup stripped.
    level : int
        Heading level, ``1`` for ``<h1>``.
    anchor : str or None
        The heading's ``id`` (or the first ``id`` inside it) when present.
    children : list[OutlineNode]
        Nested headings in document order.
    """

    text: str
    level: int
    anchor: str | None = None
    children: list[OutlineNode] = dc.field(default_factory=list)


def _heading_text(inner_html: str) -> str:
    """Return the visible text of a heading's inner HTML."""
    text = html.unescape(TAG_PATTERN.sub("", inner_html))
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def _heading_anchor(attributes: str, inner_html: str) -> str | None:
    """Return the heading's own ``id`` or, failing that, the first nested one."""
    match = ID_ATTRIBUTE_PATTERN.search(attributes) or ID_ATTRIBUTE_PATTERN.search(
        inner_html
    )
    return html.unescape(match.group(1)) if match else None


def extract_outline(html_text: str, max_depth: int) -> list[OutlineNode]:
    """Nest the headings of ``html_text`` into an outline forest.

    Parameters
    ----------
    html_text : str
        Concatenated HTML of every section on the page.
    max_depth : int
        Deepest heading level to include. Deeper headings are ignored
        entirely; ``0`` yields an empty outline.

    Returns
    -------
    list[OutlineNode]
        Top-level nodes in document order. A heading becomes a child of the
        closest preceding heading with a smaller level, so skipped levels
        (``h1`` followed by ``h3``) still nest under the nearest ancestor.
        Headings with an out-of-range level or no text are skipped.
    """
    depth = min(max_depth, MAX_HEADING_LEVEL)
    forest: list[OutlineNode] = []
    stack: list[OutlineNode] = []
    for match in HEADING_PATTERN.finditer(html_text):
        level = int(match.group(1))
        if not 1 <= level <= depth:
            continue
        text = _heading_text(match.group(3))
        if not text:
            continue

        while stack and stack[-1].level >= level:
            stack.pop()
        node = OutlineNode(
            text=text,
            level=level,
            anchor=_heading_anchor(match.group(2), match.group(3)),
        )
        if stack:
            stack[-1].children.append(node)
        else:
            forest.append(node)
        stack.append(node)
    return forest


__all__ = ["OutlineNode", "extract_outline"]
