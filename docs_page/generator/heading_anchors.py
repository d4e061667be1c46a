"""Markdown extension that turns headings into self-linking anchors."""

from __future__ import annotations

import re
import typing as typ
import xml.etree.ElementTree as etree

from markdown.extensions import Extension
from markdown.extensions.toc import stashedHTML2text, unescape
from markdown.treeprocessors import Treeprocessor

if typ.TYPE_CHECKING:
    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any

HEADING_TAGS = frozenset(f"h{level}" for level in range(1, 7))
NON_WORD_PATTERN = re.compile(r"[^\w]+")


def slugify(text: str) -> str:
    """Return the anchor identifier for heading ``text``.

    The text is lowercased and every run of non-word characters becomes a
    single hyphen. Leading and trailing hyphens are kept.

    >>> slugify("Getting Started")
    'getting-started'
    >>> slugify("What's new?")
    'what-s-new-'
    """
    return NON_WORD_PATTERN.sub("-", text.lower())


class HeadingAnchorExtension(Extension):
    """Prefix every heading with an anchor link named after its slug.

    ``# Title`` renders as::

        <h1><a id="title" href="#title" class="anchor" name="title">
        <span class="header-link"></span></a>Title</h1>

    Identical headings share an anchor; no suffixes are added.
    """

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the heading treeprocessor after inline processing."""
        md.treeprocessors.register(
            HeadingAnchorTreeprocessor(md), "docs_page_heading_anchors", 15
        )


class HeadingAnchorTreeprocessor(Treeprocessor):
    """Insert anchor links at the start of heading elements."""

    def run(self, root: etree.Element) -> etree.Element:
        """Rewrite each heading in the parsed tree in place."""
        for element in list(root.iter()):
            if element.tag in HEADING_TAGS:
                self._anchor(element)
        return root

    def _anchor(self, heading: etree.Element) -> None:
        """Prefix the heading with its anchor link.

        The link is stashed as raw HTML so its attributes keep their
        documented order; the serializer would otherwise sort them.
        """
        text = "".join(heading.itertext())
        slug = slugify(unescape(stashedHTML2text(text, self.md)))
        placeholder = self.md.htmlStash.store(
            f'<a id="{slug}" href="#{slug}" class="anchor" name="{slug}">'
            '<span class="header-link"></span></a>'
        )
        heading.text = placeholder + (heading.text or "")


__all__ = [
    "HeadingAnchorExtension",
    "HeadingAnchorTreeprocessor",
    "slugify",
]
