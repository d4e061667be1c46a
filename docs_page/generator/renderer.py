"""Compile Markdown sections into HTML with anchored headings."""

from __future__ import annotations

import re
from html import escape

from markdown import Markdown

from docs_page.errors import CompileError

from .heading_anchors import HeadingAnchorExtension

CODE_BLOCK_PATTERN = re.compile(r"```([A-Za-z0-9_+#.-]+)?[^\n]*\n(.*?)```", re.DOTALL)
FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')


class MarkupCompiler:
    """Render Markdown into HTML with heading anchors and highlighted code."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        """Initialize a compiler using the named Pygments style for code blocks."""
        self.pygments_style = pygments_style

    def compile(self, text: str) -> str:
        """Compile ``text`` into HTML.

        Parameters
        ----------
        text : str
            Markdown source, possibly produced by a template expansion.

        Returns
        -------
        str
            HTML with every heading prefixed by an anchor link. Blank input
            yields an empty string.

        Raises
        ------
        CompileError
            If Python-Markdown fails to convert the source.
        """
        normalized = self._normalize_fenced_blocks(text)
        if not normalized.strip():
            return ""
        md = Markdown(
            extensions=[
                "fenced_code",
                "codehilite",
                "tables",
                "sane_lists",
                HeadingAnchorExtension(),
            ],
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        try:
            html = md.convert(normalized)
        except Exception as exc:  # noqa: BLE001 - any converter failure is a compile failure
            msg = f"Markdown compilation failed: {exc}"
            raise CompileError(msg) from exc
        return self._annotate_codehilite(html, normalized)

    def _annotate_codehilite(self, html: str, source_markdown: str) -> str:
        """Attach language metadata to each highlighted block in converted markdown."""
        languages = [
            match.group(1) or "text"
            for match in CODE_BLOCK_PATTERN.finditer(source_markdown)
        ]
        if not languages:
            return html
        lang_iter = iter(languages)

        def _repl(match: re.Match[str]) -> str:
            lang = next(lang_iter, "text")
            return (
                f'<div class="codehilite" data-language="{escape(lang, quote=True)}">'
            )

        return CODEHILITE_OPEN_TAG.sub(_repl, html, len(languages))

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

        def _strip_labels(match: re.Match[str]) -> str:
            fence, language, _extras = match.groups()
            label = language or ""
            return f"{fence}{label}"

        return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)


__all__ = ["CODE_BLOCK_PATTERN", "MarkupCompiler"]
