"""High-level orchestration for building a single page.

This module coordinates the section pipeline, the outline, the page template,
and the writer. It exposes :class:`PageAssembler`, which consumes a
:class:`~docs_page.config.PageRequest` and resolved
:class:`~docs_page.config.BuildOptions`, builds every section in order,
derives the outline from the compiled HTML, renders the page template over the
accumulated data, and writes the result to ``options.dest``.

Example
-------
>>> from docs_page.config import PageRequest, resolve_options
>>> from docs_page.generator import PageAssembler
>>> options = resolve_options(
...     page_template="templates/page.jinja", root="docs", dest="public"
... )  # doctest: +SKIP
>>> PageAssembler(PageRequest("index.html", ["intro.md"]), options).create()  # doctest: +SKIP
PosixPath('/abs/public/index.html')
"""

from __future__ import annotations

import contextlib
import copy
import logging
import typing as typ

from docs_page.errors import ConfigError, PageBuildError
from docs_page.outline import extract_outline

from .models import PageState
from .renderer import MarkupCompiler
from .sections import SectionBuilder, SectionResolver
from .templates import TemplateEngine
from .writer import write_page

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from docs_page.config import BuildOptions, PageRequest

logger = logging.getLogger(__name__)

_NEXT_STATE: dict[PageState, PageState] = {
    PageState.INIT: PageState.SECTIONS_BUILT,
    PageState.SECTIONS_BUILT: PageState.OUTLINE_POPULATED,
    PageState.OUTLINE_POPULATED: PageState.RENDERED,
    PageState.RENDERED: PageState.WRITTEN,
    PageState.WRITTEN: PageState.DONE,
}


class PageAssembler:
    """Build one page from its sections and write it to disk."""

    def __init__(self, request: PageRequest, options: BuildOptions) -> None:
        """Initialize the assembler for ``request`` using resolved ``options``.

        Parameters
        ----------
        request : PageRequest
            Output file name, ordered section identifiers, and an optional
            page template override.
        options : BuildOptions
            Options produced by :func:`docs_page.config.resolve_options`.
        """
        self.request = request
        self.options = options
        self.state = PageState.INIT
        self.engine = TemplateEngine(
            helpers=options.template_helpers, partials=options.partials
        )
        compiler = MarkupCompiler(options.pygments_style) if options.compile else None
        self.builder = SectionBuilder(
            SectionResolver(options.root, options.section_contents),
            self.engine,
            compiler,
        )

    def create(self) -> Path:
        """Build, render, and write the page.

        Returns
        -------
        Path
            Absolute path of the written page.

        Raises
        ------
        PageBuildError
            Any failure, annotated with the page file name, the failing stage
            and, for section failures, the section identifier. The file is
            only written after the page rendered successfully.
        """
        contents = self.render()
        with self._stage():
            path = write_page(contents, self.options.dest, self.request.file_name)
            self._advance(PageState.WRITTEN)
        self._advance(PageState.DONE)
        return path

    def render(self) -> str:
        """Return the rendered page without writing it."""
        context = self.build_context()
        with self._stage():
            contents = self._render(context)
            self._advance(PageState.RENDERED)
        return contents

    def build_context(self) -> dict[str, typ.Any]:
        """Return the template data for this page.

        The result holds a fresh copy of ``options.data`` plus ``sections``
        and, when compilation is enabled, ``outline``.
        """
        self.state = PageState.INIT
        context: dict[str, typ.Any] = copy.deepcopy(dict(self.options.data))
        with self._stage():
            context = self._add_sections(context)
            self._advance(PageState.SECTIONS_BUILT)
            context = self._add_outline(context)
            self._advance(PageState.OUTLINE_POPULATED)
        return context

    def _add_sections(self, context: typ.Mapping[str, typ.Any]) -> dict[str, typ.Any]:
        """Return ``context`` extended with the built sections."""
        sections = self.builder.build_all(
            self.request.sections, context, workers=self.options.workers
        )
        return {**context, "sections": sections}

    def _add_outline(self, context: typ.Mapping[str, typ.Any]) -> dict[str, typ.Any]:
        """Return ``context`` extended with the outline when compiling."""
        if not self.options.compile:
            return dict(context)
        sections: cabc.Sequence[str] = context["sections"]
        outline = extract_outline("".join(sections), self.options.outline_depth)
        return {**context, "outline": outline}

    def _render(self, context: typ.Mapping[str, typ.Any]) -> str:
        """Render the page template against ``context``."""
        template = self.request.template or self.options.page_template
        if template is None:
            msg = "No page template configured."
            raise ConfigError(msg)
        return self.engine.render_file(template, context)

    def _advance(self, state: PageState) -> None:
        logger.debug(
            "page %s: %s -> %s", self.request.file_name, self.state.value, state.value
        )
        self.state = state

    @contextlib.contextmanager
    def _stage(self) -> cabc.Iterator[None]:
        """Annotate build errors raised inside the block and mark the page failed."""
        try:
            yield
        except Exception as exc:
            if isinstance(exc, PageBuildError):
                pending = _NEXT_STATE.get(self.state, self.state)
                exc.with_context(page=self.request.file_name, stage=pending.value)
            self.state = PageState.FAILED
            logger.debug("page %s failed: %s", self.request.file_name, exc)
            raise


def build_page(request: PageRequest, options: BuildOptions) -> Path:
    """Build and write ``request`` with ``options``; see :meth:`PageAssembler.create`."""
    return PageAssembler(request, options).create()


__all__ = ["PageAssembler", "build_page"]
