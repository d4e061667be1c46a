"""Exception taxonomy raised by the page build pipeline.

Every failure surfaced by :class:`~docs_page.generator.PageAssembler` is a
:class:`PageBuildError`. Stages attach the section identifier, the page file
name, and the stage name as the error travels outwards, so the caller sees a
single error that says where the build stopped.

Examples
--------
>>> from docs_page.errors import SectionNotFoundError
>>> err = SectionNotFoundError("no such section").with_context(
...     section="intro.md", page="index.html", stage="sections"
... )
>>> str(err)
"no such section [stage=sections, page='index.html', section='intro.md']"
"""

from __future__ import annotations


class PageBuildError(Exception):
    """Base class for every error raised while building a page."""

    def __init__(
        self,
        message: str,
        *,
        section: str | None = None,
        page: str | None = None,
        stage: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.section = section
        self.page = page
        self.stage = stage

    def with_context(
        self,
        *,
        section: str | None = None,
        page: str | None = None,
        stage: str | None = None,
    ) -> PageBuildError:
        """Fill in missing diagnostic fields and return the same instance.

        Values already present are kept, so the innermost stage that knew the
        section identifier wins over outer layers.
        """
        if self.section is None:
            self.section = section
        if self.page is None:
            self.page = page
        if self.stage is None:
            self.stage = stage
        return self

    def __str__(self) -> str:
        details: list[str] = []
        if self.stage:
            details.append(f"stage={self.stage}")
        if self.page:
            details.append(f"page={self.page!r}")
        if self.section:
            details.append(f"section={self.section!r}")
        if not details:
            return self.message
        return f"{self.message} [{', '.join(details)}]"


class SectionNotFoundError(PageBuildError):
    """Raised when a section is neither overridden nor present on disk."""


class PageIOError(PageBuildError):
    """Raised when reading a section or writing the page fails."""


class TemplateError(PageBuildError):
    """Raised when Jinja fails to compile or render a template."""


class CompileError(PageBuildError):
    """Raised when Markdown compilation fails."""


class ConfigError(PageBuildError, ValueError):
    """Raised when build options or the build file are invalid or incomplete."""


__all__ = [
    "CompileError",
    "ConfigError",
    "PageBuildError",
    "PageIOError",
    "SectionNotFoundError",
    "TemplateError",
]
