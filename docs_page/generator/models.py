"""Shared dataclasses used by the page build pipeline."""

from __future__ import annotations

import dataclasses as dc
import enum
from pathlib import PurePosixPath

from docs_page._constants import MARKUP_EXTENSIONS, TEMPLATE_EXTENSIONS


@dc.dataclass(frozen=True, slots=True)
class SectionKind:
    """Transformation stages a section identifier opts into."""

    is_template: bool
    is_markup: bool

    @classmethod
    def classify(cls, ref: str) -> SectionKind:
        """Classify ``ref`` from the suffixes of its file name.

        >>> SectionKind.classify("intro.md.jinja")
        SectionKind(is_template=True, is_markup=True)
        >>> SectionKind.classify("notes")
        SectionKind(is_template=False, is_markup=False)
        """
        suffixes = {
            suffix.lstrip(".").lower() for suffix in PurePosixPath(ref).suffixes
        }
        return cls(
            is_template=bool(suffixes & TEMPLATE_EXTENSIONS),
            is_markup=bool(suffixes & MARKUP_EXTENSIONS),
        )


class PageState(enum.Enum):
    """Lifecycle of a single page build."""

    INIT = "init"
    SECTIONS_BUILT = "sections"
    OUTLINE_POPULATED = "outline"
    RENDERED = "render"
    WRITTEN = "write"
    DONE = "done"
    FAILED = "failed"


__all__ = ["PageState", "SectionKind"]
