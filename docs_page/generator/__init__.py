"""Utilities for resolving, rendering, assembling, and writing pages."""

from .heading_anchors import HeadingAnchorExtension, slugify
from .models import PageState, SectionKind
from .page_generator import PageAssembler, build_page
from .renderer import MarkupCompiler
from .sections import SectionBuilder, SectionResolver
from .templates import TemplateEngine
from .writer import write_page

__all__ = [
    "HeadingAnchorExtension",
    "MarkupCompiler",
    "PageAssembler",
    "PageState",
    "SectionBuilder",
    "SectionKind",
    "SectionResolver",
    "TemplateEngine",
    "build_page",
    "slugify",
    "write_page",
]
