"""Resolve section sources and run them through the template/compile chain."""

from __future__ import annotations

import functools
import logging
import os
import typing as typ
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from docs_page.errors import PageBuildError, PageIOError, SectionNotFoundError

from .models import SectionKind

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .renderer import MarkupCompiler
    from .templates import TemplateEngine

logger = logging.getLogger(__name__)


class SectionResolver:
    """Return raw section contents from overrides or from files under ``root``."""

    def __init__(self, root: Path, overrides: typ.Mapping[str, str]) -> None:
        self.root = root
        self.overrides = overrides

    def resolve(self, ref: str) -> str:
        """Return the contents for ``ref``.

        An entry in ``overrides`` always wins, even over an existing file, and
        never touches the filesystem. Otherwise ``root / ref`` is read as
        UTF-8 text.

        Raises
        ------
        SectionNotFoundError
            If ``ref`` is neither overridden nor an existing file, or if it
            is absolute or climbs out of ``root``.
        PageIOError
            If the file exists but cannot be read or decoded.
        """
        if ref in self.overrides:
            return self.overrides[ref]

        path = self._path_for(ref)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            msg = f"Section '{ref}' is not overridden and '{path}' does not exist."
            raise SectionNotFoundError(msg, section=ref, stage="resolve") from exc
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Unable to read section file '{path}': {exc}"
            raise PageIOError(msg, section=ref, stage="resolve") from exc

    def _path_for(self, ref: str) -> Path:
        """Return the file for ``ref``, which must stay under ``root``."""
        root = Path(os.path.normpath(self.root))
        path = Path(os.path.normpath(root / ref))
        if not path.is_relative_to(root):
            msg = f"Section '{ref}' resolves outside the section root '{root}'."
            raise SectionNotFoundError(msg, section=ref, stage="resolve")
        return path


class SectionBuilder:
    """Build sections by resolving, templating, and compiling them in order."""

    def __init__(
        self,
        resolver: SectionResolver,
        engine: TemplateEngine,
        compiler: MarkupCompiler | None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        resolver : SectionResolver
            Source of raw section contents.
        engine : TemplateEngine
            Engine used for sections carrying a template extension.
        compiler : MarkupCompiler or None
            Compiler used for sections carrying a markup extension; ``None``
            leaves markup sections uncompiled.
        """
        self.resolver = resolver
        self.engine = engine
        self.compiler = compiler

    def build(self, ref: str, context: typ.Mapping[str, typ.Any]) -> str:
        """Return the final contents of section ``ref``.

        Template expansion always runs before compilation, so a template may
        emit Markdown that is then compiled. Errors carry ``ref`` and the
        stage that failed.
        """
        kind = SectionKind.classify(ref)
        stage = "resolve"
        try:
            content = self.resolver.resolve(ref)
            if kind.is_template:
                stage = "template"
                content = self.engine.expand(content, context)
            if kind.is_markup and self.compiler is not None:
                stage = "compile"
                content = self.compiler.compile(content)
        except PageBuildError as exc:
            exc.with_context(section=ref, stage=stage)
            raise
        logger.debug(
            "built section %s (template=%s, markup=%s)",
            ref,
            kind.is_template,
            kind.is_markup,
        )
        return content

    def build_all(
        self,
        refs: cabc.Sequence[str],
        context: typ.Mapping[str, typ.Any],
        *,
        workers: int = 1,
    ) -> list[str]:
        """Build every section in ``refs`` and return the results in order.

        The first failing section in list order aborts the build, even when
        ``workers > 1`` lets later sections finish first.
        """
        if workers <= 1 or len(refs) <= 1:
            return [self.build(ref, context) for ref in refs]

        build = functools.partial(self.build, context=context)
        pool = ThreadPoolExecutor(max_workers=min(workers, len(refs)))
        try:
            return list(pool.map(build, refs))
        finally:
            pool.shutdown(wait=True, cancel_futures=True)


__all__ = ["SectionBuilder", "SectionResolver"]
