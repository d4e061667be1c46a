"""Persist rendered pages to disk."""

from __future__ import annotations

import logging
import typing as typ

from docs_page.errors import PageIOError

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def write_page(contents: str, dest: Path, file_name: str) -> Path:
    """Write ``contents`` to ``dest / file_name`` and return the written path.

    Missing directories, including every intermediate parent, are created
    first. An existing file is overwritten. Nothing is cleaned up on failure.

    Raises
    ------
    PageIOError
        If a directory cannot be created or the file cannot be written.
    """
    output_path = dest / file_name
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(contents, encoding="utf-8")
    except OSError as exc:
        msg = f"Unable to write page '{output_path}': {exc}"
        raise PageIOError(msg, page=file_name, stage="write") from exc
    logger.info("wrote %s", output_path)
    return output_path


__all__ = ["write_page"]
