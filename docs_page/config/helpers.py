"""Utility helpers shared by the option resolver and the build-file loader."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

from docs_page.errors import ConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _absolute_path(value: str | Path, base_dir: Path | None = None) -> Path:
    """Return ``value`` as an absolute path, anchoring relative paths at ``base_dir``."""
    path = Path(value).expanduser()
    if not path.is_absolute() and base_dir is not None:
        path = base_dir / path
    return path.resolve()


def _require_mapping(name: str, value: object | None) -> dict[str, typ.Any]:
    """Return a shallow ``dict`` copy of ``value`` or raise when it is not a mapping."""
    match value:
        case None:
            return {}
        case cabc.Mapping():
            return dict(value)
        case _:
            msg = f"Option '{name}' must be a mapping, got {type(value).__name__}."
            raise ConfigError(msg)


def _require_int(name: str, value: object, *, minimum: int) -> int:
    """Return ``value`` when it is an integer no smaller than ``minimum``."""
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"Option '{name}' must be an integer, got {value!r}."
        raise ConfigError(msg)
    if value < minimum:
        msg = f"Option '{name}' must be >= {minimum}, got {value}."
        raise ConfigError(msg)
    return value


def _merge_data(
    shared: typ.Mapping[str, typ.Any], page: typ.Mapping[str, typ.Any] | None
) -> dict[str, typ.Any]:
    """Merge page-level template data over the shared defaults."""
    combined: dict[str, typ.Any] = dict(shared)
    if page:
        combined.update(page)
    return combined


__all__ = [
    "_absolute_path",
    "_merge_data",
    "_optional_str",
    "_require_int",
    "_require_mapping",
]
