"""Jinja surface used for section templates and the page template."""

from __future__ import annotations

import typing as typ

import jinja2
from jinja2 import (
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    select_autoescape,
)

from docs_page.errors import ConfigError, TemplateError

if typ.TYPE_CHECKING:
    from pathlib import Path


class TemplateEngine:
    """Expand Jinja templates with shared helpers and partials.

    Helpers are registered both as globals (``{{ shout(title) }}``) and as
    filters (``{{ title | shout }}``). Partials are template sources addressed
    by name from ``{% include %}``. File templates may also include siblings
    from their own directory.
    """

    def __init__(
        self,
        *,
        helpers: typ.Mapping[str, typ.Callable[..., typ.Any]] | None = None,
        partials: typ.Mapping[str, str] | None = None,
    ) -> None:
        self.helpers = dict(helpers or {})
        self.partials = dict(partials or {})
        self._string_env = self._environment(DictLoader(self.partials))

    def expand(self, source: str, data: typ.Mapping[str, typ.Any]) -> str:
        """Expand the template ``source`` against ``data``.

        Raises
        ------
        TemplateError
            If the source does not parse or rendering fails, including
            failures raised by a template helper.
        """
        try:
            return self._string_env.from_string(source).render(data)
        except Exception as exc:  # noqa: BLE001 - helpers may raise anything
            raise TemplateError(_describe(exc)) from exc

    def render_file(self, path: Path, data: typ.Mapping[str, typ.Any]) -> str:
        """Render the template file at ``path`` against ``data``.

        Raises
        ------
        ConfigError
            If ``path`` does not point at a file.
        TemplateError
            If the template does not parse or rendering fails, including
            failures raised by a template helper.
        """
        if not path.is_file():
            msg = f"Page template '{path}' not found."
            raise ConfigError(msg)
        env = self._environment(
            ChoiceLoader(
                [FileSystemLoader(str(path.parent)), DictLoader(self.partials)]
            )
        )
        try:
            return env.get_template(path.name).render(data)
        except Exception as exc:  # noqa: BLE001 - helpers may raise anything
            raise TemplateError(_describe(exc)) from exc

    def _environment(self, loader: jinja2.BaseLoader) -> Environment:
        env = Environment(
            loader=loader,
            autoescape=select_autoescape(["html", "xml"], default_for_string=False),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        env.globals.update(self.helpers)
        env.filters.update(self.helpers)
        return env


def _describe(exc: Exception) -> str:
    """Return a one-line description of a template failure."""
    if isinstance(exc, jinja2.TemplateSyntaxError):
        return f"Template syntax error on line {exc.lineno}: {exc.message}"
    if isinstance(exc, jinja2.TemplateError):
        return f"Template rendering failed: {exc.message or type(exc).__name__}"
    return f"Template helper failed: {type(exc).__name__}: {exc}"


__all__ = ["TemplateEngine"]
