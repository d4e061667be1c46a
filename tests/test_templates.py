"""Unit tests for the Jinja template surface."""

from __future__ import annotations

import typing as typ

import pytest

from docs_page.errors import ConfigError, TemplateError
from docs_page.generator import TemplateEngine

if typ.TYPE_CHECKING:
    from pathlib import Path


def _shout(value: object) -> str:
    return f"{value}!"


def test_expand_substitutes_data() -> None:
    engine = TemplateEngine()
    assert engine.expand("<h1>{{ title }}</h1>", {"title": "Title"}) == "<h1>Title</h1>"


def test_expand_does_not_escape_data() -> None:
    engine = TemplateEngine()
    assert engine.expand("{{ body }}", {"body": "<em>x</em>"}) == "<em>x</em>"


def test_helpers_available_as_filters_and_globals() -> None:
    engine = TemplateEngine(helpers={"shout": _shout})
    assert engine.expand("{{ prop | shout }}", {"prop": "value"}) == "value!"
    assert engine.expand("{{ shout(prop) }}", {"prop": "value"}) == "value!"


def test_partials_can_be_included() -> None:
    engine = TemplateEngine(partials={"footer": "-- {{ author }}"})
    rendered = engine.expand('body\n{% include "footer" %}', {"author": "df"})
    assert rendered == "body\n-- df"


def test_unknown_helper_is_a_template_error() -> None:
    engine = TemplateEngine()
    with pytest.raises(TemplateError, match="rendering failed"):
        engine.expand("{{ missing_helper(title) }}", {"title": "x"})


def test_syntax_error_is_a_template_error() -> None:
    engine = TemplateEngine()
    with pytest.raises(TemplateError, match="syntax error on line 2"):
        engine.expand("ok\n{% for %}", {})


def test_render_file_supports_sibling_includes(tmp_path: Path) -> None:
    (tmp_path / "nav.jinja").write_text("<nav>{{ title }}</nav>", encoding="utf-8")
    page = tmp_path / "page.jinja"
    page.write_text('{% include "nav.jinja" %}|{{ title | shout }}', encoding="utf-8")
    engine = TemplateEngine(helpers={"shout": _shout})
    assert engine.render_file(page, {"title": "Docs"}) == "<nav>Docs</nav>|Docs!"


def test_render_missing_file_is_a_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        TemplateEngine().render_file(tmp_path / "absent.jinja", {})
