"""Tests for the Jinja2 template renderer (vaporgen.scaffolder.templates)."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from vaporgen.scaffolder.templates import TemplateRenderer


pytestmark = pytest.mark.unit


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


def _renderer_for(tmp_path: Path, source: str) -> TemplateRenderer:
    (tmp_path / "fragment.j2").write_text(source, encoding="utf-8")
    return TemplateRenderer(tmp_path)


class TestTemplateRenderer:
    @pytest.mark.parametrize(
        "template", ["model.swift.j2", "migration.swift.j2", "controller.swift.j2"]
    )
    def test_ships_template(self, renderer, template):
        assert (renderer.template_dir / template).is_file()

    def test_collection_name_filter(self, tmp_path):
        renderer = _renderer_for(tmp_path, "{{ name | collection_name }}")
        assert renderer.render("fragment.j2", {"name": "Order"}) == "orders"

    def test_no_html_escaping(self, tmp_path):
        renderer = _renderer_for(tmp_path, "{{ value }}")
        assert renderer.render("fragment.j2", {"value": '<a & "b">'}) == '<a & "b">'

    def test_shipped_templates_do_not_escape(self, renderer):
        out = renderer.render("controller.swift.j2", {"name": "A&B"})
        assert "struct A&BController" in out
        assert "&amp;" not in out

    def test_missing_variable_raises(self, renderer):
        with pytest.raises(UndefinedError):
            renderer.render("controller.swift.j2", {})

    def test_unknown_template_raises(self, renderer):
        with pytest.raises(TemplateNotFound):
            renderer.render("nope.swift.j2", {})

    def test_keeps_trailing_newline(self, tmp_path):
        renderer = _renderer_for(tmp_path, "Hello {{ name }}!\n")
        assert renderer.render("fragment.j2", {"name": "Vapor"}) == "Hello Vapor!\n"
