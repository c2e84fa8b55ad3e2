"""Tests for template loaders and PageParams."""

from pathlib import Path

import pytest

from weblet.kernel.exceptions import TemplateLoadException
from weblet.web.templates import DefaultTemplateLoader, NullTemplateLoader, PageParams, TemplateLoader


def _write(directory: Path, name: str, body: str) -> None:
    (directory / name).write_text(body)


class TestDefaultTemplateLoader:
    def test_implements_template_loader(self, tmp_path: Path):
        _write(tmp_path, "a.html", "A")
        assert isinstance(DefaultTemplateLoader(str(tmp_path / "*.html")), TemplateLoader)

    def test_templates_registered_by_base_name(self, tmp_path: Path):
        _write(tmp_path, "index.html", "Index {{ n }}")
        env = DefaultTemplateLoader(str(tmp_path / "*.html")).load()
        assert env.get_template("index.html").render(n=1) == "Index 1"

    def test_templates_can_extend_each_other(self, tmp_path: Path):
        _write(tmp_path, "layout.html", "[{% block body %}{% endblock %}]")
        _write(tmp_path, "page.html", '{% extends "layout.html" %}{% block body %}page{% endblock %}')
        env = DefaultTemplateLoader(str(tmp_path / "*.html")).load()
        assert env.get_template("page.html").render() == "[page]"

    def test_globals_and_filters(self, tmp_path: Path):
        _write(tmp_path, "g.html", "{{ site }} {{ 'x' | shout }}")
        loader = DefaultTemplateLoader(
            str(tmp_path / "*.html"),
            globals={"site": "Weblet"},
            filters={"shout": lambda s: s.upper() + "!"},
        )
        assert loader.load().get_template("g.html").render() == "Weblet X!"

    def test_cached_when_not_reloading(self, tmp_path: Path):
        _write(tmp_path, "a.html", "first")
        loader = DefaultTemplateLoader(str(tmp_path / "*.html"))
        _write(tmp_path, "a.html", "second")
        assert loader.load() is loader.load()
        assert loader.load().get_template("a.html").render() == "first"

    def test_reload_parses_each_time(self, tmp_path: Path):
        _write(tmp_path, "a.html", "first")
        loader = DefaultTemplateLoader(str(tmp_path / "*.html"), reload=True)
        assert loader.load().get_template("a.html").render() == "first"
        _write(tmp_path, "a.html", "second")
        assert loader.load().get_template("a.html").render() == "second"

    def test_no_matching_files_fails_fast(self, tmp_path: Path):
        with pytest.raises(TemplateLoadException):
            DefaultTemplateLoader(str(tmp_path / "*.html"))

    def test_syntax_error_fails_fast(self, tmp_path: Path):
        _write(tmp_path, "bad.html", "{% if %}")
        with pytest.raises(TemplateLoadException, match="cannot parse templates"):
            DefaultTemplateLoader(str(tmp_path / "*.html"))

    def test_syntax_error_with_reload_surfaces_on_load(self, tmp_path: Path):
        _write(tmp_path, "bad.html", "{% if %}")
        loader = DefaultTemplateLoader(str(tmp_path / "*.html"), reload=True)
        with pytest.raises(TemplateLoadException):
            loader.load()


class TestNullTemplateLoader:
    def test_load_always_fails(self):
        with pytest.raises(TemplateLoadException):
            NullTemplateLoader().load()


class TestPageParams:
    def test_set_returns_empty_string(self):
        params = PageParams()
        assert params.set("title", "Home") == ""
        assert params["title"] == "Home"

    def test_is_and_has(self):
        params = PageParams(section="docs")
        assert params.is_("section", "docs")
        assert not params.is_("section", "blog")
        assert params.has("section")
        assert not params.has("title")

    def test_usable_from_templates(self, tmp_path: Path):
        _write(tmp_path, "p.html", '{{ params.set("title", "Hi") }}<h1>{{ params.get("title") }}</h1>')
        env = DefaultTemplateLoader(str(tmp_path / "*.html")).load()
        assert env.get_template("p.html").render(params=PageParams()) == "<h1>Hi</h1>"
