"""Unit tests for the report TemplateRegistry."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound
from jinja2.exceptions import UndefinedError

from golden.contexts.reporting.registries import TemplateRegistry


@pytest.mark.unit
def test_template_registry_init():
    registry = TemplateRegistry()

    assert registry.templates_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    registry = TemplateRegistry()

    template1 = registry.get_template("tag_legend")
    assert registry.is_cached("tag_legend")

    template2 = registry.get_template("tag_legend")
    assert template1 is template2


@pytest.mark.unit
def test_get_template_not_found():
    registry = TemplateRegistry()

    with pytest.raises(TemplateNotFound):
        registry.get_template("nonexistent_report")


@pytest.mark.unit
def test_get_template_path():
    registry = TemplateRegistry()
    path = registry.get_template_path("coverage_report")

    assert isinstance(path, Path)
    assert path.name == "coverage_report.txt.jinja"
    assert path.exists()


@pytest.mark.unit
def test_clear_cache():
    registry = TemplateRegistry()

    registry.get_template("coverage_report")
    assert len(registry._cache) == 1

    registry.clear_cache()
    assert len(registry._cache) == 0


@pytest.mark.unit
def test_custom_templates_path(tmp_path):
    (tmp_path / "hello.txt.jinja").write_text("Hello {{ name }}")
    registry = TemplateRegistry(tmp_path)

    assert registry.get_template("hello").render(name="דנה") == "Hello דנה"


@pytest.mark.unit
def test_strict_undefined(tmp_path):
    """Test missing template variables raise instead of rendering blank."""
    (tmp_path / "hello.txt.jinja").write_text("Hello {{ name }}")
    registry = TemplateRegistry(tmp_path)

    with pytest.raises(UndefinedError):
        registry.get_template("hello").render()
