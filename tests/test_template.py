from __future__ import annotations

import pytest

from textbringer_plugin_generator.template import TemplateRenderer, TemplateRenderingError, ruby_string


@pytest.fixture()
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


def test_render_string_substitutes_context(renderer: TemplateRenderer):
    rendered = renderer.render_string("class {{ mode_class_name }} < Mode", {"mode_class_name": "MyLangMode"})
    assert rendered == "class MyLangMode < Mode"


def test_ruby_filter(renderer: TemplateRenderer):
    assert renderer.render_string("[{{ author|ruby }}]", {"author": "Ada"}) == '["Ada"]'


def test_ruby_braces_pass_through(renderer: TemplateRenderer):
    template = 'spec.files.grep(%r{\\Aexe/}) { |f| "#{f}" }'
    assert renderer.render_string(template, {}) == template


def test_substituted_values_are_not_rescanned(renderer: TemplateRenderer):
    rendered = renderer.render_string("{{ a }}", {"a": "{{ b }}", "b": "nope"})
    assert rendered == "{{ b }}"


def test_missing_value_raises(renderer: TemplateRenderer):
    with pytest.raises(TemplateRenderingError):
        renderer.render_string("Hello {{ missing }}", {})


def test_unknown_filter_raises(renderer: TemplateRenderer):
    with pytest.raises(TemplateRenderingError):
        renderer.render_string("{{ name|unknown }}", {"name": "demo"})


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Ada", '"Ada"'),
        ("", '""'),
        ('say "hi"', '"say \\"hi\\""'),
        ("back\\slash", '"back\\\\slash"'),
        ("#{danger}", '"\\#{danger}"'),
        ("Ada #@home", '"Ada \\#@home"'),
        ("cash #$HOME", '"cash \\#$HOME"'),
        ("issue #42", '"issue #42"'),
    ],
)
def test_ruby_string(value, expected):
    assert ruby_string(value) == expected
