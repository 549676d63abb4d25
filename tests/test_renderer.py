import pytest
from jinja2 import TemplateSyntaxError, UndefinedError

from ratchet.dom_model import Node
from ratchet.models import RenderSettings
from ratchet.renderer import Renderer, compile, evaluate, parse, render


def test_render_binds_content():
    output = render('<div data-prop="body"></div>', {"body": "Content"})

    assert output == '<div data-prop="body">Content</div>'


def test_render_expands_list_into_siblings():
    output = render('<div data-prop="body"></div>', {"body": ["one", "two"]})

    assert output == '<div data-prop="body">one</div><div data-prop="body">two</div>'


def test_render_nested_data_with_attributes():
    template = (
        '<article data-prop="post">'
        '<h1 data-prop="title"></h1>'
        '<a data-prop="link" class="more">Read</a>'
        "</article>"
    )
    data = {
        "post": {
            "title": "Hello & welcome",
            "link": ("Continue", [("href", "/posts/1?a=1&b=2")]),
        }
    }

    output = render(template, data)

    assert output == (
        '<article data-prop="post">'
        '<h1 data-prop="title">Hello &amp; welcome</h1>'
        '<a href="/posts/1?a=1&amp;b=2" data-prop="link" class="more">Continue</a>'
        "</article>"
    )


def test_render_evaluates_remaining_expressions():
    template = '<p data-prop="name"></p><span>{{ data.count + 1 }} {{ count }}</span>'

    output = render(template, {"name": "Ann", "count": 2})

    assert output == '<p data-prop="name">Ann</p><span>3 2</span>'


def test_render_does_not_evaluate_bound_data():
    output = render('<p data-prop="bio"></p>', {"bio": "{{ 7 * 7 }}"})

    assert "49" not in output
    assert output == '<p data-prop="bio">&#123;&#123; 7 * 7 &#125;&#125;</p>'


def test_render_does_not_evaluate_bound_attribute_names():
    from_mapping = render('<a data-prop="link"></a>', {"link": ("x", {"{{ 7 * 7 }}": "v"})})
    from_list = render('<a data-prop="link"></a>', {"link": [("{{ data.__class__ }}", "v")]})

    assert from_mapping == '<a &#123;&#123; 7 * 7 &#125;&#125;="v" data-prop="link">x</a>'
    assert from_list == (
        '<a &#123;&#123; data.__class__ &#125;&#125;="v" data-prop="link"></a>'
    )


def test_render_with_custom_marker_and_no_evaluation():
    settings = RenderSettings(marker="data-bind", evaluate=False)

    output = render('<b data-bind="x">{{ y }}</b><i>{{ y }}</i>', {"x": "X"}, settings)

    assert output == '<b data-bind="x">X</b><i>{{ y }}</i>'


def test_render_strict_undefined_propagates():
    with pytest.raises(UndefinedError):
        render("<p>{{ missing_value }}</p>", {})


def test_render_lenient_undefined():
    settings = RenderSettings(strict_undefined=False)

    assert render("<p>{{ missing_value }}</p>", {}, settings) == "<p></p>"


def test_render_syntax_errors_propagate():
    with pytest.raises(TemplateSyntaxError):
        render("<p>{{ data. }}</p>", {})


def test_pipeline_steps_compose():
    renderer = Renderer()
    tree = parse('<div data-prop="body"></div>')
    transformed = renderer.transform(tree, {"body": "Content"})

    assert transformed == [Node("div", (("data-prop", "body"),), ("Content",))]
    markup = compile(transformed)
    assert markup == '<div data-prop="body">Content</div>'
    assert evaluate(markup, {}) == markup


def test_renderer_reuses_environment():
    renderer = Renderer()

    assert renderer.env is renderer.env
    assert renderer.render("<p>{{ data }}</p>", "x & y") == "<p>x &amp; y</p>"
