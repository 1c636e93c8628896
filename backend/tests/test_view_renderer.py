"""
Tests for the Jinja-backed view renderer
"""
import pytest
from jinja2 import ChoiceLoader, DictLoader

from company_site.composition.renderer import JinjaViewRenderer
from company_site.domain.exceptions import RenderFailure


def test_renders_partial(app):
    renderer = JinjaViewRenderer()
    section = {"order": 1, "data": {"text": "Footer body", "links": []}}

    with app.test_request_context("/"):
        html = renderer.render("footer/footer1.html", {"section": section})

    assert "Footer body" in html
    assert 'data-order="1"' in html


def test_missing_template_is_a_render_failure(app):
    with app.test_request_context("/"):
        with pytest.raises(RenderFailure) as excinfo:
            JinjaViewRenderer().render("nowhere/nothing.html", {})

    assert excinfo.value.template_path == "nowhere/nothing.html"


def test_syntax_error_is_a_render_failure(app):
    app.jinja_env.loader = ChoiceLoader([
        DictLoader({"broken/broken1.html": "{% if %}"}),
        app.jinja_env.loader,
    ])

    with app.test_request_context("/"):
        with pytest.raises(RenderFailure):
            JinjaViewRenderer().render("broken/broken1.html", {})


def test_has_template(app):
    renderer = JinjaViewRenderer()

    with app.app_context():
        assert renderer.has_template("footer/footer1.html")
        assert not renderer.has_template("gallery/gallery9.html")
