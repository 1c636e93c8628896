"""
Tests for the application factory wiring
"""
from company_site import create_app
from company_site.composition.context import EXTENSION_KEY, CompositionContext
from company_site.config import DEFAULT_SECTION_TEMPLATES


def test_composition_context_is_built_from_config(app):
    context = app.extensions[EXTENSION_KEY]

    assert isinstance(context, CompositionContext)
    assert dict(context.registry.as_mapping()) == DEFAULT_SECTION_TEMPLATES
    assert context.composer.base_url == "https://sites.example.com"
    assert context.layout_template == "layout.html"
    assert context.direct_template == "render.html"
    assert context.resolver.registry is context.registry


def test_each_app_gets_its_own_context():
    first = create_app("testing")
    second = create_app("testing")

    assert first.extensions[EXTENSION_KEY] is not second.extensions[EXTENSION_KEY]
