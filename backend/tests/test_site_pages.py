"""
Tests for the rendered company pages
"""
import dataclasses
import logging

from company_site.application.companies.create_company import create_company
from company_site.composition.context import EXTENSION_KEY
from company_site.domain.exceptions import RenderFailure


def test_layout_page_renders_sections_in_order(client, acme):
    response = client.get("/acme/")

    assert response.status_code == 200
    assert response.mimetype == "text/html"
    html = response.get_data(as_text=True)
    assert html.index("Acme header title") < html.index("Acme footer text")
    assert '<a href="/acme/shop">Shop</a>' in html


def test_layout_page_has_canonical_url_and_theme(client, acme):
    html = client.get("/acme/about?lang=en").get_data(as_text=True)

    assert 'href="https://sites.example.com/acme/about?lang=en"' in html
    assert "--color-primary: #c1121f;" in html
    assert "--font-body: Georgia, serif;" in html
    assert "<title>Acme Corp</title>" in html


def test_slug_without_trailing_slash_redirects(client, acme):
    response = client.get("/acme")

    assert response.status_code == 308
    assert response.headers["Location"].endswith("/acme/")


def test_unknown_slug_is_not_found(client):
    response = client.get("/ghost/")

    assert response.status_code == 404
    assert response.get_data(as_text=True) == "Not Found"


def test_company_without_sections_renders(client, app):
    create_company(data={"slug": "empty", "name": "Empty Ltd"})

    response = client.get("/empty/")

    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert "<title>Empty Ltd</title>" in html
    assert "section-header" not in html


def test_broken_sections_are_skipped(client, app, acme_payload):
    acme_payload["sections"] += [
        {"order": 0, "template": {"category": "header"}},
        {"order": 5, "template": {"category": "gallery", "template_name": "gallery7"}},
    ]
    create_company(data=acme_payload)

    response = client.get("/acme/")

    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert html.count("section-header") == 1
    assert html.count("section-footer") == 1


def test_direct_render_by_slug(client, acme):
    response = client.get("/render/acme")

    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert html.index("Acme header title") < html.index("Acme footer text")
    assert 'href="https://sites.example.com/render/acme"' in html


def test_direct_render_by_id(client, acme):
    response = client.get(f"/render/{acme.id}")

    assert response.status_code == 200
    assert "Acme footer text" in response.get_data(as_text=True)


def test_direct_render_skips_partials_missing_on_disk(client, app, acme_payload, caplog):
    acme_payload["sections"].append(
        {"order": 3, "template": {"category": "pricing", "template_name": "pricing9"}}
    )
    create_company(data=acme_payload)

    with caplog.at_level(logging.WARNING):
        response = client.get("/render/acme")

    assert response.status_code == 200
    assert "Acme footer text" in response.get_data(as_text=True)
    dropped = [r.getMessage() for r in caplog.records if "missing partial" in r.getMessage()]
    assert len(dropped) == 1
    assert "pricing/pricing9" in dropped[0]


def test_direct_render_unknown_company(client):
    response = client.get("/render/ghost")

    assert response.status_code == 404


def test_render_failure_is_a_server_error(client, app, acme):
    context = app.extensions[EXTENSION_KEY]

    class FailingRenderer:
        def render(self, template_path, view_context):
            raise RenderFailure(template_path)

    app.extensions[EXTENSION_KEY] = dataclasses.replace(context, renderer=FailingRenderer())

    response = client.get("/acme/")

    assert response.status_code == 500
    assert response.get_data(as_text=True) == "Internal Server Error"


def test_misconfigured_layout_partial_is_a_server_error(client, app, acme):
    context = app.extensions[EXTENSION_KEY]
    app.extensions[EXTENSION_KEY] = dataclasses.replace(context, layout_template="missing.html")

    response = client.get("/acme/")

    assert response.status_code == 500


def test_static_assets(client):
    response = client.get("/assets/site.css")

    assert response.status_code == 200
    assert "text/css" in response.content_type
    response.close()


def test_ping(client):
    response = client.get("/ping")

    assert response.status_code == 200
    assert response.get_data(as_text=True) == "pong 🏓"


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok", "service": "company-site"}
