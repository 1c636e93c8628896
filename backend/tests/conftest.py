"""
Pytest configuration and fixtures
"""
import pytest

from company_site import create_app
from company_site.application.companies.create_company import create_company
from company_site.composition.registry import TemplateRegistry
from company_site.domain.company import CompanyRecord
from company_site.extensions import db as _db


@pytest.fixture
def app():
    """Application on an in-memory SQLite database, fresh schema per test"""
    app = create_app("testing")

    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def registry():
    return TemplateRegistry({
        "header 1": "header/header1.html",
        "footer 1": "footer/footer1.html",
    })


@pytest.fixture
def acme_payload():
    """Footer stored before header; order puts the header first"""
    return {
        "name": "Acme Corp",
        "address": "1 Road Runner Way",
        "phone": "+1-555-0100",
        "logo": "/assets/acme.png",
        "slug": "acme",
        "theme": {
            "colors": {"primary": "#c1121f"},
            "fonts": {"body": "Georgia, serif"},
        },
        "sections": [
            {
                "order": 2,
                "template": {"category": "footer", "template_name": "footer1"},
                "data": {"text": "Acme footer text"},
            },
            {
                "order": 1,
                "template": {"category": "header", "template_name": "header1"},
                "data": {
                    "title": "Acme header title",
                    "links": [{"label": "Shop", "href": "/acme/shop"}],
                },
            },
        ],
    }


@pytest.fixture
def acme_record(acme_payload):
    return CompanyRecord.from_mapping(acme_payload)


@pytest.fixture
def acme(app, acme_payload):
    return create_company(data=acme_payload)
