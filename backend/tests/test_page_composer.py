"""
Unit tests for PageComposer
"""
import pytest

from company_site.composition.composer import PageComposer
from company_site.composition.resolver import ResolutionMode, SectionResolver
from company_site.domain.company import CompanyRecord


@pytest.fixture
def resolver(registry):
    return SectionResolver(registry)


@pytest.mark.parametrize("base_url, path, expected", [
    ("https://sites.example.com", "/acme/", "https://sites.example.com/acme/"),
    ("https://sites.example.com/", "/acme/about?x=1", "https://sites.example.com/acme/about?x=1"),
    ("", "/acme/", "/acme/"),
    ("https://sites.example.com", "acme/", "https://sites.example.com/acme/"),
])
def test_canonical_url(base_url, path, expected):
    assert PageComposer(base_url).canonical_url(path) == expected


def test_compose_keeps_slug(resolver, acme_record):
    plan = resolver.resolve(acme_record.sections, ResolutionMode.LAYOUT)

    page = PageComposer("https://sites.example.com").compose(acme_record, plan, "/acme/")

    assert page.slug == "acme"
    assert page.company["slug"] == "acme"
    assert page.canonical_url == "https://sites.example.com/acme/"
    assert page.sections == plan.descriptors


def test_compose_company_without_sections(resolver):
    company = CompanyRecord.from_mapping({"slug": "empty", "name": "Empty Ltd"})
    plan = resolver.resolve(company.sections, ResolutionMode.LAYOUT)

    page = PageComposer().compose(company, plan, "/empty/")

    assert page.sections == ()
    assert page.layout_context({})["data"]["sections"] == []
    assert page.direct_context()["sections"] == []


def test_theme_is_passed_through_unmodified(resolver, acme_record):
    plan = resolver.resolve(acme_record.sections, ResolutionMode.LAYOUT)

    page = PageComposer().compose(acme_record, plan, "/acme/")

    assert page.company["theme"] == acme_record.theme.as_dict()


def test_layout_context(resolver, registry, acme_record):
    plan = resolver.resolve(acme_record.sections, ResolutionMode.LAYOUT)
    page = PageComposer("https://sites.example.com").compose(acme_record, plan, "/acme/")

    context = page.layout_context(registry.as_mapping())

    assert set(context) == {"data", "sectionMap"}
    assert context["sectionMap"] == {
        "header 1": "header/header1.html",
        "footer 1": "footer/footer1.html",
    }
    data = context["data"]
    assert data["url"] == "https://sites.example.com/acme/"
    assert data["name"] == "Acme Corp"
    assert [s["path"] for s in data["sections"]] == [
        "header/header1.html",
        "footer/footer1.html",
    ]


def test_direct_context(resolver, acme_record):
    plan = resolver.resolve(acme_record.sections, ResolutionMode.DIRECT)
    page = PageComposer().compose(acme_record, plan, "/render/acme")

    context = page.direct_context()

    assert set(context) == {"sections", "company"}
    assert [s["temp_location"] for s in context["sections"]] == [
        "header/header1",
        "footer/footer1",
    ]
    assert context["company"]["slug"] == "acme"
    assert context["company"]["url"] == "/render/acme"


def test_diagnostics_travel_with_the_page(resolver, acme_record):
    company = CompanyRecord.from_mapping({
        "slug": "acme",
        "sections": [{"order": 1, "template": {"category": "header"}}],
    })
    plan = resolver.resolve(company.sections, ResolutionMode.DIRECT)

    page = PageComposer().compose(company, plan, "/render/acme")

    assert page.sections == ()
    assert [d.reason for d in page.diagnostics] == ["missing category or template_name"]
