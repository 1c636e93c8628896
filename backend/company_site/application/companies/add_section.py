# company_site/application/companies/add_section.py
from typing import Any, Dict
from company_site.extensions import db
from company_site.models.company import Company
from company_site.models.section import CompanySection
from company_site.domain.exceptions import CompanyNotFound
from company_site.domain.invariants.section import assert_section
from company_site.utils.transaction import transactional


def build_section(data: Dict[str, Any], *, position: int) -> CompanySection:
    """Build a CompanySection row from an already validated payload."""
    template = data.get("template") or {}

    section = CompanySection()
    section.category = template.get("category")
    section.template_name = template.get("template_name")
    section.label = template.get("label")
    section.data = dict(data.get("data") or {})
    section.order = data.get("order", 0)
    section.position = position
    return section


def add_section(
    *,
    company_id: str,
    data: Dict[str, Any],
) -> Company:
    """
    Append a section to a company.

    The section goes to the end of the stored list; its display position
    comes from its order.
    """
    assert_section(data)

    company = db.session.get(Company, company_id)
    if not company:
        raise CompanyNotFound(company_id)

    with transactional():
        position = max((s.position for s in company.sections), default=-1) + 1
        company.sections.append(build_section(data, position=position))

    return company
