# company_site/application/companies/create_company.py
from typing import Any, Dict
from sqlalchemy.exc import IntegrityError
from company_site.models.company import Company
from company_site.domain.exceptions import SlugConflict
from company_site.domain.invariants.company import assert_company
from company_site.utils.transaction import transactional
from .add_section import build_section


def create_company(
    *,
    data: Dict[str, Any],
) -> Company:
    """
    Create a company with its initial sections.

    Edge cases handled:
    - Invalid payload (InvariantViolation)
    - Duplicate slug (SlugConflict), checked up front and by the unique index
    """
    assert_company(data)

    slug = data["slug"]
    if Company.query.filter_by(slug=slug).first():
        raise SlugConflict(slug)

    company = Company()
    company.name = data.get("name")
    company.address = data.get("address")
    company.phone = data.get("phone")
    company.logo = data.get("logo")
    company.slug = slug
    company.theme = dict(data.get("theme") or {})

    for position, section in enumerate(data.get("sections") or []):
        company.sections.append(build_section(section, position=position))

    try:
        with transactional() as session:
            session.add(company)
            session.flush()  # ensures company.id exists

        return company

    except IntegrityError as exc:
        # Lost a race against another create with the same slug
        raise SlugConflict(slug) from exc
