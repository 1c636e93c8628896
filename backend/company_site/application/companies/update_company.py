# company_site/application/companies/update_company.py
from typing import Any, Dict
from sqlalchemy.exc import IntegrityError
from company_site.extensions import db
from company_site.models.company import Company
from company_site.domain.exceptions import CompanyNotFound, SlugConflict
from company_site.domain.invariants.company import assert_company
from company_site.utils.transaction import transactional
from .add_section import build_section

UPDATABLE_FIELDS = ("name", "address", "phone", "logo", "slug", "theme")


def update_company(
    *,
    company_id: str,
    data: Dict[str, Any],
) -> Company:
    """
    Update a company's fields.

    When "sections" is present it replaces the whole section list.
    """
    assert_company(data, partial=True)

    company = db.session.get(Company, company_id)
    if not company:
        raise CompanyNotFound(company_id)

    # Slug collision check
    if "slug" in data and data["slug"] != company.slug:
        exists = Company.query.filter_by(slug=data["slug"]).first()
        if exists:
            raise SlugConflict(data["slug"])

    try:
        with transactional():
            for field in UPDATABLE_FIELDS:
                if field in data:
                    setattr(company, field, data[field])

            if "sections" in data:
                company.sections = [
                    build_section(section, position=position)
                    for position, section in enumerate(data["sections"] or [])
                ]

        return company

    except IntegrityError as exc:
        raise SlugConflict(data.get("slug", company.slug)) from exc
