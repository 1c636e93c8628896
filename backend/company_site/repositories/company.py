# company_site/repositories/company.py
from __future__ import annotations

from typing import Optional, Protocol

from sqlalchemy import select

from company_site.domain.company import CompanyRecord
from company_site.models.company import Company
from company_site.normalizers.company import to_company_record


class CompanyRepository(Protocol):
    def find_by_slug(self, slug: str) -> Optional[CompanyRecord]:
        ...

    def find_by_id(self, company_id: str) -> Optional[CompanyRecord]:
        ...


class SqlCompanyRepository:
    """CompanyRepository backed by the Flask-SQLAlchemy session."""

    def __init__(self, session):
        self.session = session

    def find_by_slug(self, slug: str) -> Optional[CompanyRecord]:
        company = (
            self.session.execute(select(Company).where(Company.slug == slug))
            .scalar_one_or_none()
        )
        return to_company_record(company) if company else None

    def find_by_id(self, company_id: str) -> Optional[CompanyRecord]:
        company = self.session.get(Company, company_id)
        return to_company_record(company) if company else None
