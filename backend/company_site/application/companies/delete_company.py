from company_site.extensions import db
from company_site.models.company import Company
from company_site.domain.exceptions import CompanyNotFound
from company_site.utils.transaction import transactional


def delete_company(*, company_id: str) -> None:
    company = db.session.get(Company, company_id)
    if not company:
        raise CompanyNotFound(company_id)

    with transactional() as session:
        session.delete(company)  # sections cascade
