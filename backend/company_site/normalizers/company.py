from company_site.domain.company import CompanyRecord, Theme
from .section import normalize_section, to_section_record


def normalize_company(company, include_sections=False):
    data = {
        "id": company.id,
        "name": company.name,
        "address": company.address,
        "phone": company.phone,
        "logo": company.logo,
        "slug": company.slug,
        "theme": Theme.from_mapping(company.theme).as_dict(),
    }

    if include_sections:
        data["sections"] = [normalize_section(s) for s in company.sections]

    return data


def to_company_record(company) -> CompanyRecord:
    """Maps a Company row onto the read-only record the composer consumes."""
    return CompanyRecord(
        id=company.id,
        slug=company.slug,
        name=company.name,
        address=company.address,
        phone=company.phone,
        logo=company.logo,
        theme=Theme.from_mapping(company.theme),
        sections=tuple(to_section_record(s) for s in company.sections),
    )
