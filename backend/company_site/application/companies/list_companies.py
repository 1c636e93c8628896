# company_site/application/companies/list_companies.py
from typing import List, Optional, Tuple
from werkzeug.exceptions import BadRequest
from company_site.models.company import Company


def _contains(column, text: str):
    escaped = (
        text.replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )
    return column.ilike(f"%{escaped}%", escape="\\")


def list_companies(
    *,
    name: Optional[str] = None,
    address: Optional[str] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
) -> Tuple[List[Company], int]:
    """
    Case-insensitive substring search on name and address.

    Returns (items, total). Offset pagination applies only when both page
    and per_page are given.
    """
    query = Company.query

    if name:
        query = query.filter(_contains(Company.name, name))
    if address:
        query = query.filter(_contains(Company.address, address))

    total = query.count()
    query = query.order_by(Company.created_at.asc(), Company.slug.asc())

    if page is not None and per_page is not None:
        if page < 1 or per_page < 1:
            raise BadRequest("page and per_page must be positive")
        query = query.offset((page - 1) * per_page).limit(per_page)

    return query.all(), total
