# company_site/normalizers/pagination.py
from typing import Callable, Any, List, Optional, Dict


def normalize_pagination(
    items: List[Any],
    normalize_fn: Callable[[Any], Dict[str, Any]],
    *,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
    total: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Normalize list responses.

    Offset pagination metadata is only attached when both page and
    per_page were requested.
    """
    response: Dict[str, Any] = {
        "items": [normalize_fn(item) for item in items],
    }

    if page is None or per_page is None:
        return response

    response["pagination"] = {
        "page": page,
        "per_page": per_page,
    }

    if total is not None:
        response["pagination"]["total"] = total
        response["pagination"]["total_pages"] = (
            (total + per_page - 1) // per_page
        )

    return response
