from typing import List
from company_site.models.template import Template


def list_templates() -> List[Template]:
    return (
        Template.query
        .order_by(Template.category.asc(), Template.template_name.asc())
        .all()
    )
