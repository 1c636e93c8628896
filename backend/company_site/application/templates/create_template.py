# company_site/application/templates/create_template.py
from typing import Any, Dict
from sqlalchemy.exc import IntegrityError
from company_site.models.template import Template
from company_site.domain.invariants.exceptions import InvariantViolation
from company_site.utils.transaction import transactional


def create_template(*, data: Dict[str, Any]) -> Template:
    """Register a category/template_name pair in the template catalog."""
    category = data.get("category")
    template_name = data.get("template_name")

    if not isinstance(category, str) or not category.strip():
        raise InvariantViolation("Template category is required.")
    if not isinstance(template_name, str) or not template_name.strip():
        raise InvariantViolation("Template template_name is required.")

    category, template_name = category.strip(), template_name.strip()

    template = Template()
    template.category = category
    template.template_name = template_name

    try:
        with transactional() as session:
            session.add(template)
        return template

    except IntegrityError as exc:
        raise InvariantViolation(
            f"Template already exists: {category}/{template_name}"
        ) from exc
