# company_site/application/site/render_page.py
from __future__ import annotations

import logging

from company_site.composition.context import CompositionContext
from company_site.composition.resolver import ResolutionMode
from company_site.domain.exceptions import CompanyNotFound

logger = logging.getLogger(__name__)


def render_company_page(
    *,
    context: CompositionContext,
    slug: str,
    request_path: str,
) -> str:
    """
    Render a company page in layout mode (registry-resolved partials).

    Pipeline: fetch -> resolve sections -> compose context -> render.
    A missing company short-circuits before composition.
    """
    company = context.repository.find_by_slug(slug)
    if company is None:
        logger.info("No company for slug %r", slug)
        raise CompanyNotFound(slug)

    plan = context.resolver.resolve(company.sections, ResolutionMode.LAYOUT)
    page = context.composer.compose(company, plan, request_path)

    return context.renderer.render(
        context.layout_template,
        page.layout_context(context.registry.as_mapping()),
    )


def render_company_direct(
    *,
    context: CompositionContext,
    identifier: str,
    request_path: str,
) -> str:
    """
    Render a company page in direct mode ("<category>/<template_name>").

    identifier is a company id; a slug is accepted as well.
    """
    company = (
        context.repository.find_by_id(identifier)
        or context.repository.find_by_slug(identifier)
    )
    if company is None:
        logger.info("No company for identifier %r", identifier)
        raise CompanyNotFound(identifier)

    plan = context.resolver.resolve(
        company.sections,
        ResolutionMode.DIRECT,
        partial_exists=lambda path: context.renderer.has_template(
            path + context.partial_extension
        ),
    )
    page = context.composer.compose(company, plan, request_path)

    view_context = page.direct_context()
    view_context["partial_extension"] = context.partial_extension

    return context.renderer.render(context.direct_template, view_context)
