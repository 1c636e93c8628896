# company_site/api/pages.py
from company_site.application.site.render_page import (
    render_company_page,
    render_company_direct,
)
from company_site.composition.context import get_composition_context
from company_site.utils.request import original_request_path
from . import site_bp


@site_bp.route("/<slug>/", methods=["GET"])
@site_bp.route("/<slug>/<path:subpath>", methods=["GET"])
def render_company(slug, subpath=None):
    return render_company_page(
        context=get_composition_context(),
        slug=slug,
        request_path=original_request_path(),
    )


@site_bp.route("/render/<identifier>", methods=["GET"])
def render_company_by_identifier(identifier):
    return render_company_direct(
        context=get_composition_context(),
        identifier=identifier,
        request_path=original_request_path(),
    )
