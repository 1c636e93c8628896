# company_site/api/companies.py
from flask import request, jsonify, current_app
from company_site.application.companies.create_company import create_company
from company_site.application.companies.update_company import update_company
from company_site.application.companies.add_section import add_section
from company_site.application.companies.delete_company import delete_company
from company_site.application.companies.list_companies import list_companies
from company_site.domain.exceptions import CompanyNotFound
from company_site.domain.invariants.exceptions import InvariantViolation
from company_site.extensions import db
from company_site.models.company import Company
from company_site.normalizers.company import normalize_company
from company_site.normalizers.section import normalize_section
from company_site.normalizers.pagination import normalize_pagination
from . import site_bp


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvariantViolation("Invalid request body")
    return data


def _get_company_or_404(company_id):
    company = db.session.get(Company, company_id)
    if not company:
        raise CompanyNotFound(company_id)
    return company


# ------------------------
# Companies
# ------------------------

@site_bp.route("/", methods=["GET"])
def get_companies():
    page = request.args.get("page", type=int)
    per_page = request.args.get("per_page", type=int)

    items, total = list_companies(
        name=request.args.get("name"),
        address=request.args.get("address"),
        page=page,
        per_page=per_page,
    )

    return jsonify(normalize_pagination(
        items,
        normalize_company,
        page=page,
        per_page=per_page,
        total=total,
    )), 200


@site_bp.route("/company", methods=["POST"])
def post_company():
    company = create_company(data=_json_body())
    current_app.logger.info("Created company %s (%s)", company.slug, company.id)

    return jsonify(normalize_company(company, include_sections=True)), 201


@site_bp.route("/company/<company_id>", methods=["GET"])
def get_company(company_id):
    company = _get_company_or_404(company_id)
    return jsonify(normalize_company(company, include_sections=True)), 200


@site_bp.route("/company/<company_id>", methods=["PUT"])
def put_company(company_id):
    company = update_company(company_id=company_id, data=_json_body())
    return jsonify(normalize_company(company, include_sections=True)), 200


@site_bp.route("/company/<company_id>", methods=["DELETE"])
def remove_company(company_id):
    delete_company(company_id=company_id)
    current_app.logger.info("Deleted company %s", company_id)

    return jsonify({"message": "Company deleted"}), 200


# ------------------------
# Sections
# ------------------------

@site_bp.route("/company/<company_id>/sections", methods=["GET"])
def get_company_sections(company_id):
    company = _get_company_or_404(company_id)
    return jsonify([normalize_section(s) for s in company.sections]), 200


@site_bp.route("/company/<company_id>/sections", methods=["PUT"])
def put_company_section(company_id):
    company = add_section(company_id=company_id, data=_json_body())
    return jsonify(normalize_company(company, include_sections=True)), 200
