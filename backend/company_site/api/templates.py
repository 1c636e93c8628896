from flask import request, jsonify
from company_site.application.templates.list_templates import list_templates
from company_site.application.templates.create_template import create_template
from company_site.normalizers.template import normalize_template
from company_site.domain.invariants.exceptions import InvariantViolation
from . import site_bp


@site_bp.route("/templates", methods=["GET"])
def get_templates():
    return jsonify([normalize_template(t) for t in list_templates()]), 200


@site_bp.route("/templates", methods=["POST"])
def post_template():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvariantViolation("Invalid request body")

    template = create_template(data=data)
    return jsonify(normalize_template(template)), 201
