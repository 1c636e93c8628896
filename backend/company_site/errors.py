from flask import current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError
from company_site.extensions import db
from company_site.domain.exceptions import CompanyNotFound, RenderFailure, SlugConflict
from company_site.domain.invariants.exceptions import InvariantViolation

def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        response = jsonify({
            "error": "InvariantViolation",
            "message": str(error)
        })
        response.status_code = 400
        return response

    @app.errorhandler(SlugConflict)
    def handle_slug_conflict(error):
        response = jsonify({
            "error": "SlugConflict",
            "message": str(error)
        })
        response.status_code = 409
        return response

    @app.errorhandler(CompanyNotFound)
    def handle_company_not_found(error):
        return "Not Found", 404, {"Content-Type": "text/plain; charset=utf-8"}

    @app.errorhandler(RenderFailure)
    def handle_render_failure(error):
        current_app.logger.exception("Render failed for %s", error.template_path)
        return "Internal Server Error", 500, {"Content-Type": "text/plain; charset=utf-8"}

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(error):
        db.session.rollback()
        current_app.logger.exception("Database error")
        return "Internal Server Error", 500, {"Content-Type": "text/plain; charset=utf-8"}
