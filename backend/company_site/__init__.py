from flask import Flask
from .config import config_by_name
from .extensions import db, migrate
from .api import site_bp
from .errors import register_error_handlers
from .composition.context import CompositionContext, EXTENSION_KEY
from .composition.renderer import JinjaViewRenderer
from .repositories.company import SqlCompanyRepository


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__, static_folder="assets", static_url_path="/assets")
    app.config.from_object(config_by_name[config_name])
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)

    # -------------------------------------------------
    # Page composition (registry is fixed from here on)
    # -------------------------------------------------
    app.extensions[EXTENSION_KEY] = CompositionContext.from_config(
        app.config,
        repository=SqlCompanyRepository(db.session),
        renderer=JinjaViewRenderer(),
    )

    # -------------------------------------------------
    # Blueprints
    # -------------------------------------------------
    app.register_blueprint(site_bp)
    register_error_handlers(app)

    return app
