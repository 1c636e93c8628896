from flask import Blueprint

# Public site + company management routes
site_bp = Blueprint("site", __name__)

# Import route modules so they register with site_bp
from . import health
from . import pages
from . import companies
from . import templates
