"""
API Blueprint - JSON CRUD endpoints
Handles: Projects, blogs, experiences, database maintenance
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__, url_prefix='/api')

from . import routes
