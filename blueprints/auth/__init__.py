"""
Auth Blueprint - Authentication and authorization
Handles: Login page, login/logout API, auth cookie
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__, url_prefix='')

from . import routes
