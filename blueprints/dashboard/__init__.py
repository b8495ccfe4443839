"""
Dashboard Blueprint - Admin content management
Handles: Overview stats and CRUD pages for projects, blogs and experiences
"""

from flask import Blueprint

dashboard_bp = Blueprint('dashboard', __name__, url_prefix='/dashboard')

from . import routes
