"""
Pages Blueprint - Public portfolio pages
Handles: Home, projects, blog listing and posts, SEO files
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
