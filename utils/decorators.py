"""
Decorators Module - Authentication guards for pages and API routes
"""

from functools import wraps
from flask import redirect, url_for, flash, jsonify
from flask_login import current_user


def login_required(f):
    """Decorator to require admin login on dashboard pages"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            flash('Please login to access this page.', 'error')
            return redirect(url_for('auth.login'))
        return f(*args, **kwargs)
    return decorated_function


def api_login_required(f):
    """Decorator to reject unauthenticated API calls with 401"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            return jsonify({'error': 'Unauthorized'}), 401
        return f(*args, **kwargs)
    return decorated_function
