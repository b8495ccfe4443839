"""
Portfolio - Main Application Entry Point
Application Factory Pattern with one blueprint per area

This module initializes the Flask application with all necessary extensions,
configurations, and middleware. All actual route handling is delegated to blueprints.
"""

import os
from datetime import datetime
from flask import Flask, render_template, request, jsonify
from flask_login import current_user
from config import get_config
from extensions import db, login_manager
from utils.helpers import read_time
from utils.security import load_user_from_request

# Import all blueprints
from blueprints.auth import auth_bp
from blueprints.api import api_bp
from blueprints.pages import pages_bp
from blueprints.dashboard import dashboard_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)

    # JSON Settings
    app.json.ensure_ascii = False
    app.json.sort_keys = False

    # Initialize extensions with app
    initialize_extensions(app)

    # Register Jinja filters
    app.jinja_env.filters['read_time'] = read_time
    app.logger.info('✓ Registered Jinja filter: read_time')

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio application is running'}, 200

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.request_loader(load_user_from_request)

    # Create tables if they don't exist
    with app.app_context():
        try:
            from sqlalchemy import text
            import models  # noqa: F401
            db.create_all()
            # Verify connection
            db.session.execute(text('SELECT 1'))
            app.logger.info("✓ Database initialized successfully")
        except Exception as e:
            app.logger.error(f"✗ Database initialization failed: {str(e)}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(auth_bp)
    app.register_blueprint(api_bp)
    app.register_blueprint(pages_bp)
    app.register_blueprint(dashboard_bp)


def _wants_json():
    return request.path.startswith('/api/')


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(400)
    def bad_request(e):
        if _wants_json():
            return jsonify({'error': 'Bad request'}), 400
        return render_template('400.html'), 400

    @app.errorhandler(404)
    def page_not_found(e):
        if _wants_json():
            return jsonify({'error': 'Not found'}), 404
        return render_template('404.html'), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        if _wants_json():
            return jsonify({'error': 'Method not allowed'}), 405
        return e

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        db.session.rollback()
        if _wants_json():
            return jsonify({'error': 'Internal server error'}), 500
        return render_template('500.html'), 500


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        """Values every template can rely on"""
        return {
            'is_admin': current_user.is_authenticated,
            'site_owner': app.config.get('SITE_OWNER', ''),
            'current_year': datetime.now().year,
        }

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'SAMEORIGIN'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
        return response


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
