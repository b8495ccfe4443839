"""
Auth Routes - Admin login and logout
"""

from flask import render_template, redirect, url_for, request, flash, jsonify, current_app
from flask_login import current_user
from utils.security import (
    authenticate, create_token, set_auth_cookie, clear_auth_cookie, get_client_ip
)
from . import auth_bp


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Admin login form"""
    if current_user.is_authenticated:
        return redirect(url_for('dashboard.index'))

    if request.method == 'POST':
        username = request.form.get('username', '').strip()
        password = request.form.get('password', '')

        if not username or not password:
            flash('Username and password are required.', 'error')
            return render_template('auth/login.html'), 400

        admin = authenticate(username, password)
        if admin:
            current_app.logger.info(f"Admin login from {get_client_ip()}: {username}")
            flash('Login successful!', 'success')
            response = redirect(url_for('dashboard.index'))
            return set_auth_cookie(response, create_token(admin.username))

        current_app.logger.warning(f"Failed login from {get_client_ip()}: {username}")
        flash('Invalid credentials. Please try again.', 'error')
        return render_template('auth/login.html'), 401

    return render_template('auth/login.html')


@auth_bp.route('/logout')
def logout():
    """Clear the auth cookie"""
    flash('Logged out successfully', 'success')
    return clear_auth_cookie(redirect(url_for('auth.login')))


@auth_bp.route('/api/auth/login', methods=['POST'])
def api_login():
    """JSON login: sets the auth cookie on success"""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({'error': 'Username and password are required'}), 400

    username = payload.get('username')
    password = payload.get('password')
    if not username or not password:
        return jsonify({'error': 'Username and password are required'}), 400

    admin = authenticate(username, password)
    if not admin:
        current_app.logger.warning(f"Failed API login from {get_client_ip()}: {username}")
        return jsonify({'error': 'Invalid credentials'}), 401

    current_app.logger.info(f"Admin API login from {get_client_ip()}: {username}")
    return set_auth_cookie(jsonify({'success': True}), create_token(admin.username))


@auth_bp.route('/api/auth/logout', methods=['POST'])
def api_logout():
    return clear_auth_cookie(jsonify({'success': True}))
