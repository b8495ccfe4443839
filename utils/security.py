"""
Security Module - Admin credentials and the signed auth token
"""

from flask import request, current_app
from flask_login import UserMixin
from itsdangerous import BadSignature, SignatureExpired, TimestampSigner
from werkzeug.security import generate_password_hash, check_password_hash


class AdminUser(UserMixin):
    """The single site operator"""

    def __init__(self, username):
        self.id = username
        self.username = username


def get_client_ip():
    """Get real client IP address"""
    return request.environ.get('HTTP_X_FORWARDED_FOR',
                              request.environ.get('REMOTE_ADDR', 'unknown'))


def get_admin_credentials():
    """Admin username and password hash from configuration"""
    username = current_app.config.get('ADMIN_USERNAME')
    password_hash = current_app.config.get('ADMIN_PASSWORD_HASH')
    if not password_hash:
        password = current_app.config.get('ADMIN_PASSWORD')
        password_hash = generate_password_hash(password) if password else None
    return {
        'username': username,
        'password_hash': password_hash
    }


def verify_password(password, password_hash):
    """Verify password against hash"""
    return check_password_hash(password_hash, password)


def authenticate(username, password):
    """Return an AdminUser if the credentials match the configured admin"""
    credentials = get_admin_credentials()
    if not credentials['username'] or not credentials['password_hash']:
        current_app.logger.error("Admin credentials are not configured")
        return None
    if username != credentials['username']:
        return None
    if not verify_password(password, credentials['password_hash']):
        return None
    return AdminUser(username)


def _signer():
    return TimestampSigner(current_app.config['SECRET_KEY'], salt='admin-token')


def create_token(username):
    """Signed, timestamped token carrying the admin username"""
    return _signer().sign(username).decode()


def verify_token(token):
    """
    Validate a token from the auth cookie.

    Returns:
        AdminUser | None: The admin for a valid, unexpired token
    """
    if not token:
        return None
    max_age = int(current_app.config['AUTH_TOKEN_MAX_AGE'].total_seconds())
    try:
        username = _signer().unsign(token, max_age=max_age).decode()
    except SignatureExpired:
        current_app.logger.info("Rejected expired auth token")
        return None
    except BadSignature:
        current_app.logger.warning(f"Rejected tampered auth token from {get_client_ip()}")
        return None

    if username != current_app.config.get('ADMIN_USERNAME'):
        return None
    return AdminUser(username)


def load_user_from_request(req):
    """Flask-Login request loader: resolve the admin from the auth cookie"""
    return verify_token(req.cookies.get(current_app.config['AUTH_COOKIE_NAME']))


def set_auth_cookie(response, token):
    """Attach the auth token cookie to a response"""
    response.set_cookie(
        current_app.config['AUTH_COOKIE_NAME'],
        token,
        max_age=int(current_app.config['AUTH_TOKEN_MAX_AGE'].total_seconds()),
        httponly=True,
        secure=current_app.config.get('AUTH_COOKIE_SECURE', False),
        samesite='Lax',
        path='/'
    )
    return response


def clear_auth_cookie(response):
    response.delete_cookie(current_app.config['AUTH_COOKIE_NAME'], path='/')
    return response


__all__ = [
    'AdminUser',
    'get_client_ip',
    'get_admin_credentials',
    'verify_password',
    'authenticate',
    'create_token',
    'verify_token',
    'load_user_from_request',
    'set_auth_cookie',
    'clear_auth_cookie'
]
