import os
from datetime import timedelta

class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Database Settings
    _database_url = os.environ.get('DATABASE_URL')
    if not _database_url:
        # Assemble from individual PG* variables if DATABASE_URL is missing
        pg_user = os.environ.get('PGUSER')
        pg_pass = os.environ.get('PGPASSWORD')
        pg_host = os.environ.get('PGHOST')
        pg_port = os.environ.get('PGPORT')
        pg_db = os.environ.get('PGDATABASE')
        if all([pg_user, pg_pass, pg_host, pg_port, pg_db]):
            _database_url = f"postgresql://{pg_user}:{pg_pass}@{pg_host}:{pg_port}/{pg_db}"

    if _database_url and _database_url.startswith("postgres://"):
        _database_url = _database_url.replace("postgres://", "postgresql://", 1)

    SQLALCHEMY_DATABASE_URI = _database_url or 'sqlite:///portfolio.db'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Admin Settings (single operator)
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME', 'admin')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD', 'admin123')
    ADMIN_PASSWORD_HASH = os.environ.get('ADMIN_PASSWORD_HASH')

    # Auth token cookie
    AUTH_COOKIE_NAME = 'admin-token'
    AUTH_TOKEN_MAX_AGE = timedelta(days=7)
    AUTH_COOKIE_SECURE = False

    # Site profile shown on the public pages
    SITE_OWNER = os.environ.get('SITE_OWNER', 'Aman')
    SITE_TITLE = os.environ.get('SITE_TITLE', 'Full Stack Developer & Security Enthusiast')
    CONTACT_EMAIL = os.environ.get('CONTACT_EMAIL', 'amanraj89969@gmail.com')
    TWITTER_URL = os.environ.get('TWITTER_URL', 'https://x.com/Stranzerzz')
    LINKEDIN_URL = os.environ.get('LINKEDIN_URL', 'https://www.linkedin.com/in/aman-83169b204/')
    GITHUB_URL = os.environ.get('GITHUB_URL', 'https://github.com/aman124598')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True
    AUTH_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SECRET_KEY = 'testing-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    # In-memory SQLite runs on a StaticPool, which rejects pool settings
    SQLALCHEMY_ENGINE_OPTIONS = {}
    ADMIN_USERNAME = 'admin'
    ADMIN_PASSWORD = 'admin123'
    ADMIN_PASSWORD_HASH = None


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
