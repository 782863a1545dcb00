import os
from datetime import timedelta

class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Database Settings
    _database_url = os.environ.get('DATABASE_URL')
    if not _database_url:
        # Fall back to individual PG* variables when DATABASE_URL is missing
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

    # API Settings
    API_PREFIX = os.environ.get('API_PREFIX', '/api')
    DEFAULT_PAGE_SIZE = 10
    MAX_PAGE_SIZE = 100

    # Blog Settings
    BLOG_CATEGORIES = ['Microsoft 365', 'Automation', 'Security', 'Learning']

    # Admin Settings (used by `flask create-admin`)
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')
    ADMIN_NAME = os.environ.get('ADMIN_NAME', 'Admin')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SECRET_KEY = 'testing-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    # For in-memory SQLite during tests, keep engine options empty to avoid
    # passing pool settings to SQLite's StaticPool.
    SQLALCHEMY_ENGINE_OPTIONS = {}


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
