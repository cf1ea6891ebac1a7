import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ('1', 'true', 'yes')


class Config:
    # Provide a safe development fallback to avoid 500s when SECRET_KEY is missing.
    SECRET_KEY = os.getenv('SECRET_KEY') or 'dev-secret-key-change-me'
    DATABASE_URL = os.getenv('DATABASE_URL')
    # Default backing store is an in-memory database that lives as long as the process.
    SQLALCHEMY_DATABASE_URI = DATABASE_URL or 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    MAX_CONTENT_LENGTH = 1024 * 1024
    JSON_SORT_KEYS = False

    # Reload the demo data set when the app starts
    SEED_ON_START = _flag('SEED_ON_START', 'true')

    # Built-in administrator account (no database record, id 0)
    ADMIN_EMAIL = os.getenv('ADMIN_EMAIL', 'admin@kptciedc.edu')
    ADMIN_PASSWORD = os.getenv('ADMIN_PASSWORD', 'admin123')
    ADMIN_NAME = os.getenv('ADMIN_NAME', 'Admin User')
    ADMIN_DEPARTMENT = os.getenv('ADMIN_DEPARTMENT', 'Administration')

    PING_MESSAGE = os.getenv('PING_MESSAGE', 'ping')
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    RATELIMIT_ENABLED = _flag('RATELIMIT_ENABLED', 'true')
    RATELIMIT_STORAGE_URI = os.getenv('RATELIMIT_STORAGE_URI', 'memory://')
    AUTH_RATE_LIMIT = os.getenv('AUTH_RATE_LIMIT', '20 per minute')


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SEED_ON_START = True
    RATELIMIT_ENABLED = False
    SECRET_KEY = 'test-secret-key'
