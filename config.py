import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-change-me')
    ADMIN_API_KEY = os.getenv('ADMIN_API_KEY')
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'postgresql://localhost/daily_blog')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {'pool_pre_ping': True, 'pool_size': 5}

    # Identity tokens issued by the sign-in provider
    IDENTITY_TOKEN_MAX_AGE = int(os.getenv('IDENTITY_TOKEN_MAX_AGE', str(7 * 24 * 3600)))

    # Listing
    BLOG_TITLE = os.getenv('BLOG_TITLE', 'Daily Blog')
    SUMMARY_MAX_LENGTH = int(os.getenv('SUMMARY_MAX_LENGTH', '300'))
    POSTS_PER_PAGE = int(os.getenv('POSTS_PER_PAGE', '10'))

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    ADMIN_API_KEY = 'test-admin-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}  # SQLite doesn't support pool_size
    IDENTITY_TOKEN_MAX_AGE = 3600
    SUMMARY_MAX_LENGTH = 300
    POSTS_PER_PAGE = 10
