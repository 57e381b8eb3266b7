"""
Configuration settings for the CoffeeBeans journal service
"""
import os


class Config:
    """Flask application configuration"""
    
    # Flask secret key
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'
    
    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'coffeebeans.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    
    # Passwords are compared as plain strings
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or 'coffeebeans2024'
    READER_PASSWORD = os.environ.get('READER_PASSWORD') or 'reader2024'
    
    # Application settings
    MIN_USERNAME_LENGTH = 2
    SEED_DEMO_ENTRIES = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'
    CORS_ORIGINS = [o.strip() for o in (os.environ.get('CORS_ORIGINS') or '*').split(',') if o.strip()]


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    ADMIN_PASSWORD = 'admin-test-pass'
    READER_PASSWORD = 'reader-test-pass'
    SEED_DEMO_ENTRIES = False
