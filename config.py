# /config.py
import os
import secrets
from datetime import timedelta
import logging
from logging.handlers import RotatingFileHandler

class Config:
    """Base configuration shared by every environment"""
    # Security
    SECRET_KEY = os.environ.get('SECRET_KEY') or secrets.token_hex(32)
    JWT_SECRET_KEY = os.environ.get('JWT_SECRET_KEY') or secrets.token_hex(32)

    # Session tokens are stateless; only access tokens are issued
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=int(os.environ.get('JWT_EXPIRE_HOURS', 24)))
    JWT_TOKEN_LOCATION = ['headers']
    JWT_ERROR_MESSAGE_KEY = 'error'

    # Database
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///hospital.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
    }

    # Password hashing
    BCRYPT_LOG_ROUNDS = 12

    # Rate Limiting
    RATELIMIT_STORAGE_URI = os.environ.get('REDIS_URL') or 'memory://'
    RATELIMIT_HEADERS_ENABLED = True

    # CORS
    ALLOWED_ORIGINS = [o.strip() for o in os.environ.get('ALLOWED_ORIGINS', '*').split(',') if o.strip()]

    LOG_DIR = os.environ.get('LOG_DIR', 'logs')

    @staticmethod
    def init_app(app):
        """Configure application and audit logging"""
        log_dir = app.config['LOG_DIR']
        write_files = not app.debug and not app.testing

        if write_files and not os.path.exists(log_dir):
            os.mkdir(log_dir)

        # Main application log with rotation
        if write_files:
            file_handler = RotatingFileHandler(os.path.join(log_dir, 'app.log'), maxBytes=10240000, backupCount=10)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
            ))
            file_handler.setLevel(logging.INFO)
            app.logger.addHandler(file_handler)
            app.logger.setLevel(logging.INFO)
            app.logger.info('Hospital API startup')

        # Audit trail of every API call
        audit_logger = logging.getLogger('HOSPITAL_AUDIT')
        if write_files and not audit_logger.handlers:
            audit_handler = RotatingFileHandler(os.path.join(log_dir, 'audit.log'), maxBytes=10240000, backupCount=20)
            audit_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(message)s'
            ))
            audit_logger.addHandler(audit_handler)
        audit_logger.setLevel(logging.INFO)
        audit_logger.propagate = False  # Prevent duplicate logs

        app.audit_logger = audit_logger

class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.environ.get('DEV_DATABASE_URL') or 'sqlite:///hospital-dev.db'

    @staticmethod
    def init_app(app):
        Config.init_app(app)

        if not app.logger.handlers:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(logging.Formatter(
                '%(asctime)s %(levelname)s: %(message)s'
            ))
            app.logger.addHandler(console_handler)
        app.logger.setLevel(logging.DEBUG)

class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    SECRET_KEY = 'testing-secret-key'
    JWT_SECRET_KEY = 'testing-jwt-secret-key-of-sufficient-length'
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=1)
    BCRYPT_LOG_ROUNDS = 4
    RATELIMIT_ENABLED = False

    @staticmethod
    def init_app(app):
        Config.init_app(app)

class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False

    @classmethod
    def init_app(cls, app):
        Config.init_app(app)

        app.logger.info('Hospital API production startup')

        if not os.environ.get('JWT_SECRET_KEY'):
            app.logger.error('JWT_SECRET_KEY not set in production!')
            raise ValueError('JWT_SECRET_KEY must be set in production')

        if not os.environ.get('DATABASE_URL'):
            app.logger.error('DATABASE_URL not set in production!')
            raise ValueError('DATABASE_URL must be set in production')

# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
