# -*- coding: utf-8 -*-
"""
Configuration module - settings are loaded from environment variables
"""
import os
from dotenv import load_dotenv

# Load .env if present
load_dotenv()

DEFAULT_SECRET_KEY = 'dev-secret-key-change-in-production'


class Config:
    """Base configuration"""

    SECRET_KEY = os.getenv('SECRET_KEY', DEFAULT_SECRET_KEY)
    DEBUG = False
    TESTING = False

    # Server
    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = int(os.getenv('PORT', '5001'))

    # Request body limit, SQL schemas are small
    MAX_CONTENT_LENGTH = int(os.getenv('MAX_CONTENT_LENGTH', str(1024 * 1024)))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')

    @classmethod
    def get_flask_config(cls):
        """Settings passed to app.config"""
        return {
            'SECRET_KEY': cls.SECRET_KEY,
            'DEBUG': cls.DEBUG,
            'TESTING': cls.TESTING,
            'MAX_CONTENT_LENGTH': cls.MAX_CONTENT_LENGTH
        }


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False

    @classmethod
    def validate(cls):
        """Check settings that must be overridden in production"""
        required = [
            ('SECRET_KEY', cls.SECRET_KEY, DEFAULT_SECRET_KEY),
        ]

        missing = []
        for name, value, default in required:
            if not value or value == default:
                missing.append(name)

        if missing:
            raise ValueError(f"Production configuration is missing: {', '.join(missing)}")


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    MAX_CONTENT_LENGTH = 4 * 1024


def get_config():
    """Pick the configuration class from FLASK_ENV"""
    env = os.getenv('FLASK_ENV', 'development')

    config_map = {
        'development': DevelopmentConfig,
        'production': ProductionConfig,
        'testing': TestingConfig
    }

    return config_map.get(env, DevelopmentConfig)


config = get_config()
