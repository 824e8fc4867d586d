import os
import logging
from typing import Mapping, Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Checked in order; the first non-empty value wins
API_KEY_ENV_VARS = ("API_KEY", "VITE_GEMINI_API_KEY", "GEMINI_API_KEY")


def resolve_api_key(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the first non-empty Gemini API key from the known sources, or None."""
    if environ is None:
        environ = os.environ
    for name in API_KEY_ENV_VARS:
        value = environ.get(name)
        if value:
            return value
    return None


def is_gemini_available(api_key: Optional[str]) -> bool:
    return bool(api_key)


class Config:
    """Base configuration class"""

    # Flask settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    MAX_CONTENT_LENGTH = 25 * 1024 * 1024  # 25MB per request

    # Upload settings
    ALLOWED_MIME_TYPES = {
        "image/jpeg", "image/png", "image/webp", "image/heic", "application/pdf",
    }

    # Gemini settings
    GEMINI_API_KEY = resolve_api_key()
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-3-flash-preview")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    @staticmethod
    def init_app(app):
        """Initialize app with configuration"""
        logging.basicConfig(
            level=app.config['LOG_LEVEL'],
            format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        )


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    GEMINI_API_KEY = None


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
