"""
Application configuration — environment-aware settings.

All environment variables are documented here.
"""

from __future__ import annotations

import os
from pathlib import Path

BASE_DIR = Path(__file__).parent
DATA_DIR = Path(os.environ.get("MAJORS_DATA_DIR", str(BASE_DIR / "datas")))


class BaseConfig:
    # Core Flask
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-key-change-in-production")
    WTF_CSRF_ENABLED = True

    # Session security (the session only carries the chosen locale)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"
    PERMANENT_SESSION_LIFETIME = 86400

    # Reference data
    DATA_DIR = DATA_DIR
    DEFAULT_MAJOR = os.environ.get("DEFAULT_MAJOR", "Computer Science")
    RECOMMENDATION_LIMIT = int(os.environ.get("RECOMMENDATION_LIMIT", "15"))

    # Localization
    LANGUAGES = ["en", "fa"]
    DEFAULT_LOCALE = os.environ.get("DEFAULT_LOCALE", "en")
    BABEL_DEFAULT_LOCALE = DEFAULT_LOCALE

    # Logging
    LOG_FORMAT = os.environ.get("LOG_FORMAT", "text")  # "json" or "text"
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Response compression
    COMPRESS_MIMETYPES = [
        "text/html", "text/css", "text/javascript",
        "application/json", "application/javascript",
    ]
    COMPRESS_MIN_SIZE = 500

    # Rate limiting (in-memory unless a storage URI is given)
    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URI = os.environ.get("RATELIMIT_STORAGE_URI", "") or "memory://"
    QUIZ_SUBMIT_LIMIT = os.environ.get("QUIZ_SUBMIT_LIMIT", "30 per minute")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    LOG_FORMAT = os.environ.get("LOG_FORMAT", "text")


class ProductionConfig(BaseConfig):
    DEBUG = False
    LOG_FORMAT = os.environ.get("LOG_FORMAT", "json")
    SESSION_COOKIE_SECURE = True

    @classmethod
    def validate(cls):
        """Fail fast on missing or insecure configuration in production."""
        errors: list[str] = []

        if cls.SECRET_KEY in ("dev-key-change-in-production", ""):
            errors.append("SECRET_KEY must be set to a secure value in production.")

        if not Path(cls.DATA_DIR).is_dir():
            errors.append(f"DATA_DIR {cls.DATA_DIR} does not exist.")

        if cls.RECOMMENDATION_LIMIT < 1:
            errors.append("RECOMMENDATION_LIMIT must be a positive integer.")

        if errors:
            raise RuntimeError(
                "Production configuration errors:\n" + "\n".join(f"  - {e}" for e in errors)
            )


class TestingConfig(BaseConfig):
    TESTING = True
    WTF_CSRF_ENABLED = False
    RATELIMIT_ENABLED = False


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
