"""Application configuration module."""

import os
from datetime import timedelta


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y"}


class Config:
    """Base configuration for the Flask application."""

    # Core
    SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(
        seconds=int(os.getenv("JWT_EXPIRATION_SECONDS", "86400"))
    )
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///cmodel.db")
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # CORS
    _raw_origins = os.getenv("ORIGINS", "*")
    if _raw_origins.strip() == "*":
        CORS_ORIGINS = "*"
    else:
        CORS_ORIGINS = [o.strip() for o in _raw_origins.split(",") if o.strip()]

    # Registration
    ORG_EMAIL_DOMAIN = os.getenv("ORG_EMAIL_DOMAIN", "racing.agh.edu.pl")
    ACTIVATION_BASE_URL = os.getenv(
        "ACTIVATION_BASE_URL",
        "http://localhost:8081/api/auth/accountVerification/",
    )
    VERIFICATION_TOKEN_TTL_DAYS = int(os.getenv("VERIFICATION_TOKEN_TTL_DAYS", "7"))
    # Expiry is stored on every token but only checked when this is enabled.
    VERIFICATION_TOKEN_ENFORCE_EXPIRY = _env_bool("VERIFICATION_TOKEN_ENFORCE_EXPIRY")

    # Mail
    MAIL_BACKEND = os.getenv("MAIL_BACKEND", "smtp")
    MAIL_SERVER = os.getenv("MAIL_SERVER", "localhost")
    MAIL_PORT = int(os.getenv("MAIL_PORT", "25"))
    MAIL_USERNAME = os.getenv("MAIL_USERNAME")
    MAIL_PASSWORD = os.getenv("MAIL_PASSWORD")
    MAIL_USE_TLS = _env_bool("MAIL_USE_TLS")
    MAIL_DEFAULT_SENDER = os.getenv("MAIL_DEFAULT_SENDER", "noreply@racing.agh.edu.pl")
    MAIL_TIMEOUT = float(os.getenv("MAIL_TIMEOUT", "10"))
