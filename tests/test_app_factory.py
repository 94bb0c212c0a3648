"""Tests for the Flask application factory."""
from __future__ import annotations

import pytest

from app import create_app
from config import Config
from mailing import MemoryMailer, SmtpMailer


def test_health_endpoint_returns_ok(client):
    """The health endpoint should respond with an OK payload."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_blueprints_registered(app):
    """Application factory should register expected blueprints."""
    assert {"auth", "content"}.issubset(set(app.blueprints.keys()))


def test_request_id_is_echoed(client):
    response = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


def test_request_id_is_generated(client):
    response = client.get("/health")
    assert response.headers.get("X-Request-ID")


def test_mail_backend_selection(app):
    assert isinstance(app.extensions["mailer"], MemoryMailer)

    class SmtpConfig(Config):
        SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
        MAIL_BACKEND = "smtp"

    assert isinstance(create_app(SmtpConfig).extensions["mailer"], SmtpMailer)


def test_unknown_mail_backend_rejected():
    class BadConfig(Config):
        SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
        MAIL_BACKEND = "pigeon"

    with pytest.raises(ValueError):
        create_app(BadConfig)


def test_cors_allows_configured_origin():
    class CorsConfig(Config):
        TESTING = True
        SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
        MAIL_BACKEND = "memory"
        CORS_ORIGINS = ["https://client.example"]

    client = create_app(CorsConfig).test_client()
    response = client.get("/health", headers={"Origin": "https://client.example"})

    assert response.status_code == 200
    assert response.headers.get("Access-Control-Allow-Origin") == "https://client.example"


def test_unknown_route_returns_json_error(client):
    response = client.get("/api/nope")
    assert response.status_code == 404
    payload = response.get_json()
    assert payload["error"] == "Not Found"
    assert payload["request_id"]
