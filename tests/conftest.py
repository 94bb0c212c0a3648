"""Shared pytest fixtures for the application tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from config import Config  # noqa: E402
from mailing import MemoryMailer  # noqa: E402
from models import db  # noqa: E402
from models.role import Role  # noqa: E402
from models.user import User  # noqa: E402
from services.auth import issue_session_token  # noqa: E402
from utils.access import Identity  # noqa: E402


class _BaseTestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    JWT_SECRET_KEY = "test-jwt-secret-key-with-enough-length-for-hs256"
    ORG_EMAIL_DOMAIN = "racing.agh.edu.pl"
    ACTIVATION_BASE_URL = "http://testserver/api/auth/accountVerification/"
    VERIFICATION_TOKEN_TTL_DAYS = 7
    VERIFICATION_TOKEN_ENFORCE_EXPIRY = False
    MAIL_BACKEND = "memory"
    CORS_ORIGINS = "*"


@pytest.fixture()
def app() -> Flask:
    """Create a Flask application instance for tests."""

    class TestConfig(_BaseTestConfig):
        pass

    application = create_app(TestConfig)

    with application.app_context():
        db.create_all()

    yield application

    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Return a test client for the Flask app."""

    return app.test_client()


@pytest.fixture()
def mailer(app: Flask) -> MemoryMailer:
    """Return the in-memory mailer collecting sent messages."""

    return app.extensions["mailer"]


def create_user(
    email: str,
    password: str = "pw123456",
    roles: tuple[str, ...] = ("NEWBIE",),
    *,
    enabled: bool = True,
) -> User:
    """Persist a user directly. Must run inside an app context."""

    user = User(name="Jan", surname="Kowalski", email=email, enabled=enabled)
    user.set_password(password)
    granted = [Role.get_or_create(name) for name in roles]
    for role in granted:
        user.grant_role(role)
    db.session.add(user)
    db.session.commit()
    return user


def bearer_for(app: Flask, email: str, roles: tuple[str, ...] = ("NEWBIE",)) -> dict[str, str]:
    """Create a user and return Authorization headers carrying their JWT."""

    with app.app_context():
        user = create_user(email, roles=roles)
        token = issue_session_token(Identity.from_user(user))
    return {"Authorization": f"Bearer {token}"}
