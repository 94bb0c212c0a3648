"""Database initialization and model exports."""

from flask_sqlalchemy import SQLAlchemy


db = SQLAlchemy()

# Import models to register them with SQLAlchemy metadata.
from .role import Role, user_roles  # noqa: E402,F401
from .user import User  # noqa: E402,F401
from .verification_token import VerificationToken  # noqa: E402,F401

__all__ = [
    "db",
    "Role",
    "User",
    "VerificationToken",
    "user_roles",
]
