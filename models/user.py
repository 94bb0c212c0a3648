"""User model definition."""

from datetime import datetime

from sqlalchemy import false
from werkzeug.security import check_password_hash, generate_password_hash

from . import db
from .role import Role, user_roles


class User(db.Model):
    """A registered racing team member."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    surname = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    enabled = db.Column(
        db.Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    roles = db.relationship(
        Role,
        secondary=user_roles,
        lazy="selectin",
        backref=db.backref("users", lazy="dynamic"),
    )

    def set_password(self, password: str) -> None:
        """Hash and store the password."""

        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        """Verify a password against the stored hash."""

        return check_password_hash(self.password_hash, password)

    def enable(self) -> None:
        self.enabled = True

    def grant_role(self, role: Role) -> None:
        if role not in self.roles:
            self.roles.append(role)

    @property
    def role_names(self) -> frozenset[str]:
        return frozenset(role.name for role in self.roles)

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<User {self.email}>"
