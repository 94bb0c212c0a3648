"""Role model and the user/role association table."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from . import db


ROLE_NAMES = ("NEWBIE", "USER", "MODERATOR", "ADMIN")
DEFAULT_ROLE = "NEWBIE"


user_roles = db.Table(
    "user_roles",
    db.Column("user_id", db.Integer, db.ForeignKey("users.id"), primary_key=True),
    db.Column("role_id", db.Integer, db.ForeignKey("roles.id"), primary_key=True),
)


class Role(db.Model):
    """A named permission tier that can be granted to users."""

    __tablename__ = "roles"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(32), unique=True, nullable=False)

    @classmethod
    def get_or_create(cls, name: str) -> "Role":
        """Return the role called ``name``, inserting it when missing.

        The insert runs inside a savepoint so a concurrent insert of the same
        name falls back to reading the winner's row.
        """

        if name not in ROLE_NAMES:
            raise ValueError(f"Unknown role: {name}")

        role = cls.query.filter_by(name=name).first()
        if role is not None:
            return role

        try:
            with db.session.begin_nested():
                role = cls(name=name)
                db.session.add(role)
        except IntegrityError:
            role = cls.query.filter_by(name=name).one()
        return role

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<Role {self.name}>"


def seed_roles() -> list[Role]:
    """Make sure every known role exists and commit them."""

    roles = [Role.get_or_create(name) for name in ROLE_NAMES]
    db.session.commit()
    return roles
