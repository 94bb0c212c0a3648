"""Seed the role table and an administrator user.

Run from the repository root with ``python -m scripts.seed_admin``.
"""

import os

from app import create_app
from models import db
from models.role import Role, seed_roles
from models.user import User

ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@racing.agh.edu.pl")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "AdminPass123")


def main() -> None:
    app = create_app()
    with app.app_context():
        seed_roles()

        admin = User.query.filter_by(email=ADMIN_EMAIL).first()
        if admin is None:
            admin = User(name="Admin", surname="Racing", email=ADMIN_EMAIL)
            db.session.add(admin)
            action = "created"
        else:
            action = "updated"
        admin.enabled = True
        admin.set_password(ADMIN_PASSWORD)
        admin.grant_role(Role.get_or_create("ADMIN"))
        db.session.commit()
        print(f"Admin user {action}: {ADMIN_EMAIL}")


if __name__ == "__main__":
    main()
