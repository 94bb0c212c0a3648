"""Role based access checks for JWT protected views."""

from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
from typing import Callable, Iterable

from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request
from werkzeug.exceptions import Forbidden, Unauthorized

from models import db
from models.role import ROLE_NAMES
from models.user import User


@dataclass(frozen=True)
class Identity:
    """The authenticated caller, handed explicitly to whatever needs it."""

    user_id: int
    email: str
    roles: frozenset[str]

    @classmethod
    def from_user(cls, user: User) -> "Identity":
        return cls(user_id=user.id, email=user.email, roles=user.role_names)

    def has_any_role(self, roles: Iterable[str]) -> bool:
        return not self.roles.isdisjoint(roles)


def load_identity() -> Identity:
    """Verify the bearer token on the current request and return its caller."""

    verify_jwt_in_request()
    subject = get_jwt_identity()
    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        raise Unauthorized("Token subject is not a user id.") from None

    user = db.session.get(User, user_id)
    if user is None:
        raise Unauthorized("User for this token no longer exists.")
    return Identity.from_user(user)


def roles_required(*roles: str) -> Callable:
    """Only let callers holding at least one of ``roles`` reach the view.

    The view receives the caller as the ``identity`` keyword argument.
    """

    unknown = set(roles) - set(ROLE_NAMES)
    if not roles or unknown:
        raise ValueError(f"Invalid role list: {roles!r}")

    def decorator(view: Callable) -> Callable:
        @wraps(view)
        def wrapper(*args, **kwargs):
            identity = load_identity()
            if not identity.has_any_role(roles):
                raise Forbidden(
                    "One of the following roles is required: {}.".format(", ".join(roles))
                )
            return view(*args, identity=identity, **kwargs)

        return wrapper

    return decorator
