"""Registration, account activation and login.

Signup commits the user together with the default role first. The activation
token and the email are produced afterwards, so a failure while mailing leaves
a disabled account behind that can still be activated with its stored token.
"""

from __future__ import annotations

from flask import current_app
from flask_jwt_extended import create_access_token
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import (
    BadRequest,
    Conflict,
    NotFound,
    ServiceUnavailable,
    Unauthorized,
)
from werkzeug.security import check_password_hash, generate_password_hash

from mailing import AbstractMailer, MailDeliveryError, NotificationEmail
from models import db
from models.role import DEFAULT_ROLE, Role
from models.user import User
from models.verification_token import VerificationToken
from utils.access import Identity

ACTIVATION_SUBJECT = "Please Activate Your Account"

# Checked against unknown emails so a failed login costs the same either way.
_DUMMY_HASH = generate_password_hash("cmodel-timing-dummy")


class EmailDomainError(BadRequest):
    """Signup email is outside the team domain."""


class EmailTakenError(Conflict):
    """An account with this email already exists."""


class TokenNotFoundError(NotFound):
    """No verification token with the given value."""


class TokenExpiredError(BadRequest):
    """Verification token is past its expiry date."""


class UserNotFoundError(NotFound):
    """The account a token points at is gone."""


class InvalidCredentialsError(Unauthorized):
    """Email/password pair did not match a stored account."""


class NotificationError(ServiceUnavailable):
    """Activation email could not be handed to the mail backend."""


def normalize_email(raw_email: str | None) -> str:
    return (raw_email or "").strip().lower()


def is_team_email(email: str, domain: str) -> bool:
    return email.endswith("@" + domain.lower())


def get_mailer() -> AbstractMailer:
    return current_app.extensions["mailer"]


def signup(name: str, surname: str, email: str, password: str) -> User:
    """Register a disabled account and mail its activation link."""

    email = normalize_email(email)
    domain = current_app.config["ORG_EMAIL_DOMAIN"]
    if not is_team_email(email, domain):
        raise EmailDomainError(f"Email doesn't belong to the racing team '@{domain}'.")

    if User.query.filter(func.lower(User.email) == email).first() is not None:
        raise EmailTakenError("A user with that email already exists.")

    user = User(name=name, surname=surname, email=email, enabled=False)
    user.set_password(password)
    user.grant_role(Role.get_or_create(DEFAULT_ROLE))
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise EmailTakenError("A user with that email already exists.") from None

    current_app.logger.info("Registered user %s (id=%s)", user.email, user.id)

    token = generate_verification_token(user)
    send_activation_email(user, token)
    return user


def generate_verification_token(user: User) -> str:
    """Persist a new activation token for ``user`` and return its value."""

    record = VerificationToken.issue(
        user, ttl_days=current_app.config["VERIFICATION_TOKEN_TTL_DAYS"]
    )
    db.session.add(record)
    db.session.commit()
    return record.token


def activation_link(token: str) -> str:
    return current_app.config["ACTIVATION_BASE_URL"] + token


def send_activation_email(user: User, token: str) -> None:
    message = NotificationEmail(
        subject=ACTIVATION_SUBJECT,
        recipient=user.email,
        body=(
            f"Hi {user.name},\n\n"
            "please click the link below to activate your account:\n"
            f"{activation_link(token)}\n"
        ),
    )
    try:
        get_mailer().send(message)
    except MailDeliveryError as exc:
        current_app.logger.exception("Activation email for %s was not sent", user.email)
        raise NotificationError(
            "Account created but the activation email could not be sent."
        ) from exc


def verify_account(token: str) -> User:
    """Enable the account that ``token`` was issued for."""

    record = VerificationToken.query.filter_by(token=token).first()
    if record is None:
        raise TokenNotFoundError("Invalid verification token.")

    if current_app.config.get("VERIFICATION_TOKEN_ENFORCE_EXPIRY") and record.is_expired():
        raise TokenExpiredError("Verification token has expired.")

    return _fetch_user_and_enable(record)


def _fetch_user_and_enable(record: VerificationToken) -> User:
    if record.user is None:
        raise UserNotFoundError("User for this token no longer exists.")

    email = record.user.email
    user = User.query.filter_by(email=email).first()
    if user is None:
        raise UserNotFoundError(f"User not found with email: {email}")

    user.enable()
    db.session.commit()
    current_app.logger.info("Activated user %s", user.email)
    return user


def authenticate(email: str, password: str) -> Identity:
    """Check the password for ``email`` and return the matching identity."""

    user = User.query.filter(func.lower(User.email) == normalize_email(email)).first()
    if user is None:
        check_password_hash(_DUMMY_HASH, password)
        valid = False
    else:
        valid = user.check_password(password)

    if not valid:
        current_app.logger.warning("Failed login attempt for %s", email)
        raise InvalidCredentialsError("Invalid email or password.")
    return Identity.from_user(user)


def issue_session_token(identity: Identity) -> str:
    return create_access_token(
        identity=str(identity.user_id),
        additional_claims={"email": identity.email, "roles": sorted(identity.roles)},
    )


def login(email: str, password: str) -> dict:
    """Authenticate and return the submitted email with a signed JWT."""

    identity = authenticate(email, password)
    return {"email": email, "token": issue_session_token(identity)}
