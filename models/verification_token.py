"""Verification token model for account activation."""

import uuid
from datetime import datetime, timedelta

from . import db


class VerificationToken(db.Model):
    """Opaque token mailed to a new user to prove control of the address."""

    __tablename__ = "tokens"

    id = db.Column(db.Integer, primary_key=True)
    token = db.Column(db.String(64), unique=True, nullable=False, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    expiry_date = db.Column(db.DateTime, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    user = db.relationship(
        "User",
        backref=db.backref("verification_tokens", lazy="dynamic"),
    )

    @classmethod
    def issue(cls, user, ttl_days: int, now=None) -> "VerificationToken":
        """Build a fresh random token for ``user`` expiring after ``ttl_days``."""

        now = now or datetime.utcnow()
        return cls(
            token=str(uuid.uuid4()),
            user=user,
            expiry_date=now + timedelta(days=ttl_days),
        )

    def is_expired(self, now=None) -> bool:
        """Return True once the expiry timestamp has passed."""

        now = now or datetime.utcnow()
        return self.expiry_date < now

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<VerificationToken {self.token}>"
