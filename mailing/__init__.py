"""Outbound mail backends."""

from .abstract_mailer import AbstractMailer, MailDeliveryError, NotificationEmail
from .memory_mailer import MemoryMailer
from .smtp_mailer import SmtpMailer

__all__ = [
    "AbstractMailer",
    "MailDeliveryError",
    "MemoryMailer",
    "NotificationEmail",
    "SmtpMailer",
    "build_mailer",
]


def build_mailer(config) -> AbstractMailer:
    """Return the mailer selected by ``MAIL_BACKEND`` in the given config."""

    backend = (config.get("MAIL_BACKEND") or "smtp").strip().lower()
    if backend == "memory":
        return MemoryMailer()
    if backend == "smtp":
        return SmtpMailer(
            host=config.get("MAIL_SERVER", "localhost"),
            port=int(config.get("MAIL_PORT", 25)),
            username=config.get("MAIL_USERNAME"),
            password=config.get("MAIL_PASSWORD"),
            use_tls=bool(config.get("MAIL_USE_TLS", False)),
            sender=config.get("MAIL_DEFAULT_SENDER"),
            timeout=float(config.get("MAIL_TIMEOUT", 10)),
        )
    raise ValueError(f"Unsupported MAIL_BACKEND: {backend}")
