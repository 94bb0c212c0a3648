"""SMTP mail backend."""

from __future__ import annotations

import logging
import smtplib
from email.message import EmailMessage

from .abstract_mailer import AbstractMailer, MailDeliveryError, NotificationEmail

logger = logging.getLogger(__name__)


class SmtpMailer(AbstractMailer):
    """Send messages synchronously through an SMTP relay."""

    def __init__(
        self,
        host: str,
        port: int = 25,
        *,
        username: str | None = None,
        password: str | None = None,
        use_tls: bool = False,
        sender: str | None = None,
        timeout: float = 10.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.sender = sender or username or "noreply@localhost"
        self.timeout = timeout

    def build_message(self, message: NotificationEmail) -> EmailMessage:
        """Convert a notification into a MIME message ready for sending."""

        msg = EmailMessage()
        msg["Subject"] = message.subject
        msg["From"] = self.sender
        msg["To"] = message.recipient
        msg.set_content(message.body)
        return msg

    def send(self, message: NotificationEmail) -> None:
        msg = self.build_message(message)
        logger.info("Sending '%s' to %s via %s:%s", message.subject, message.recipient, self.host, self.port)
        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
                if self.use_tls:
                    server.starttls()
                if self.username and self.password:
                    server.login(self.username, self.password)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as exc:
            raise MailDeliveryError(
                f"Could not send mail to {message.recipient}: {exc}"
            ) from exc
