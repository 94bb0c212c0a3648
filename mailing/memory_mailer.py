"""In-process mail backend that keeps sent messages in an outbox."""

from __future__ import annotations

from .abstract_mailer import AbstractMailer, NotificationEmail


class MemoryMailer(AbstractMailer):
    """Collect messages instead of sending them. Used for tests and local runs."""

    def __init__(self) -> None:
        self.outbox: list[NotificationEmail] = []

    def send(self, message: NotificationEmail) -> None:
        self.outbox.append(message)
