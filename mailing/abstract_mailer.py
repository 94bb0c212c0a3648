"""Mail abstraction layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class MailDeliveryError(RuntimeError):
    """Raised when a backend could not hand a message over for delivery."""


@dataclass(frozen=True)
class NotificationEmail:
    """A plain-text message addressed to a single recipient."""

    subject: str
    recipient: str
    body: str


class AbstractMailer(ABC):
    """Interface for mail backends."""

    @abstractmethod
    def send(self, message: NotificationEmail) -> None:
        """Deliver ``message`` or raise :class:`MailDeliveryError`."""
