"""Email channel port: what dispatch needs from a mail-sending collaborator."""

from abc import ABC, abstractmethod


class EmailPort(ABC):
    """Plain-text mail delivery.

    Adapters report delivery problems through the returned dict instead of
    raising: ``{"status": "sent", "message_id": ...}`` on success and
    ``{"status": "failed", "message_id": None, "error": ...}`` otherwise.
    Dispatch treats anything but ``"sent"`` as a failed notification.
    """

    @abstractmethod
    def send(self, to: str, subject: str, body: str) -> dict:
        """Deliver ``body`` to a single recipient."""
