"""Fake email adapter: keeps outgoing mail in memory."""

from uuid import uuid4

from notifications.channel.email_port import EmailPort


class FakeEmailAdapter(EmailPort):
    """Records messages instead of sending them; used in development and tests."""

    def __init__(self):
        self.outbox: list[dict] = []
        self.fail_with: str | None = None

    def fail_next_sends(self, reason: str = "Email delivery failed") -> None:
        self.fail_with = reason

    def send(self, to: str, subject: str, body: str) -> dict:
        if self.fail_with:
            return {"message_id": None, "status": "failed", "error": self.fail_with}

        message_id = f"email-{uuid4().hex[:12]}"
        self.outbox.append(
            {
                "message_id": message_id,
                "to": to,
                "subject": subject,
                "body": body,
            }
        )
        return {"message_id": message_id, "status": "sent"}

    def messages_to(self, address: str) -> list[dict]:
        return [message for message in self.outbox if message["to"] == address]
