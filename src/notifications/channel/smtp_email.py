"""SMTP email adapter."""

import smtplib
from email.message import EmailMessage
from email.utils import formataddr, make_msgid

from notifications.channel.email_port import EmailPort
from shared.utils.logging import get_logger

logger = get_logger(__name__)


class SmtpEmailAdapter(EmailPort):
    """Sends mail through an SMTP relay, upgrading with STARTTLS when enabled."""

    def __init__(
        self,
        host: str,
        port: int = 587,
        username: str | None = None,
        password: str | None = None,
        from_email: str = "no-reply@smart-inventory.local",
        from_name: str = "Smart Inventory Management System",
        use_tls: bool = True,
        timeout: float = 10.0,
        smtp_factory=smtplib.SMTP,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.from_email = from_email
        self.from_name = from_name
        self.use_tls = use_tls
        self.timeout = timeout
        self._smtp_factory = smtp_factory

    @classmethod
    def from_settings(cls, settings) -> "SmtpEmailAdapter":
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_username,
            password=settings.smtp_password,
            from_email=settings.smtp_from_email,
            from_name=settings.smtp_from_name,
            use_tls=settings.smtp_use_tls,
        )

    def _build_message(self, to: str, subject: str, body: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = formataddr((self.from_name, self.from_email))
        message["To"] = to
        message["Subject"] = subject
        message["Message-ID"] = make_msgid()
        message.set_content(body)
        return message

    def send(self, to: str, subject: str, body: str) -> dict:
        message = self._build_message(to, subject, body)
        try:
            with self._smtp_factory(self.host, self.port, timeout=self.timeout) as client:
                if self.use_tls:
                    client.starttls()
                if self.username and self.password:
                    client.login(self.username, self.password)
                client.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error("smtp_send_failed", to=to, host=self.host, error=str(exc))
            return {"message_id": None, "status": "failed", "error": str(exc)}

        logger.info("smtp_send_succeeded", to=to, host=self.host)
        return {"message_id": message["Message-ID"], "status": "sent"}
