"""Email channel registry: the pluggable mail-sending collaborator.

Uses the fake adapter by default; the SMTP adapter is selected when an SMTP
host is configured. Tests swap adapters with ``set_email_adapter``.
"""

from notifications.channel.email_port import EmailPort

_current_adapter: EmailPort | None = None


def _build_default_adapter() -> EmailPort:
    from shared.config import get_settings

    settings = get_settings()
    if settings.smtp_host and settings.env != "test":
        from notifications.channel.smtp_email import SmtpEmailAdapter

        return SmtpEmailAdapter.from_settings(settings)

    from notifications.channel.fake_email import FakeEmailAdapter

    return FakeEmailAdapter()


def get_email_adapter() -> EmailPort:
    """Return the configured email adapter (singleton)."""
    global _current_adapter
    if _current_adapter is None:
        _current_adapter = _build_default_adapter()
    return _current_adapter


def set_email_adapter(adapter: EmailPort) -> None:
    """Override the active email adapter (useful for tests)."""
    global _current_adapter
    _current_adapter = adapter


def reset_email_adapter() -> None:
    """Reset to the default adapter on next use."""
    global _current_adapter
    _current_adapter = None
