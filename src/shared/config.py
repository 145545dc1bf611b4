"""Application settings.

Values come from environment variables prefixed with ``INVENTORY_`` (or a
``.env`` file in the working directory). ``INVENTORY_ENV`` selects the
environment overlay:
  - "test"        → protean memory provider unless overridden, fake email
  - "development" → local SQLite file, fake email unless SMTP is configured
  - "production"  → JSON logs, SMTP email when configured
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="INVENTORY_", env_file=".env", extra="ignore")

    env: str = "development"
    database_url: str | None = None
    log_level: str | None = None
    log_dir: str = "logs"

    # Admin capability: requests carrying this token in X-Admin-Token are admins
    admin_token: str | None = None
    admin_email: str | None = None

    smtp_host: str | None = None
    smtp_port: int = 587
    smtp_username: str | None = None
    smtp_password: str | None = None
    smtp_from_email: str = "no-reply@smart-inventory.local"
    smtp_from_name: str = "Smart Inventory Management System"
    smtp_use_tls: bool = True

    low_stock_alerts: bool = True

    @property
    def resolved_database_url(self) -> str:
        if self.database_url:
            return self.database_url
        if self.env == "test":
            return "memory://"
        return "sqlite:///./inventory.db"

    @property
    def is_production(self) -> bool:
        return self.env in ("production", "staging")


@lru_cache
def get_settings() -> Settings:
    return Settings()


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
