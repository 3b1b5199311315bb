"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Sub-settings are built by default_factory, so each reads .env itself
_ENV_FILE: dict = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


class APISettings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(env_prefix="API_", **_ENV_FILE)

    host: str = "0.0.0.0"
    port: int = Field(default=10000, validation_alias=AliasChoices("API_PORT", "PORT"))
    debug: bool = False

    # Comma separated list of exact allowed origins
    cors_origins: str = Field(
        default="",
        validation_alias=AliasChoices("API_CORS_ORIGINS", "CORS_ORIGIN"),
    )
    # Preview deployments
    cors_origin_regex: str | None = r"https://([a-zA-Z0-9-]+\.)*vercel\.app"

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


class StorageSettings(BaseSettings):
    """Storage configuration."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_", **_ENV_FILE)

    data_dir: Path = Path("data")
    reminders_file: str = "reminders.json"
    uploads_dir: str = "uploads"
    csv_filename: str = "master.csv"

    # Upload limits
    max_upload_size: int = 50 * 1024 * 1024  # 50 MB

    @property
    def reminders_path(self) -> Path:
        return self.data_dir / self.reminders_file

    @property
    def uploads_path(self) -> Path:
        return self.data_dir / self.uploads_dir

    @property
    def csv_path(self) -> Path:
        return self.uploads_path / self.csv_filename


class MailSettings(BaseSettings):
    """Outbound mail relay configuration."""

    model_config = SettingsConfigDict(env_prefix="SMTP_", **_ENV_FILE)

    host: str = ""
    port: int = 587
    secure: bool = False  # implicit TLS, usually port 465
    user: str = ""
    password: str = Field(
        default="",
        validation_alias=AliasChoices("SMTP_PASS", "SMTP_PASSWORD"),
    )
    email_from: str = Field(default="", validation_alias=AliasChoices("EMAIL_FROM"))

    @property
    def sender(self) -> str:
        return self.email_from or self.user

    @property
    def is_configured(self) -> bool:
        return bool(self.host)


class SchedulerSettings(BaseSettings):
    """Daily reminder sweep configuration."""

    model_config = SettingsConfigDict(env_prefix="REMINDER_", **_ENV_FILE)

    enabled: bool = True
    send_hour: int = Field(default=9, ge=0, le=23)
    send_minute: int = Field(default=0, ge=0, le=59)
    timezone: str | None = None  # None = server local time

    # Operator address for "new reminder created" notices
    created_notice_to: str = ""


class ProxySettings(BaseSettings):
    """Upstream spreadsheet endpoint configuration."""

    model_config = SettingsConfigDict(env_prefix="PROXY_", **_ENV_FILE)

    target_url: str = Field(
        default="",
        validation_alias=AliasChoices("TARGET_URL", "APPS_SCRIPT_URL"),
    )
    upload_secret: str = Field(
        default="",
        validation_alias=AliasChoices("UPLOAD_SECRET", "UPLOAD_SECRET_KEY"),
    )
    timeout: float = 30.0


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(**_ENV_FILE)

    app_name: str = "Bookkeeping Reminders"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    api: APISettings = Field(default_factory=APISettings)
    storage: StorageSettings = Field(default_factory=StorageSettings, validate_default=True)
    mail: MailSettings = Field(default_factory=MailSettings)
    scheduler: SchedulerSettings = Field(default_factory=SchedulerSettings)
    proxy: ProxySettings = Field(default_factory=ProxySettings)

    @field_validator("storage", mode="before")
    @classmethod
    def ensure_data_dir(cls, v: Any) -> StorageSettings:
        if isinstance(v, dict):
            settings = StorageSettings(**v)
        else:
            settings = v or StorageSettings()
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        return settings


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
