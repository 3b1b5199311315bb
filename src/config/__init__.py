"""Configuration and logging setup."""

from src.config.logging import configure_logging, get_logger
from src.config.settings import (
    APISettings,
    MailSettings,
    ProxySettings,
    SchedulerSettings,
    Settings,
    StorageSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "Settings",
    "APISettings",
    "StorageSettings",
    "MailSettings",
    "SchedulerSettings",
    "ProxySettings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "get_logger",
]
