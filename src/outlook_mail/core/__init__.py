"""Core utilities for configuration, logging, and shared models."""

from .config import AppSettings, LoggingSettings, OutlookSettings, load_app_settings
from .logging import configure_logging
from .models import Attachment, EmailRecord

__all__ = [
    "AppSettings",
    "Attachment",
    "EmailRecord",
    "LoggingSettings",
    "OutlookSettings",
    "configure_logging",
    "load_app_settings",
]
