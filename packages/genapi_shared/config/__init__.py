"""Public API for genapi runtime configuration."""

from .loader import load_settings
from .models import DEFAULT_CONFIG_PATH, GenapiSettings, LoggingSettings

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "GenapiSettings",
    "LoggingSettings",
    "load_settings",
]
