"""Configuration package for syncpath."""

from .settings import (
    DEFAULT_PART_SIZE_BYTES,
    LoggingSettings,
    TransferSettings,
    HiddenPathSettings,
    AppSettings,
    get_settings,
    reload_settings
)

__all__ = [
    "DEFAULT_PART_SIZE_BYTES",
    "LoggingSettings",
    "TransferSettings",
    "HiddenPathSettings",
    "AppSettings",
    "get_settings",
    "reload_settings"
]
