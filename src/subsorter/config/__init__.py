"""Configuration for subsorter."""

from subsorter.config.settings import (
    LoggingSettings,
    ScanSettings,
    Settings,
    SubtitleSettings,
    load_settings,
)

__all__ = [
    "LoggingSettings",
    "ScanSettings",
    "Settings",
    "SubtitleSettings",
    "load_settings",
]
