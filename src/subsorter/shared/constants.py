"""
Subsorter Constants

This module contains the compiled-in defaults for file recognition and the
CLI. Configuration values in ``subsorter.config`` default to these.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, Literal


class VideoFormats:
    """Video format configuration constants."""

    # Suffixes are matched case-sensitively against Path.suffix
    EXTENSIONS: tuple[str, ...] = (".mp4", ".mkv")


class SubtitleConfig:
    """Subtitle lookup configuration constants."""

    FILE_NAME = "2_English.srt"
    FOLDER_NAME = "subs"
    OUTPUT_EXTENSION = ".srt"


class LogConfig:
    """Logging configuration constants."""

    LOGGER_NAME = "subsorter"
    ROOT_OPERATION = "walk_library"


class LogLevel(str, Enum):
    """Log level names accepted by the CLI and the settings."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class CLIDefaults:
    """CLI default values."""

    EXIT_SUCCESS = 0
    EXIT_ERROR = 1
    COMMAND = "sort"
    ENV_PREFIX = "SUBSORTER_"


class CLIHelp:
    """CLI help text."""

    APP_NAME = "subsorter"
    APP_DESCRIPTION = (
        "Copy English subtitles next to the videos of a movie and show library."
    )
    APP_STYLE: Literal["rich"] = "rich"
    VERSION_TEXT = "subsorter {version}"
    ROOT_HELP = "Library root; every directory directly inside it is one movie or show."
    CONFIG_HELP = "TOML configuration file overriding the built-in defaults."
    LOG_FILE_HELP = "Also write JSON structured logs to this file."
    VERBOSE_HELP = "Log debug output; overrides --log-level."
    LOG_LEVEL_HELP = "Console log level. Defaults to the configured level (INFO)."
    JSON_HELP = "Print the scan report as JSON instead of a table."
    VERSION_HELP = "Show the version and exit."


class ReportColumns:
    """Column titles for the summary table."""

    TITLES: ClassVar[list[str]] = ["Folder", "Error code", "Message"]
