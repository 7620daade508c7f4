"""Subsorter settings.

Settings default to the compiled-in constants and can be overridden from a
TOML file or from ``SUBSORTER_`` prefixed environment variables, e.g.
``SUBSORTER_SUBTITLES__FILE_NAME=3_English.srt``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import toml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from subsorter.shared.constants import (
    CLIDefaults,
    LogLevel,
    SubtitleConfig,
    VideoFormats,
)
from subsorter.shared.errors import create_config_error

logger = logging.getLogger(__name__)


class ScanSettings(BaseModel):
    """Which files count as videos when classifying a folder."""

    video_extensions: list[str] = Field(
        default=list(VideoFormats.EXTENSIONS),
        description="Recognized video suffixes, matched case-sensitively",
    )

    @field_validator("video_extensions")
    @classmethod
    def validate_video_extensions(cls, value: list[str]) -> list[str]:
        """Require a leading dot on every extension."""
        invalid_exts = [ext for ext in value if not ext.startswith(".") or len(ext) < 2]
        if invalid_exts:
            msg = f"Extensions must start with a dot: {invalid_exts}"
            raise ValueError(msg)
        return value


class SubtitleSettings(BaseModel):
    """Where subtitles are looked up and how copies are named."""

    file_name: str = Field(
        default=SubtitleConfig.FILE_NAME,
        min_length=1,
        description="Exact (case-sensitive) name of the subtitle file to copy",
    )
    folder_name: str = Field(
        default=SubtitleConfig.FOLDER_NAME,
        min_length=1,
        description="Name of the folder holding subtitles, matched case-insensitively",
    )
    output_extension: str = Field(
        default=SubtitleConfig.OUTPUT_EXTENSION,
        description="Suffix appended to the video base name for the copy",
    )


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    file: str | None = Field(default=None, description="JSON log file path")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value: Any) -> Any:
        """Accept level names in any case."""
        if isinstance(value, str):
            return value.strip().upper()
        return value


class Settings(BaseSettings):
    """Top-level settings for a library scan."""

    model_config = SettingsConfigDict(
        env_prefix=CLIDefaults.ENV_PREFIX,
        env_nested_delimiter="__",
        env_ignore_empty=True,
        extra="ignore",
    )

    scan: ScanSettings = Field(default_factory=ScanSettings)
    subtitles: SubtitleSettings = Field(default_factory=SubtitleSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_toml_file(cls, config_path: str | Path) -> Settings:
        """Load settings from a TOML file.

        Args:
            config_path: Path to the TOML file

        Returns:
            Settings built from the file contents

        Raises:
            ApplicationError: If the file cannot be read or is invalid
        """
        config_path = Path(config_path)
        try:
            data: dict[str, Any] = toml.load(str(config_path))
        except (OSError, toml.TomlDecodeError) as e:
            raise create_config_error(
                f"Cannot read configuration file: {e}",
                config_path,
                e,
            ) from e

        try:
            return cls(**data)
        except ValidationError as e:
            raise create_config_error(
                f"Invalid configuration: {e.error_count()} error(s)",
                config_path,
                e,
            ) from e


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from a TOML file or from the environment.

    Args:
        config_path: Optional path to a TOML configuration file

    Returns:
        Settings instance
    """
    if config_path:
        logger.debug("Loading configuration from %s", config_path)
        return Settings.from_toml_file(config_path)

    try:
        return Settings()
    except ValidationError as e:
        raise create_config_error(
            f"Invalid configuration in environment: {e.error_count()} error(s)",
            original_error=e,
        ) from e


__all__ = [
    "LoggingSettings",
    "ScanSettings",
    "Settings",
    "SubtitleSettings",
    "load_settings",
]
