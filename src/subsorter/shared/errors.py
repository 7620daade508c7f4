"""Subsorter Error Handling Module

This module defines the error handling system for subsorter, providing
structured error classes with context information and user-friendly messages.

The error hierarchy follows these principles:
- One Source of Truth: All error codes are defined in ErrorCode enum
- Structured Context: ErrorContext provides additional information
- Per-folder Scope: Domain and infrastructure errors raised while processing
  one title folder are reported and never stop the library walk
- Proper Exception Chaining: Original exceptions are preserved
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Union

# Type alias for primitive context values (str, int, float, bool only)
PrimitiveContextValue = Union[str, int, float, bool]


class ErrorCode(str, Enum):
    """Error codes for subsorter.

    This enum serves as the single source of truth for all error codes
    used throughout the application.
    """

    # Classification Errors
    NO_VIDEO_FILES_AND_NO_SEASON_FOLDERS_FOUND = (
        "NO_VIDEO_FILES_AND_NO_SEASON_FOLDERS_FOUND"
    )

    # Subtitle Lookup Errors
    NO_SUB_FOLDER_FOUND_FOR_MOVIE = "NO_SUB_FOLDER_FOUND_FOR_MOVIE"
    NO_SUB_FOLDER_FOUND_FOR_SHOW = "NO_SUB_FOLDER_FOUND_FOR_SHOW"
    NO_SUB_FILE_FOUND_FOR_MOVIE = "NO_SUB_FILE_FOUND_FOR_MOVIE"
    NO_SUB_FILE_FOUND_FOR_SHOW = "NO_SUB_FILE_FOUND_FOR_SHOW"
    SUB_FOLDER_FOR_SHOW_WITH_UNKNOWN_NAME = "SUB_FOLDER_FOR_SHOW_WITH_UNKNOWN_NAME"

    # File System Errors
    FAILED_TO_COPY_SUB_FILE = "FAILED_TO_COPY_SUB_FILE"
    DIRECTORY_READ_FAILED = "DIRECTORY_READ_FAILED"

    # Configuration Errors
    CONFIG_INVALID = "CONFIG_INVALID"

    # CLI Errors
    CLI_UNEXPECTED_ERROR = "CLI_UNEXPECTED_ERROR"


def _coerce_primitives(value: Any | None) -> dict[str, PrimitiveContextValue] | None:
    """Coerce additional_data values to primitives.

    Args:
        value: Input dictionary or None

    Returns:
        Dictionary with primitive values only, or None

    Raises:
        TypeError: If value is not a dict or contains unconvertible types
    """
    if value is None:
        return None

    if not isinstance(value, dict):
        error_msg = f"additional_data must be dict, got {type(value).__name__}"
        raise TypeError(error_msg)

    coerced: dict[str, PrimitiveContextValue] = {}
    for key, val in value.items():
        if isinstance(val, (str, int, float, bool)):
            coerced[key] = val
        elif isinstance(val, Path):
            coerced[key] = str(val)
        elif isinstance(val, Enum):
            coerced[key] = val.value
        else:
            error_msg = (
                f"Cannot coerce {type(val).__name__} to primitive type. "
                f"Only str, int, float, bool, Path, Enum are allowed."
            )
            raise TypeError(error_msg)

    return coerced


@dataclass(frozen=True)
class ErrorContext:
    """Context information for errors.

    Attributes:
        file_path: Optional path of the folder or file the error concerns
        operation: Optional operation name that caused the error
        additional_data: Optional dict with primitive values only
    """

    file_path: str | None = None
    operation: str | None = None
    additional_data: dict[str, PrimitiveContextValue] | None = None

    def __post_init__(self) -> None:
        """Post-initialization coercion of additional_data."""
        if self.additional_data is not None:
            object.__setattr__(
                self,
                "additional_data",
                _coerce_primitives(self.additional_data),
            )

    def safe_dict(self) -> dict[str, Any]:
        """Export context as a dict, always including additional_data."""
        data: dict[str, Any] = {}
        if self.file_path is not None:
            data["file_path"] = self.file_path
        if self.operation is not None:
            data["operation"] = self.operation
        data["additional_data"] = self.additional_data or {}
        return data


class SubSorterError(Exception):
    """Base exception class for all subsorter errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        """Initialize SubSorterError.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context information
            original_error: Original exception that caused this error
        """
        self.code = code
        self.message = message
        self.context = context or ErrorContext()
        self.original_error = original_error
        super().__init__(f"{code.value}: {message}")

    def __str__(self) -> str:
        """Return string representation of the error."""
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging and JSON output."""
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
            "original_error": str(self.original_error) if self.original_error else None,
        }


class DomainError(SubSorterError):
    """Errors raised when a folder does not follow the expected library layout."""


class InfrastructureError(SubSorterError):
    """Errors raised by file system operations."""


class ApplicationError(SubSorterError):
    """Application-level errors such as invalid configuration."""


class ClassificationError(DomainError):
    """A title folder matches none of the known folder shapes."""


class SubtitleNotFoundError(DomainError):
    """A subs folder or the expected subtitle file is missing."""


class UnknownEpisodeFolderError(DomainError):
    """A folder under a show's subs folder is not named after any episode."""

    def __init__(
        self,
        name: str,
        message: str,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            ErrorCode.SUB_FOLDER_FOR_SHOW_WITH_UNKNOWN_NAME,
            message,
            context,
        )
        self.name = name


class SubtitleCopyError(InfrastructureError):
    """Copying a subtitle file failed."""

    def __init__(
        self,
        reason: str,
        message: str,
        context: ErrorContext | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(
            ErrorCode.FAILED_TO_COPY_SUB_FILE,
            message,
            context,
            original_error,
        )
        self.reason = reason


class LibraryReadError(InfrastructureError):
    """A library, title or season directory could not be listed."""


class CliError(ApplicationError):
    """CLI-specific error carrying the exit code to use."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: BaseException | None = None,
        command: str | None = None,
        exit_code: int = 1,
    ):
        super().__init__(code, message, context, original_error)
        self.command = command
        self.exit_code = exit_code


def create_no_video_files_error(folder: Path) -> ClassificationError:
    """Create the error for a folder with no videos and no season folders."""
    return ClassificationError(
        ErrorCode.NO_VIDEO_FILES_AND_NO_SEASON_FOLDERS_FOUND,
        "No video files and no season folders found",
        ErrorContext(file_path=str(folder), operation="classify_folder"),
    )


def create_no_subs_folder_error(folder: Path, *, is_show: bool) -> SubtitleNotFoundError:
    """Create the error for a movie or show folder without a subs folder."""
    if is_show:
        code = ErrorCode.NO_SUB_FOLDER_FOUND_FOR_SHOW
        operation = "process_show"
        message = "No subs folder found for show"
    else:
        code = ErrorCode.NO_SUB_FOLDER_FOUND_FOR_MOVIE
        operation = "process_movie"
        message = "No subs folder found for movie"
    return SubtitleNotFoundError(
        code,
        message,
        ErrorContext(file_path=str(folder), operation=operation),
    )


def create_no_movie_subtitle_error(subs_folder: Path, file_name: str) -> SubtitleNotFoundError:
    """Create the error for a movie subs folder missing the subtitle file."""
    return SubtitleNotFoundError(
        ErrorCode.NO_SUB_FILE_FOUND_FOR_MOVIE,
        f"No {file_name} found for movie",
        ErrorContext(
            file_path=str(subs_folder),
            operation="process_movie",
            additional_data={"subtitle_file_name": file_name},
        ),
    )


def create_no_episode_subtitle_error(
    episode_folder: Path,
    file_name: str,
) -> SubtitleNotFoundError:
    """Create the error for an episode folder missing the subtitle file."""
    return SubtitleNotFoundError(
        ErrorCode.NO_SUB_FILE_FOUND_FOR_SHOW,
        f"No {file_name} found in {episode_folder}",
        ErrorContext(
            file_path=str(episode_folder),
            operation="process_show",
            additional_data={"subtitle_file_name": file_name},
        ),
    )


def create_unknown_episode_folder_error(
    folder: Path,
    name: str,
) -> UnknownEpisodeFolderError:
    """Create the error for a subs sub-folder matching no episode."""
    return UnknownEpisodeFolderError(
        name,
        f"Subs folder '{name}' does not match any episode",
        ErrorContext(
            file_path=str(folder),
            operation="process_show",
            additional_data={"folder_name": name},
        ),
    )


def create_copy_error(
    source: Path,
    destination: Path,
    original_error: OSError,
) -> SubtitleCopyError:
    """Create the error for a failed subtitle copy.

    The reason is the OS error text, falling back to the exception type name
    so that it is never empty.
    """
    reason = str(original_error) or type(original_error).__name__
    return SubtitleCopyError(
        reason,
        f"Failed to copy subtitle file: {reason}",
        ErrorContext(
            file_path=str(destination),
            operation="copy_subtitle",
            additional_data={"source": source},
        ),
        original_error,
    )


def create_directory_read_error(
    directory: Path,
    original_error: OSError,
    operation: str | None = None,
) -> LibraryReadError:
    """Create the error for a directory that could not be listed."""
    return LibraryReadError(
        ErrorCode.DIRECTORY_READ_FAILED,
        f"Cannot read directory: {original_error}",
        ErrorContext(file_path=str(directory), operation=operation),
        original_error,
    )


def create_config_error(
    message: str,
    config_path: Path | None = None,
    original_error: BaseException | None = None,
) -> ApplicationError:
    """Create a configuration error with context."""
    return ApplicationError(
        ErrorCode.CONFIG_INVALID,
        message,
        ErrorContext(
            file_path=str(config_path) if config_path else None,
            operation="load_settings",
        ),
        original_error,
    )


def create_cli_error(
    message: str,
    command: str | None = None,
    original_error: BaseException | None = None,
    exit_code: int = 1,
) -> CliError:
    """Create a CLI error with context."""
    additional_data: dict[str, PrimitiveContextValue] | None = (
        {"command": command} if command else None
    )
    return CliError(
        ErrorCode.CLI_UNEXPECTED_ERROR,
        message,
        ErrorContext(operation="cli", additional_data=additional_data),
        original_error,
        command,
        exit_code,
    )
