"""
Data models for subsorter core operations.

A title folder is classified into exactly one variant of the closed
``FolderType`` union; the walker dispatches on it exhaustively.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from subsorter.shared.errors import SubSorterError


class FolderKind(str, Enum):
    """Discriminator for the FolderType variants."""

    MOVIE = "movie"
    SHOW = "show"
    SHOW_WITH_SEASONS = "show_with_seasons"


class Movie(BaseModel):
    """A folder holding exactly one video file."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[FolderKind.MOVIE] = FolderKind.MOVIE
    base_name: str = Field(..., description="Video file name without extension")


class Show(BaseModel):
    """A folder holding two or more episode video files."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[FolderKind.SHOW] = FolderKind.SHOW
    base_names: tuple[str, ...] = Field(
        ...,
        description="Episode base names in directory iteration order",
    )


class ShowWithSeasons(BaseModel):
    """A folder without videos whose sub-folders are seasons."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[FolderKind.SHOW_WITH_SEASONS] = FolderKind.SHOW_WITH_SEASONS


FolderType = Union[Movie, Show, ShowWithSeasons]


class ProcessingOutcome(BaseModel):
    """Subtitles copied and errors collected for one season show."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    copied: list[Path] = Field(default_factory=list)
    errors: list[SubSorterError] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        """True when no season failed."""
        return not self.errors


class FolderFailure(BaseModel):
    """One error reported for a title folder."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    folder: Path
    error: SubSorterError

    def __str__(self) -> str:
        """Return the diagnostic line for this failure."""
        return f"{self.folder}: {self.error}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {"folder": str(self.folder), **self.error.to_dict()}


class ScanReport(BaseModel):
    """Result of walking one library root."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    root: Path
    folders_scanned: int = 0
    entries_skipped: int = 0
    copied: list[Path] = Field(default_factory=list)
    failures: list[FolderFailure] = Field(default_factory=list)
    folder_kinds: dict[str, FolderKind] = Field(default_factory=dict)

    @property
    def failed_folders(self) -> list[Path]:
        """Distinct folders with at least one failure, in report order."""
        seen: dict[Path, None] = {}
        for failure in self.failures:
            seen.setdefault(failure.folder, None)
        return list(seen)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "root": str(self.root),
            "folders_scanned": self.folders_scanned,
            "entries_skipped": self.entries_skipped,
            "folder_kinds": {
                folder: kind.value for folder, kind in self.folder_kinds.items()
            },
            "copied": [str(path) for path in self.copied],
            "failures": [failure.to_dict() for failure in self.failures],
        }
