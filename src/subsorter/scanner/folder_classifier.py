"""Folder classification for subsorter.

A title folder's shape decides how its subtitles are placed:

- one video file: a movie
- two or more video files: a show whose episodes sit side by side
- no video file but a sub-folder other than the subs folder: a show with
  season folders

Directory iteration order is whatever the file system returns and is not
guaranteed to be stable between platforms.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from subsorter.core.models import FolderType, Movie, Show, ShowWithSeasons
from subsorter.scanner.extension_filter import (
    create_video_extension_filter,
    strip_extension,
)
from subsorter.shared.constants import SubtitleConfig, VideoFormats
from subsorter.shared.errors import create_no_video_files_error

logger = logging.getLogger(__name__)


class FolderClassifier:
    """Classifies title folders from their immediate contents."""

    def __init__(
        self,
        video_extensions: Iterable[str] = VideoFormats.EXTENSIONS,
        subs_folder_name: str = SubtitleConfig.FOLDER_NAME,
    ) -> None:
        """Initialize the classifier.

        Args:
            video_extensions: Suffixes recognized as video files.
            subs_folder_name: Name of the subtitle folder, compared
                case-insensitively.
        """
        self.video_extensions = tuple(video_extensions)
        self._video_filter = create_video_extension_filter(self.video_extensions)
        self.subs_folder_name = subs_folder_name.lower()

    def classify(self, folder: Path) -> FolderType:
        """Decide the folder type of a title folder.

        Args:
            folder: Title folder to inspect.

        Returns:
            Movie, Show or ShowWithSeasons.

        Raises:
            ClassificationError: If the folder has neither video files nor
                season folders.
            OSError: If the folder cannot be listed.
        """
        with os.scandir(folder) as it:
            entries = list(it)

        video_names = [entry.name for entry in entries if self._is_video_entry(entry)]

        if not video_names:
            season_candidates = [
                entry.name
                for entry in entries
                if entry.is_dir() and entry.name.lower() != self.subs_folder_name
            ]
            if season_candidates:
                logger.debug(
                    "%s: %d season folder(s) found",
                    folder,
                    len(season_candidates),
                )
                return ShowWithSeasons()
            raise create_no_video_files_error(folder)

        if len(video_names) == 1:
            return Movie(base_name=strip_extension(video_names[0], self.video_extensions))

        return Show(
            base_names=tuple(
                strip_extension(name, self.video_extensions) for name in video_names
            )
        )

    def list_episode_base_names(self, folder: Path) -> list[str]:
        """Return the base names of the video files directly inside a folder.

        Raises:
            OSError: If the folder cannot be listed.
        """
        with os.scandir(folder) as it:
            return [
                strip_extension(entry.name, self.video_extensions)
                for entry in it
                if self._is_video_entry(entry)
            ]

    def _is_video_entry(self, entry: os.DirEntry) -> bool:
        return entry.is_file() and self._video_filter(Path(entry.name))
