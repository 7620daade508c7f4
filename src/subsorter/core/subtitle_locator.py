"""Subtitle lookup for subsorter.

Subtitles live in a ``subs`` folder (any letter case) next to the videos.
A movie's subtitle sits directly in that folder; a show has one sub-folder
per episode, named after the episode's base name.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from subsorter.shared.constants import SubtitleConfig

logger = logging.getLogger(__name__)


class SubtitleLocator:
    """Finds subs folders and the fixed-name subtitle file inside them."""

    def __init__(
        self,
        subs_folder_name: str = SubtitleConfig.FOLDER_NAME,
        subtitle_file_name: str = SubtitleConfig.FILE_NAME,
    ) -> None:
        self.subs_folder_name = subs_folder_name.lower()
        self.subtitle_file_name = subtitle_file_name

    def find_subs_folder(self, folder: Path) -> Path | None:
        """Return the first sub-folder whose lower-cased name is the subs folder name."""
        with os.scandir(folder) as it:
            for entry in it:
                if entry.is_dir() and entry.name.lower() == self.subs_folder_name:
                    return Path(entry.path)
        logger.debug("No subs folder in %s", folder)
        return None

    def find_movie_subtitle(self, subs_folder: Path) -> Path | None:
        """Return the subtitle file directly inside a movie's subs folder.

        The name comparison is exact and case-sensitive.
        """
        with os.scandir(subs_folder) as it:
            for entry in it:
                if entry.name == self.subtitle_file_name:
                    return Path(entry.path)
        return None

    def find_episode_subtitle(self, episode_folder: Path) -> Path | None:
        """Return the subtitle file inside one episode folder of a show."""
        with os.scandir(episode_folder) as it:
            for entry in it:
                if entry.is_file() and entry.name == self.subtitle_file_name:
                    return Path(entry.path)
        return None

    def list_episode_folders(self, subs_folder: Path) -> list[Path]:
        """Return the immediate sub-folders of a show's subs folder."""
        with os.scandir(subs_folder) as it:
            return [Path(entry.path) for entry in it if entry.is_dir()]
