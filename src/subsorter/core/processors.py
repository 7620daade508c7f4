"""Subtitle processors for the three title folder shapes.

Within one show the first error stops the remaining episodes. A show with
seasons processes every season independently and collects one error per
failing season.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Collection
from pathlib import Path

from subsorter.core.models import ProcessingOutcome
from subsorter.core.subtitle_locator import SubtitleLocator
from subsorter.core.subtitle_mover import copy_subtitle
from subsorter.scanner.folder_classifier import FolderClassifier
from subsorter.shared.constants import SubtitleConfig
from subsorter.shared.errors import (
    SubSorterError,
    create_directory_read_error,
    create_no_episode_subtitle_error,
    create_no_movie_subtitle_error,
    create_no_subs_folder_error,
    create_unknown_episode_folder_error,
)

logger = logging.getLogger(__name__)


class SubtitleProcessor:
    """Places subtitles for movie, show and season-show folders."""

    def __init__(
        self,
        classifier: FolderClassifier | None = None,
        locator: SubtitleLocator | None = None,
        output_extension: str = SubtitleConfig.OUTPUT_EXTENSION,
    ) -> None:
        self.classifier = classifier or FolderClassifier()
        self.locator = locator or SubtitleLocator()
        self.output_extension = output_extension

    def process_movie(self, folder: Path, base_name: str) -> Path:
        """Copy a movie's subtitle next to its video.

        Args:
            folder: Movie folder.
            base_name: Base name of the movie's video file.

        Returns:
            Path of the copied subtitle.

        Raises:
            SubtitleNotFoundError: If the subs folder or subtitle is missing.
            SubtitleCopyError: If the copy fails.
        """
        subs_folder = self.locator.find_subs_folder(folder)
        if subs_folder is None:
            raise create_no_subs_folder_error(folder, is_show=False)

        subtitle = self.locator.find_movie_subtitle(subs_folder)
        if subtitle is None:
            raise create_no_movie_subtitle_error(
                subs_folder,
                self.locator.subtitle_file_name,
            )

        return copy_subtitle(
            base_name,
            folder,
            subtitle,
            extension=self.output_extension,
        )

    def process_show(self, folder: Path, base_names: Collection[str]) -> list[Path]:
        """Copy each episode's subtitle next to its video.

        Every sub-folder of the show's subs folder must be named after one of
        ``base_names``. Processing stops at the first error; subtitles copied
        before it stay in place.

        Args:
            folder: Show (or season) folder holding the episode videos.
            base_names: Episode base names found in ``folder``.

        Returns:
            Paths of the copied subtitles.

        Raises:
            SubtitleNotFoundError: If the subs folder or an episode's
                subtitle is missing.
            UnknownEpisodeFolderError: If a subs sub-folder matches no episode.
            SubtitleCopyError: If a copy fails.
        """
        subs_folder = self.locator.find_subs_folder(folder)
        if subs_folder is None:
            raise create_no_subs_folder_error(folder, is_show=True)

        copied: list[Path] = []
        for episode_folder in self.locator.list_episode_folders(subs_folder):
            name = episode_folder.name
            if name not in base_names:
                raise create_unknown_episode_folder_error(folder, name)

            subtitle = self.locator.find_episode_subtitle(episode_folder)
            if subtitle is None:
                raise create_no_episode_subtitle_error(
                    episode_folder,
                    self.locator.subtitle_file_name,
                )

            copied.append(
                copy_subtitle(name, folder, subtitle, extension=self.output_extension)
            )

        return copied

    def process_show_with_seasons(self, folder: Path) -> ProcessingOutcome:
        """Process every season folder of a show as an independent show.

        All immediate sub-folders are seasons, a folder named like the subs
        folder included.

        Args:
            folder: Show folder containing season folders.

        Returns:
            Copied subtitles and one error per failing season.

        Raises:
            OSError: If ``folder`` itself cannot be listed.
        """
        outcome = ProcessingOutcome()
        season_folders = list_subfolders(folder)

        for season_folder in season_folders:
            try:
                base_names = self.classifier.list_episode_base_names(season_folder)
                outcome.copied.extend(self.process_show(season_folder, base_names))
            except SubSorterError as e:
                logger.debug("Season %s failed: %s", season_folder, e)
                outcome.errors.append(e)
            except OSError as e:
                outcome.errors.append(
                    create_directory_read_error(season_folder, e, "process_season")
                )

        return outcome


def list_subfolders(folder: Path) -> list[Path]:
    """Return the immediate sub-folders of ``folder`` in iteration order."""
    with os.scandir(folder) as entries:
        return [Path(entry.path) for entry in entries if entry.is_dir()]
