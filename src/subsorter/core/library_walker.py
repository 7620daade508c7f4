"""Library walker for subsorter.

Walks the immediate entries of a library root, classifies every directory
and dispatches it to the processor for its folder type. Errors are reported
per title folder; only a root that cannot be listed stops the walk.
"""

from __future__ import annotations

import logging
from pathlib import Path

from typing_extensions import assert_never

from subsorter.config.settings import Settings
from subsorter.core.models import (
    FolderFailure,
    FolderType,
    Movie,
    ScanReport,
    Show,
    ShowWithSeasons,
)
from subsorter.core.processors import SubtitleProcessor
from subsorter.core.subtitle_locator import SubtitleLocator
from subsorter.scanner.folder_classifier import FolderClassifier
from subsorter.shared.constants import LogConfig
from subsorter.shared.errors import SubSorterError, create_directory_read_error
from subsorter.shared.logging import log_operation_error

logger = logging.getLogger(__name__)


class LibraryWalker:
    """Places subtitles for every title folder of a library root."""

    def __init__(
        self,
        classifier: FolderClassifier | None = None,
        processor: SubtitleProcessor | None = None,
    ) -> None:
        self.classifier = classifier or FolderClassifier()
        self.processor = processor or SubtitleProcessor(classifier=self.classifier)

    @classmethod
    def from_settings(cls, settings: Settings) -> LibraryWalker:
        """Build a walker from loaded settings."""
        classifier = FolderClassifier(
            video_extensions=settings.scan.video_extensions,
            subs_folder_name=settings.subtitles.folder_name,
        )
        locator = SubtitleLocator(
            subs_folder_name=settings.subtitles.folder_name,
            subtitle_file_name=settings.subtitles.file_name,
        )
        processor = SubtitleProcessor(
            classifier=classifier,
            locator=locator,
            output_extension=settings.subtitles.output_extension,
        )
        return cls(classifier=classifier, processor=processor)

    def walk(self, root: Path) -> ScanReport:
        """Process every title folder directly inside ``root``.

        Args:
            root: Library root directory.

        Returns:
            Report of copied subtitles and per-folder failures.

        Raises:
            LibraryReadError: If ``root`` cannot be listed.
        """
        root = Path(root)
        try:
            entries = list(root.iterdir())
        except OSError as e:
            raise create_directory_read_error(root, e, LogConfig.ROOT_OPERATION) from e

        report = ScanReport(root=root)
        logger.info("Scanning %d entries in %s", len(entries), root)

        for entry in entries:
            if not entry.is_dir():
                logger.warning("Expected a directory, skipping %s", entry)
                report.entries_skipped += 1
                continue

            report.folders_scanned += 1
            for error in self.process_folder(entry, report):
                self._record_failure(report, entry, error)

        logger.info(
            "Copied %d subtitle(s), %d error(s) in %d folder(s)",
            len(report.copied),
            len(report.failures),
            len(report.failed_folders),
        )
        return report

    def process_folder(self, folder: Path, report: ScanReport) -> list[SubSorterError]:
        """Classify one title folder and place its subtitles.

        Copied subtitles are appended to ``report``.

        Returns:
            Errors for this folder; empty on success.
        """
        try:
            folder_type = self.classifier.classify(folder)
            report.folder_kinds[str(folder)] = folder_type.kind
            return self._dispatch(folder, folder_type, report)
        except SubSorterError as e:
            return [e]
        except OSError as e:
            return [create_directory_read_error(folder, e, "process_folder")]

    def _dispatch(
        self,
        folder: Path,
        folder_type: FolderType,
        report: ScanReport,
    ) -> list[SubSorterError]:
        match folder_type:
            case Movie(base_name=base_name):
                report.copied.append(self.processor.process_movie(folder, base_name))
                return []
            case Show(base_names=base_names):
                report.copied.extend(self.processor.process_show(folder, base_names))
                return []
            case ShowWithSeasons():
                outcome = self.processor.process_show_with_seasons(folder)
                report.copied.extend(outcome.copied)
                return outcome.errors
            case _:
                assert_never(folder_type)

    def _record_failure(
        self,
        report: ScanReport,
        folder: Path,
        error: SubSorterError,
    ) -> None:
        report.failures.append(FolderFailure(folder=folder, error=error))
        log_operation_error(logger, error, folder=folder)
