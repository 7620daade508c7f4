"""Subtitle file placement for subsorter."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from subsorter.shared.constants import SubtitleConfig
from subsorter.shared.errors import create_copy_error

logger = logging.getLogger(__name__)


def copy_subtitle(
    base_name: str,
    destination_folder: Path,
    source: Path,
    *,
    extension: str = SubtitleConfig.OUTPUT_EXTENSION,
) -> Path:
    """Copy a subtitle file next to its video as ``<base_name><extension>``.

    The source file is left in place. An existing destination file is
    overwritten.

    Args:
        base_name: Video base name the copy is named after.
        destination_folder: Folder holding the video.
        source: Subtitle file to copy.
        extension: Suffix of the copy.

    Returns:
        Path of the new subtitle file.

    Raises:
        SubtitleCopyError: If the copy fails for any file system reason.
    """
    destination = destination_folder / f"{base_name}{extension}"
    try:
        shutil.copyfile(source, destination)
    except OSError as e:
        raise create_copy_error(source, destination, e) from e

    logger.info("Copied %s -> %s", source, destination)
    return destination
