"""Extension filtering module for subsorter.

This module recognizes video files by their suffix and derives the base name
used to match a video with its subtitle folder and output file.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from subsorter.shared.constants import VideoFormats

logger = logging.getLogger(__name__)


def is_video_file(
    file_path: str | Path,
    extensions: Iterable[str] = VideoFormats.EXTENSIONS,
) -> bool:
    """Check whether a path has a recognized video extension.

    Matching is case-sensitive: ``movie.MP4`` is not a video with the
    default extensions.

    Args:
        file_path: Path or file name to check.
        extensions: Recognized suffixes including the dot.

    Returns:
        True if the suffix is one of ``extensions``.

    Example:
        >>> is_video_file("Movie (2001).mkv")
        True
        >>> is_video_file("notes.txt")
        False
    """
    suffix = Path(file_path).suffix
    return bool(suffix) and suffix in set(extensions)


def strip_extension(
    name: str,
    extensions: Iterable[str] = VideoFormats.EXTENSIONS,
) -> str:
    """Remove the recognized video extension from a file name.

    Only the matched suffix is removed, whatever its length, so
    ``Show.S01E01.mp4`` becomes ``Show.S01E01``.

    Args:
        name: File name ending with one of ``extensions``.
        extensions: Recognized suffixes including the dot.

    Returns:
        The base name.

    Raises:
        ValueError: If ``name`` does not end with a recognized extension.
    """
    suffix = Path(name).suffix
    if not suffix or suffix not in set(extensions):
        msg = f"'{name}' does not end with a recognized video extension"
        raise ValueError(msg)
    return name[: -len(suffix)]


def create_video_extension_filter(
    extensions: Iterable[str] | None = None,
) -> Callable[[Path], bool]:
    """Create a video file filter for a fixed set of extensions.

    Args:
        extensions: Recognized suffixes. Defaults to VideoFormats.EXTENSIONS.

    Returns:
        A filter function returning True for paths with a recognized suffix.
    """
    ext_set = frozenset(VideoFormats.EXTENSIONS if extensions is None else extensions)

    if not ext_set:
        logger.warning("No video extensions provided, filter will reject all files")

    def filter_func(file_path: Path) -> bool:
        return is_video_file(file_path, ext_set)

    return filter_func
