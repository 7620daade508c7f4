"""
Pytest configuration and shared fixtures for subsorter tests.

Fixtures build small media libraries under ``tmp_path``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator, Iterable
from pathlib import Path

import pytest

from subsorter.shared.constants import LogConfig, SubtitleConfig

SUBTITLE_TEXT = "1\n00:00:01,000 --> 00:00:02,000\nHello\n"


@pytest.fixture(autouse=True)
def reset_package_logging() -> Generator[None, None, None]:
    """Undo handler setup done by CLI tests."""
    yield
    logger = logging.getLogger(LogConfig.LOGGER_NAME)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def write_subtitle(folder: Path, text: str = SUBTITLE_TEXT) -> Path:
    """Create the fixed-name subtitle file inside ``folder``."""
    folder.mkdir(parents=True, exist_ok=True)
    subtitle = folder / SubtitleConfig.FILE_NAME
    subtitle.write_text(text, encoding="utf-8")
    return subtitle


@pytest.fixture
def library_root(tmp_path: Path) -> Path:
    """Empty library root directory."""
    root = tmp_path / "library"
    root.mkdir()
    return root


@pytest.fixture
def make_movie(library_root: Path) -> Callable[..., Path]:
    """Factory creating a movie folder with one video and its subtitle."""

    def _make(
        name: str = "Movie",
        video: str = "movie.mp4",
        *,
        subs_folder: str | None = "Subs",
        with_subtitle: bool = True,
    ) -> Path:
        folder = library_root / name
        folder.mkdir()
        (folder / video).write_bytes(b"video")
        if subs_folder is not None:
            subs = folder / subs_folder
            subs.mkdir()
            if with_subtitle:
                write_subtitle(subs, f"subtitle for {name}\n")
        return folder

    return _make


@pytest.fixture
def make_show() -> Callable[..., Path]:
    """Factory creating a show folder with episode videos and per-episode subs."""

    def _make(
        folder: Path,
        episodes: Iterable[str] = ("ep1", "ep2"),
        *,
        extension: str = ".mkv",
        with_subs: bool = True,
        subtitle_folders: Iterable[str] | None = None,
    ) -> Path:
        folder.mkdir(parents=True)
        episodes = list(episodes)
        for episode in episodes:
            (folder / f"{episode}{extension}").write_bytes(b"video")
        if with_subs:
            subs = folder / "subs"
            subs.mkdir()
            names = episodes if subtitle_folders is None else list(subtitle_folders)
            for name in names:
                write_subtitle(subs / name, f"subtitle for {name}\n")
        return folder

    return _make


@pytest.fixture
def subtitle_writer() -> Callable[..., Path]:
    """Expose write_subtitle to tests that build custom layouts."""
    return write_subtitle
