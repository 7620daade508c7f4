"""Tests for title folder classification."""

from pathlib import Path

import pytest

from subsorter.core.models import FolderKind, Movie, Show, ShowWithSeasons
from subsorter.scanner.folder_classifier import FolderClassifier
from subsorter.shared.errors import ClassificationError, ErrorCode


@pytest.fixture
def classifier() -> FolderClassifier:
    return FolderClassifier()


class TestClassify:
    """Test cases for FolderClassifier.classify."""

    def test_single_video_is_movie(self, classifier, tmp_path):
        """Test that one video file makes a movie."""
        (tmp_path / "The Movie (1999).mp4").touch()
        (tmp_path / "subs").mkdir()
        (tmp_path / "poster.jpg").touch()

        result = classifier.classify(tmp_path)

        assert result == Movie(base_name="The Movie (1999)")
        assert result.kind is FolderKind.MOVIE

    def test_multiple_videos_is_show(self, classifier, tmp_path):
        """Test that two or more video files make a show with all base names."""
        for name in ("ep1.mkv", "ep2.mkv", "ep3.mp4"):
            (tmp_path / name).touch()
        (tmp_path / "notes.txt").touch()

        result = classifier.classify(tmp_path)

        assert isinstance(result, Show)
        assert len(result.base_names) == 3
        assert set(result.base_names) == {"ep1", "ep2", "ep3"}

    def test_folders_without_videos_is_show_with_seasons(self, classifier, tmp_path):
        """Test that a non-subs sub-folder without videos means seasons."""
        (tmp_path / "Season 1").mkdir()
        (tmp_path / "Subs").mkdir()

        assert classifier.classify(tmp_path) == ShowWithSeasons()

    @pytest.mark.parametrize("subs_name", ["subs", "Subs", "SUBS"])
    def test_only_subs_folder_fails(self, classifier, tmp_path, subs_name):
        """Test that a lone subs folder (any case) is not a season."""
        (tmp_path / subs_name).mkdir()

        with pytest.raises(ClassificationError) as exc_info:
            classifier.classify(tmp_path)

        assert exc_info.value.code is ErrorCode.NO_VIDEO_FILES_AND_NO_SEASON_FOLDERS_FOUND
        assert exc_info.value.context.file_path == str(tmp_path)

    def test_empty_folder_fails(self, classifier, tmp_path):
        """Test that an empty folder cannot be classified."""
        with pytest.raises(ClassificationError):
            classifier.classify(tmp_path)

    def test_non_video_files_only_fails(self, classifier, tmp_path):
        """Test that files with other extensions do not count."""
        (tmp_path / "movie.avi").touch()
        (tmp_path / "movie.MP4").touch()

        with pytest.raises(ClassificationError):
            classifier.classify(tmp_path)

    def test_directory_named_like_video_is_not_a_video(self, classifier, tmp_path):
        """Test that only regular files are counted as videos."""
        (tmp_path / "extras.mkv").mkdir()
        (tmp_path / "movie.mp4").touch()

        assert classifier.classify(tmp_path) == Movie(base_name="movie")

    def test_custom_configuration(self, tmp_path):
        """Test classification with configured extensions and subs name."""
        classifier = FolderClassifier(video_extensions=[".webm"], subs_folder_name="Subtitles")
        (tmp_path / "clip.webm").touch()
        (tmp_path / "clip.mp4").touch()

        assert classifier.classify(tmp_path) == Movie(base_name="clip")

        season_root = tmp_path / "show"
        season_root.mkdir()
        (season_root / "subtitles").mkdir()
        with pytest.raises(ClassificationError):
            classifier.classify(season_root)

    def test_missing_folder_raises_os_error(self, classifier, tmp_path):
        """Test that listing errors propagate to the caller."""
        with pytest.raises(OSError):
            classifier.classify(tmp_path / "missing")


class TestListEpisodeBaseNames:
    """Test cases for FolderClassifier.list_episode_base_names."""

    def test_lists_video_base_names(self, classifier, tmp_path):
        """Test that only direct video files are listed."""
        (tmp_path / "ep1.mkv").touch()
        (tmp_path / "ep2.mp4").touch()
        (tmp_path / "cover.jpg").touch()
        (tmp_path / "subs").mkdir()
        (tmp_path / "subs" / "ep3.mkv").touch()

        assert sorted(classifier.list_episode_base_names(tmp_path)) == ["ep1", "ep2"]

    def test_empty_folder(self, classifier, tmp_path):
        """Test that a folder without videos yields no names."""
        assert classifier.list_episode_base_names(tmp_path) == []
