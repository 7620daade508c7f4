"""Tests for the CLI JSON documents and error handler."""

import json
from pathlib import Path

from subsorter.cli.common.error_handler import handle_cli_error
from subsorter.cli.json_formatter import format_error, format_scan_report
from subsorter.core.models import FolderFailure, FolderKind, ScanReport
from subsorter.shared.errors import (
    create_config_error,
    create_directory_read_error,
    create_no_video_files_error,
)


class TestFormatScanReport:
    """Test cases for format_scan_report."""

    def test_clean_report(self, tmp_path):
        report = ScanReport(
            root=tmp_path,
            folders_scanned=1,
            copied=[tmp_path / "Movie" / "movie.srt"],
            folder_kinds={str(tmp_path / "Movie"): FolderKind.MOVIE},
        )

        payload = json.loads(format_scan_report(report))

        assert payload["success"] is True
        assert payload["root"] == str(tmp_path)
        assert payload["copied"] == [str(tmp_path / "Movie" / "movie.srt")]
        assert payload["folder_kinds"] == {str(tmp_path / "Movie"): "movie"}
        assert payload["summary"] == {"copied": 1, "failures": 0, "failed_folders": []}

    def test_failures_mark_report_unsuccessful(self, tmp_path):
        folder = tmp_path / "Empty"
        report = ScanReport(
            root=tmp_path,
            folders_scanned=1,
            failures=[FolderFailure(folder=folder, error=create_no_video_files_error(folder))],
        )

        payload = json.loads(format_scan_report(report))

        assert payload["success"] is False
        assert payload["failures"][0]["folder"] == str(folder)
        assert payload["failures"][0]["code"] == "NO_VIDEO_FILES_AND_NO_SEASON_FOLDERS_FOUND"
        assert payload["summary"]["failed_folders"] == [str(folder)]


class TestFormatError:
    """Test cases for format_error."""

    def test_error_document(self):
        payload = json.loads(format_error("boom", "CONFIG_INVALID", 1, {"command": "sort"}))

        assert payload == {
            "success": False,
            "error": {
                "code": "CONFIG_INVALID",
                "message": "boom",
                "exit_code": 1,
                "context": {"command": "sort"},
            },
        }

    def test_unencodable_context_values_become_strings(self):
        payload = json.loads(format_error("boom", "X", 1, {"path": Path("/a")}))

        assert payload["error"]["context"]["path"] == str(Path("/a"))


class TestHandleCliError:
    """Test cases for handle_cli_error."""

    def test_application_error(self, capsys, tmp_path):
        exit_code = handle_cli_error(create_config_error("bad value", tmp_path / "c.toml"), "sort")

        assert exit_code == 1
        assert "Application error: bad value" in capsys.readouterr().err

    def test_infrastructure_error(self, capsys, tmp_path):
        error = create_directory_read_error(tmp_path, PermissionError(13, "Permission denied"))

        exit_code = handle_cli_error(error, "sort")

        assert exit_code == 1
        assert "Infrastructure error" in capsys.readouterr().err

    def test_json_error_document(self, capsys, tmp_path):
        error = create_directory_read_error(tmp_path, PermissionError(13, "Permission denied"))

        exit_code = handle_cli_error(error, "sort", json_output=True)

        payload = json.loads(capsys.readouterr().out)
        assert exit_code == 1
        assert payload["success"] is False
        assert payload["error"]["code"] == "DIRECTORY_READ_FAILED"
        assert payload["error"]["exit_code"] == 1

    def test_keyboard_interrupt(self, capsys):
        assert handle_cli_error(KeyboardInterrupt(), "sort") == 130

    def test_unexpected_error(self, capsys):
        exit_code = handle_cli_error(RuntimeError("surprise"), "sort")

        assert exit_code == 1
        assert "Unexpected error: surprise" in capsys.readouterr().err
