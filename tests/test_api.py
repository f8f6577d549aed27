"""
Tests for the IndentGuard API facade.
"""

from pathlib import Path

import pytest

from indentguard import IndentGuard, IndentGuardConfig
from indentguard.analysis import Direction
from indentguard.analysis.diagnostics import ErrorCategory

GOOD_SOURCE = "class A {\n    int x;\n}\n"
BAD_SOURCE = "class A {\n    void f() {\n      int x;\n    }\n}\n"


@pytest.fixture
def project(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "Good.java").write_text(GOOD_SOURCE)
    (tmp_path / "src" / "Bad.java").write_text(BAD_SOURCE)
    (tmp_path / "notes.txt").write_text("  not code {\n")
    return tmp_path


class TestInMemory:
    """Tests for checking lines and text."""

    def test_check_lines(self):
        """Test checking a list of lines."""
        result = IndentGuard().check_lines(["class A {", "  x;", "}"], file_path="A.java")

        assert result.file_path == "A.java"
        assert result.problem_count == 0
        assert result.report.indent_unit == 2

    def test_check_text(self):
        """Test that text is split into lines without a phantom last line."""
        result = IndentGuard().check_text(BAD_SOURCE)

        assert result.report.line_count == 5
        assert result.problem_count == 1
        assert result.report.problems[0].direction is Direction.UNDER

    def test_config_drives_analyzer(self):
        """Test that analysis settings reach the analyzer."""
        config = IndentGuardConfig.default()
        config.analysis_settings.indent_unit = 2
        result = IndentGuard(config).check_text(GOOD_SOURCE)

        assert result.report.indent_unit == 2
        assert result.report.problems[0].direction is Direction.OVER

    def test_disabled_by_config(self):
        """Test that the enabled switch turns checking off."""
        config = IndentGuardConfig.default()
        config.analysis_settings.enabled = False
        result = IndentGuard(config).check_text(BAD_SOURCE)

        assert not result.report.enabled
        assert result.problem_count == 0


class TestCheckPath:
    """Tests for checking files and directories."""

    def test_single_file(self, project):
        """Test checking one file."""
        result = IndentGuard().check_file(project / "src" / "Bad.java")

        assert result.success
        assert len(result.files) == 1
        assert result.total_problems == 1

    def test_directory(self, project):
        """Test that a directory is checked file by file in sorted order."""
        result = IndentGuard().check_path(project)

        assert result.success
        assert [Path(f.file_path).name for f in result.files] == ["Bad.java", "Good.java"]
        assert len(result.files_with_problems) == 1
        assert result.metadata["path"] == str(project)
        assert "duration_seconds" in result.metadata

    def test_parallel_matches_sequential(self, project):
        """Test that worker threads produce the same results in the same order."""
        config = IndentGuardConfig.default()
        config.discovery_settings.max_workers = 4

        parallel = IndentGuard(config).check_path(project)
        sequential = IndentGuard().check_path(project)

        assert [f.file_path for f in parallel.files] == [f.file_path for f in sequential.files]
        assert parallel.total_problems == sequential.total_problems

    def test_missing_path(self, tmp_path):
        """Test that a nonexistent path is reported, not raised."""
        result = IndentGuard().check_path(tmp_path / "missing")

        assert not result.success
        assert result.files == []
        assert result.errors[0].category is ErrorCategory.FILE_ACCESS

    def test_empty_directory_warns(self, tmp_path):
        """Test that a directory without sources yields a warning."""
        result = IndentGuard().check_path(tmp_path)

        assert result.success
        assert result.files == []
        assert result.warnings

    def test_file_too_large(self, project):
        """Test that oversized files are skipped with an error record."""
        config = IndentGuardConfig.default()
        config.discovery_settings.max_file_size = 30
        result = IndentGuard(config).check_path(project)

        assert not result.success
        assert len(result.files) == 1
        assert result.files[0].file_path.endswith("Good.java")
        assert result.errors[0].category is ErrorCategory.FILE_TOO_LARGE
        assert result.errors[0].suggested_fixes

    def test_undecodable_file(self, tmp_path):
        """Test that a file in the wrong encoding is reported as an encoding error."""
        path = tmp_path / "Latin.java"
        path.write_bytes("class A {\n    String s = \"\xe9\";\n}\n".encode("latin-1"))

        result = IndentGuard().check_path(path)
        assert result.errors[0].category is ErrorCategory.ENCODING_ERROR

        config = IndentGuardConfig.default()
        config.discovery_settings.encoding = "latin-1"
        assert IndentGuard(config).check_path(path).success

    def test_unknown_encoding(self, project):
        """Test that an unknown codec name becomes an error record per file."""
        config = IndentGuardConfig.default()
        config.discovery_settings.encoding = "utf-9"
        result = IndentGuard(config).check_path(project / "src")

        assert not result.success
        assert result.files == []
        assert [e.category for e in result.errors] == [ErrorCategory.ENCODING_ERROR] * 2
        assert "utf-9" in result.errors[0].message

    def test_error_summary(self, tmp_path):
        """Test the aggregated error summary."""
        guard = IndentGuard()
        summary = guard.get_error_summary(guard.check_path(tmp_path / "missing"))

        assert summary["total_errors"] == 1
        assert summary["by_category"] == {"FILE_ACCESS": 1}

    def test_to_dict(self, project):
        """Test the serialized result shape."""
        data = IndentGuard().check_path(project).to_dict()

        assert data["summary"] == {
            "files_checked": 2,
            "files_with_problems": 1,
            "total_problems": 1,
            "errors": 0,
        }
        assert data["files"][0]["problems"][0]["line_number"] == 3
