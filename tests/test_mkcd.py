"""Tests for the mkcd pipeline."""

import pytest

from mkcd.core import MkcdResult, make_directory, run_mkcd
from mkcd.exceptions import DirectoryCreationError, HomeDirUnavailable, NotADirectory


class TestRunMkcd:
    """Test run_mkcd end to end against the filesystem."""

    def test_creates_relative_directory(self, work_dir):
        result = run_mkcd("new/nested")

        assert result == work_dir / "new" / "nested"
        assert result.is_dir()

    def test_existing_directory(self, work_dir):
        (work_dir / "existing").mkdir()

        assert run_mkcd("existing") == work_dir / "existing"

    def test_absolute_directory(self, tmp_path):
        target = tmp_path / "abs" / "dir"

        assert run_mkcd(str(target)) == target
        assert target.is_dir()

    def test_tilde_directory(self, home_dir):
        result = run_mkcd("~/mkcd_test_dir")

        assert result == home_dir / "mkcd_test_dir"
        assert result.is_dir()

    def test_idempotent(self, home_dir):
        first = run_mkcd("~/mkcd_test_dir")
        second = run_mkcd("~/mkcd_test_dir")

        assert first == second

    def test_file_in_the_way(self, work_dir):
        (work_dir / "file.txt").write_text("x")

        with pytest.raises(NotADirectory):
            run_mkcd("file.txt")

    def test_file_ancestor(self, work_dir):
        (work_dir / "file.txt").write_text("x")

        with pytest.raises(DirectoryCreationError):
            run_mkcd("file.txt/child")

    def test_home_unavailable(self, no_home):
        with pytest.raises(HomeDirUnavailable):
            run_mkcd("~/x")


class TestMakeDirectory:
    """Test the detailed result of make_directory."""

    def test_reports_created(self, work_dir):
        result = make_directory("fresh")

        assert result == MkcdResult(
            input_path="fresh", path=work_dir / "fresh", created=True
        )

    def test_reports_existing(self, work_dir):
        (work_dir / "old").mkdir()

        result = make_directory("old")

        assert result.created is False
        assert result.path == work_dir / "old"
