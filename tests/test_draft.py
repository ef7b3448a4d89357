"""Tests for composing the pull request draft."""

import os
import stat
from unittest.mock import patch

import pytest

from pullreq.draft import build_draft, format_commit_logs, write_draft
from pullreq.message import read_title_and_body_from_file

SAMPLE_LOGS = """
a1b2c3d (Jane Doe, 2 hours ago)   
   Fix login redirect   

   The redirect dropped the next parameter.

e4f5a6b (Jane Doe, 3 hours ago)
   Add login tests
"""


class TestFormatCommitLogs:
    """Tests for format_commit_logs."""

    def test_every_line_commented(self):
        """Test that every log line becomes a comment."""
        result = format_commit_logs(SAMPLE_LOGS)
        for line in result.split("\n"):
            assert line.startswith("#")

    def test_no_trailing_spaces(self):
        """Test that trailing spaces are stripped from every line."""
        result = format_commit_logs(SAMPLE_LOGS)
        for line in result.split("\n"):
            assert line == line.rstrip(" ")

    def test_exact_output(self):
        """Test the formatted log line by line."""
        result = format_commit_logs(SAMPLE_LOGS)
        assert result == (
            "# a1b2c3d (Jane Doe, 2 hours ago)\n"
            "#    Fix login redirect\n"
            "#\n"
            "#    The redirect dropped the next parameter.\n"
            "#\n"
            "# e4f5a6b (Jane Doe, 3 hours ago)\n"
            "#    Add login tests"
        )

    def test_empty_log(self):
        """Test that an empty log becomes a single comment marker."""
        assert format_commit_logs("") == "#"
        assert format_commit_logs("\n\n  \n") == "#"


class TestBuildDraft:
    """Tests for build_draft."""

    def test_template(self):
        """Test the full draft template."""
        result = build_draft("octocat:master", "octocat:feature", "abc123 (Jane, now)\n   Fix")
        assert result == (
            "\n"
            "# Requesting a pull to octocat:master from octocat:feature\n"
            "#\n"
            "# Write a message for this pull request. The first block\n"
            "# of the text is the title and the rest is description.\n"
            "#\n"
            "# Changes:\n"
            "#\n"
            "# abc123 (Jane, now)\n"
            "#    Fix\n"
        )

    def test_braces_in_log_kept(self):
        """Test that braces in commit subjects are written literally."""
        result = build_draft("master", "feature", "abc Use {placeholder}")
        assert "# abc Use {placeholder}" in result


class TestWriteDraft:
    """Tests for write_draft."""

    def test_writes_file_with_permissions(self, tmp_path):
        """Test that the draft is written world-readable."""
        path = tmp_path / "PULLREQ_EDITMSG"

        write_draft(str(path), "octocat:master", "octocat:feature", commit_logs="abc Fix")

        assert path.read_text(encoding="utf-8").startswith("\n# Requesting a pull to octocat:master")
        assert stat.S_IMODE(os.stat(path).st_mode) == 0o644

    def test_overwrites_stale_draft(self, tmp_path):
        """Test that a draft from an earlier run is replaced."""
        path = tmp_path / "PULLREQ_EDITMSG"
        path.write_text("Old title\n\nOld body\n")

        write_draft(str(path), "master", "feature", commit_logs="abc Fix")

        assert "Old title" not in path.read_text()

    def test_fetches_logs_for_local_branches(self, tmp_path):
        """Test that the log is read for the local branch names."""
        path = tmp_path / "PULLREQ_EDITMSG"
        with patch("pullreq.draft.get_commit_logs") as mock_logs:
            mock_logs.return_value = "abc Fix"
            write_draft(str(path), "octocat/hello:master", "octocat:feature", cwd="/repo")

        mock_logs.assert_called_once_with("master", "feature", cwd="/repo")
        assert "# abc Fix" in path.read_text()

    def test_unedited_draft_has_no_title(self, tmp_path):
        """Test that an unedited draft parses to an empty message."""
        path = tmp_path / "PULLREQ_EDITMSG"
        write_draft(str(path), "master", "feature", commit_logs=SAMPLE_LOGS)

        result = read_title_and_body_from_file(str(path))

        assert result.title == ""
        assert result.body == ""

    def test_missing_directory_raises(self, tmp_path):
        """Test that a write failure raises OSError."""
        with pytest.raises(OSError):
            write_draft(str(tmp_path / "missing" / "PULLREQ_EDITMSG"), "master", "feature", commit_logs="")
