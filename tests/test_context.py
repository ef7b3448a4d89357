"""Tests for lazily resolved repository settings."""

import os
from unittest.mock import patch

from pullreq.context import RepoContext


class TestRepoContext:
    """Tests for RepoContext."""

    def test_explicit_values_skip_git(self):
        """Test that explicit values never run git."""
        with patch("pullreq.context.git_utils") as mock_git:
            context = RepoContext(
                owner="octocat", repo="hello-world", current_branch="feature", editor="nano", git_dir="/repo/.git"
            )
            assert context.default_base() == "octocat:master"
            assert context.default_head() == "octocat:feature"
            assert context.editor == "nano"
            assert context.message_file == os.path.join("/repo/.git", "PULLREQ_EDITMSG")
        assert mock_git.mock_calls == []

    def test_nothing_read_on_construction(self):
        """Test that construction does not run git."""
        with patch("pullreq.context.git_utils") as mock_git:
            RepoContext(cwd="/repo")
        assert mock_git.mock_calls == []

    def test_values_read_once(self):
        """Test that each value is read from git once."""
        with patch("pullreq.context.git_utils") as mock_git:
            mock_git.get_owner.return_value = "octocat"
            context = RepoContext(cwd="/repo")
            assert context.owner == "octocat"
            assert context.owner == "octocat"
        mock_git.get_owner.assert_called_once_with(cwd="/repo")

    def test_defaults_from_git(self):
        """Test default base and head from git values."""
        with patch("pullreq.context.git_utils") as mock_git:
            mock_git.get_owner.return_value = "octocat"
            mock_git.get_current_branch.return_value = "fix/login"
            context = RepoContext()
            assert context.default_base() == "octocat:master"
            assert context.default_head() == "octocat:fix/login"
