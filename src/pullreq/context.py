"""Lazily resolved repository settings."""

import os
from functools import cached_property

from . import git_utils
from .draft import MESSAGE_FILE_NAME


class RepoContext:
    """
    Settings the pull request command reads from git.

    Nothing is read from git until a property is first used. Any value can
    be given up front instead, which skips git for that value.
    """

    def __init__(
        self,
        cwd: str | None = None,
        *,
        owner: str | None = None,
        repo: str | None = None,
        current_branch: str | None = None,
        editor: str | None = None,
        git_dir: str | None = None,
    ):
        self.cwd = cwd
        overrides = {
            "owner": owner,
            "repo": repo,
            "current_branch": current_branch,
            "editor": editor,
            "git_dir": git_dir,
        }
        # cached_property reads from the instance dict first
        for name, value in overrides.items():
            if value is not None:
                self.__dict__[name] = value

    @cached_property
    def owner(self) -> str:
        return git_utils.get_owner(cwd=self.cwd)

    @cached_property
    def repo(self) -> str:
        return git_utils.get_repo(cwd=self.cwd)

    @cached_property
    def current_branch(self) -> str:
        return git_utils.get_current_branch(cwd=self.cwd)

    @cached_property
    def editor(self) -> str:
        return git_utils.get_editor(cwd=self.cwd)

    @cached_property
    def git_dir(self) -> str:
        return git_utils.get_git_dir(cwd=self.cwd)

    @property
    def message_file(self) -> str:
        return os.path.join(self.git_dir, MESSAGE_FILE_NAME)

    def default_base(self) -> str:
        """Default base: the owner's master branch."""
        return f"{self.owner}:master"

    def default_head(self) -> str:
        """Default head: the owner's copy of the current branch."""
        return f"{self.owner}:{self.current_branch}"
