"""Git utilities for inspecting the local repository."""

import logging
import os
import re
import subprocess

logger = logging.getLogger(__name__)

# Format used for the commit summaries shown in the pull request draft
COMMIT_LOG_FORMAT = "%h (%aN, %ar)%n%w(78,3,3)%s%n%+b"

# Matches git@github.com:owner/repo.git, https://github.com/owner/repo(.git)
# and ssh://git@github.com/owner/repo.git
REMOTE_URL_PATTERN = re.compile(
    r"^(?:[\w+-]+://)?(?:[^@/]+@)?[^:/]+[:/]"
    r"(?P<owner>[^/]+)/(?P<repo>[^/]+?)(?:\.git)?/?$"
)


class GitError(RuntimeError):
    """A git command failed."""


def run_git(args: list[str], cwd: str | None = None) -> str:
    """
    Run a git command and return its stdout.

    Args:
        args: Arguments passed to git
        cwd: Working directory to run git in (default: current directory)

    Returns:
        Command output with surrounding whitespace removed

    Raises:
        GitError: If git is missing or the command fails
    """
    cmd = ["git", *args]
    logger.debug("Running: %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, cwd=cwd)
    except FileNotFoundError:
        raise GitError("git not found. Is git installed and in your PATH?") from None

    if result.returncode != 0:
        raise GitError(f"git {args[0]} failed: {result.stderr.strip()}")

    return result.stdout.strip()


def get_remote_url(remote: str = "origin", cwd: str | None = None) -> str:
    """Get the configured URL of a remote."""
    return run_git(["config", "--get", f"remote.{remote}.url"], cwd=cwd)


def parse_remote_url(url: str) -> tuple[str, str]:
    """
    Extract owner and repository name from a remote URL.

    Args:
        url: Remote URL in SSH, scp-like or HTTPS form

    Returns:
        (owner, repo) tuple

    Raises:
        GitError: If the URL does not name an owner/repo
    """
    match = REMOTE_URL_PATTERN.match(url.strip())
    if not match:
        raise GitError(f"Cannot determine owner/repo from remote URL: {url}")
    return match.group("owner"), match.group("repo")


def get_owner(cwd: str | None = None) -> str:
    """Get the owner of the origin repository."""
    owner, _ = parse_remote_url(get_remote_url(cwd=cwd))
    return owner


def get_repo(cwd: str | None = None) -> str:
    """Get the name of the origin repository."""
    _, repo = parse_remote_url(get_remote_url(cwd=cwd))
    return repo


def get_current_branch(cwd: str | None = None) -> str:
    """Get the name of the checked out branch."""
    branch = run_git(["rev-parse", "--abbrev-ref", "HEAD"], cwd=cwd)
    return branch.removeprefix("refs/heads/")


def get_editor(cwd: str | None = None) -> str:
    """Get the editor git would use (GIT_EDITOR, core.editor, VISUAL, EDITOR)."""
    return run_git(["var", "GIT_EDITOR"], cwd=cwd)


def get_git_dir(cwd: str | None = None) -> str:
    """Get the path of the repository's .git directory."""
    git_dir = run_git(["rev-parse", "--git-dir"], cwd=cwd)
    return os.path.join(cwd or os.getcwd(), git_dir)


def get_commit_logs(from_ref: str, to_ref: str, cwd: str | None = None) -> str:
    """
    Get human readable summaries of commits on to_ref that are not on from_ref.

    Args:
        from_ref: Base branch
        to_ref: Head branch
        cwd: Working directory to run git in (default: current directory)

    Returns:
        Commit log text, newest first
    """
    return run_git(
        [
            "log",
            "--no-color",
            f"--format={COMMIT_LOG_FORMAT}",
            "--cherry",
            f"{from_ref}...{to_ref}",
        ],
        cwd=cwd,
    )


def get_unpushed_commits(cwd: str | None = None) -> list[str] | None:
    """
    List commits on the current branch that are not on its upstream.

    Returns:
        One-line summaries of unpushed commits, or None if the branch has no upstream
    """
    upstream = subprocess.run(
        ["git", "rev-parse", "--abbrev-ref", "--symbolic-full-name", "@{upstream}"],
        capture_output=True,
        text=True,
        cwd=cwd,
    )
    if upstream.returncode != 0:
        logger.debug("No upstream configured: %s", upstream.stderr.strip())
        return None

    output = run_git(["log", "--oneline", "@{upstream}..HEAD"], cwd=cwd)
    return [line for line in output.split("\n") if line]
