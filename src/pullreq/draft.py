"""Composing the editable pull request draft."""

import os

from .git_utils import get_commit_logs
from .refs import local_branch

MESSAGE_FILE_NAME = "PULLREQ_EDITMSG"

DRAFT_TEMPLATE = """
# Requesting a pull to {base} from {head}
#
# Write a message for this pull request. The first block
# of the text is the title and the rest is description.
#
# Changes:
#
{changes}
"""


def format_commit_logs(commit_logs: str) -> str:
    """Turn commit log text into comment lines with no trailing spaces."""
    lines = commit_logs.strip().split("\n")
    return "\n".join(f"# {line}".rstrip(" ") for line in lines)


def build_draft(base: str, head: str, commit_logs: str) -> str:
    """
    Build the initial content of the message file.

    Args:
        base: Base branch reference as given by the user
        head: Head branch reference as given by the user
        commit_logs: Log of commits between base and head

    Returns:
        Draft text with everything except the empty first line commented out
    """
    return DRAFT_TEMPLATE.format(
        base=base,
        head=head,
        changes=format_commit_logs(commit_logs),
    )


def write_draft(
    path: str,
    base: str,
    head: str,
    commit_logs: str | None = None,
    cwd: str | None = None,
) -> None:
    """
    Write the pull request draft to path, replacing any previous draft.

    If commit_logs is None, the log between the local base and head
    branches is read from git.

    Raises:
        OSError: If the file cannot be written
        GitError: If the commit log cannot be read
    """
    if commit_logs is None:
        commit_logs = get_commit_logs(local_branch(base), local_branch(head), cwd=cwd)

    with open(path, "w", encoding="utf-8") as f:
        f.write(build_draft(base, head, commit_logs))
    os.chmod(path, 0o644)
