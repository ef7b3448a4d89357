"""The pull request pipeline: draft, edit, parse, submit."""

import logging
from collections.abc import Callable

from . import (
    EmptyTitleError,
    IssuePullRequestParams,
    ParsedMessage,
    PullRequest,
    PullRequestParams,
    UnpushedCommitsError,
)
from .context import RepoContext
from .draft import write_draft
from .editor import build_editor_command, run_interactive
from .git_utils import get_unpushed_commits
from .github import create_pull_request, parse_issue_url
from .message import read_title_and_body_from_file

logger = logging.getLogger(__name__)

EditorRunner = Callable[[list[str]], None]


def edit_pull_request_message(
    message_file: str,
    base: str,
    head: str,
    editor: str,
    *,
    commit_logs: str | None = None,
    run_editor: EditorRunner = run_interactive,
    cwd: str | None = None,
) -> ParsedMessage:
    """
    Let the user write the pull request message in their editor.

    The message file is left in place afterwards, also on failure, so a
    draft is never lost.

    Raises:
        OSError: If the message file cannot be written or read
        EditorError: If the editor fails
        EmptyTitleError: If the user left the title empty
    """
    write_draft(message_file, base, head, commit_logs=commit_logs, cwd=cwd)

    run_editor(build_editor_command(editor, message_file))

    message = read_title_and_body_from_file(message_file)
    if not message.title:
        raise EmptyTitleError("Aborting due to empty pull request title")
    return message


def check_unpushed_commits(cwd: str | None = None) -> None:
    """
    Refuse to continue if the current branch is ahead of its upstream.

    Raises:
        UnpushedCommitsError: If there are local commits not yet pushed
    """
    unpushed = get_unpushed_commits(cwd=cwd)
    if unpushed is None:
        logger.debug("Current branch has no upstream, skipping unpushed commits check")
        return
    if unpushed:
        raise UnpushedCommitsError(
            f"Aborted: {len(unpushed)} commit(s) are not yet pushed to the upstream branch. "
            "(use -f to force submit a pull request anyway)"
        )


def submit_pull_request(
    context: RepoContext,
    base: str,
    head: str,
    *,
    title: str | None = None,
    issue: int | None = None,
    force: bool = False,
    run_editor: EditorRunner = run_interactive,
) -> PullRequest:
    """
    Open a pull request from head into base.

    The pull request is attached to an existing issue when issue is given or
    title is a GitHub issue URL. Otherwise title is used as is, and when it
    is missing the message is written in the editor.
    """
    if not force:
        check_unpushed_commits(cwd=context.cwd)

    if issue is None and title is not None:
        issue = parse_issue_url(title)

    if issue is not None:
        params = IssuePullRequestParams(issue=issue, base=base, head=head)
    elif title is not None:
        if not title.strip():
            raise EmptyTitleError("Aborting due to empty pull request title")
        params = PullRequestParams(title=title.strip(), body="", base=base, head=head)
    else:
        message = edit_pull_request_message(
            context.message_file,
            base,
            head,
            context.editor,
            run_editor=run_editor,
            cwd=context.cwd,
        )
        params = PullRequestParams(title=message.title, body=message.body, base=base, head=head)

    return create_pull_request(context.owner, context.repo, params, cwd=context.cwd)
